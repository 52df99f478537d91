from alda.dheap.dheap import DEFAULT_CAPACITY, DHeap
from alda.dheap.exceptions import InvalidArgumentError, UnderflowError
from alda.dheap.topk import get_topk
