from typing import Any

from alda.dheap.dheap import DHeap


def get_topk(heap: DHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The K elements that come first under the heap's comparator are returned
    in order. The heap itself is left untouched: the occupied slots are bulk
    loaded into a scratch heap with the same branching factor and comparator,
    which is then drained.

    Parameters
    ----------
    heap : DHeap
        A DHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, at most ``len(heap)`` of them.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = DHeap.from_iterable(
        [heap.get(i) for i in range(1, heap.size() + 1)],
        branching_factor=heap.branching_factor,
        less=heap.less,
    )
    return [scratch.delete_min() for _ in range(min(k, len(scratch)))]
