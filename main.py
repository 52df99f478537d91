import logging

from alda import DHeap, get_topk

logging.basicConfig(level=logging.INFO)

NUM_ITEMS = 10000

# Create a binary heap (branching_factor=2)
print("Creating binary heap...")
heap = DHeap()

# 37 is coprime with NUM_ITEMS, so this visits every value in 1..NUM_ITEMS-1
i = 37
while i != 0:
    heap.insert(i)
    i = (i + 37) % NUM_ITEMS

print(f"Heap size: {len(heap)}")
print(f"Buffer capacity: {heap.capacity}")
print(f"First leaf index: {heap.first_leaf_index()}")
print(f"Smallest five: {get_topk(heap, 5)}")

errors = 0
for expected in range(1, NUM_ITEMS):
    if heap.delete_min() != expected:
        errors += 1
        logging.error("Oops! %d", expected)

print(f"Drained in order with {errors} errors, is empty: {heap.is_empty()}")
