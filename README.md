# dsbasics

Plain Python implementations of a handful of classic data structures. They
are small enough to read in one sitting. They support iteration and `str()`.
Most of them also support `len()`. They raise exceptions when an operation
cannot be done.

The package is a library only. It has no command-line program, and it does
not store anything on disk.

## Installation

```
pip install dsbasics
```

## What is included

| Module | Contents |
| --- | --- |
| `dsbasics.array_list` | `ArrayList`: an array-backed list with a starting capacity that grows by 5 slots each time it fills up. |
| `dsbasics.linked_list` | `LinkedList`: a singly linked list with insertion and deletion by position. |
| `dsbasics.queue_linked_list` | `LinkedQueue`: a FIFO queue built on linked nodes, plus `queue_length`. |
| `dsbasics.queue_list` | `SimpleQueue` and `CircularQueue`: bounded array queues, with `QueueEmptyError` and `QueueFullError` (both subclasses of `IndexError`). |
| `dsbasics.stack_linked_list` | `LinkedStack`: a LIFO stack built on linked nodes, plus `replace_item`. |

## Examples

### ArrayList

```python
from dsbasics.array_list import ArrayList

items = ArrayList(5)         # a capacity of 1 or less raises ValueError
for value in (10, 20, 30):
    items.append(value)

items.retrieve_at(1)         # 20
items.binary_search(30)      # 2; the contents must be sorted
items.insert(1, 500)
print(items)                 # 10 500 20 30
items.sequential_search(20)  # 2
items.max_item()             # 500
items.delete(0)              # 10
backup = items.copy()        # independent list with the same capacity
```

`retrieve_at`, `replace_at`, `delete` and `is_item_equal` raise `IndexError`
for an empty list or an index out of range. `max_item` and `min_item` raise
`ValueError` on an empty list. `str()` of an empty list is `"Array is empty"`.

### LinkedList

```python
from dsbasics.linked_list import LinkedList

chain = LinkedList()
chain.insert_at_position(0, 10)  # insert positions start at 0
chain.insert_at_position(1, 20)
chain.insert_at_position(2, 30)
chain.delete_at_position(1)      # returns 10; delete positions start at 1
list(chain)                      # [20, 30]
len(chain)                       # 2
```

A position that is out of range raises `IndexError`.

### Queues

```python
from dsbasics.queue_linked_list import LinkedQueue, queue_length
from dsbasics.queue_list import CircularQueue, QueueFullError

q = LinkedQueue()
for value in (10, 20, 30):
    q.enqueue(value)
queue_length(q)              # 3, and q is left as it was
q.dequeue()                  # 10

ring = CircularQueue(3)
ring.enqueue(1)
ring.enqueue(2)
ring.enqueue(3)
try:
    ring.enqueue(4)
except QueueFullError:
    pass
ring.dequeue()               # 1
ring.enqueue(4)              # the freed slot is reused
list(ring)                   # [2, 3, 4]
```

`SimpleQueue` is a linear queue. Dequeued slots are not reused until the
queue is empty again. A `SimpleQueue(3)` that has taken three items stays
full after one `dequeue()`. `front()`, `rear()` and `dequeue()` raise
`QueueEmptyError` on an empty queue. `LinkedQueue.dequeue()` raises
`IndexError` on an empty queue.

### Stack

```python
from dsbasics.stack_linked_list import LinkedStack, replace_item

stack = LinkedStack()
for value in (2, 3, 4, 3, 5):
    stack.push(value)
stack.pop()                  # 5
replace_item(stack, 3, 9)
print(stack)                 # 9 4 9 2  (top first)
```

`pop()` on an empty stack raises `IndexError`.

## Running the tests

```
pip install -e ".[test]"
pytest
```