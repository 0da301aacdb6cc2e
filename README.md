# dstructs

This is a small collection of classic data structures written in plain Python.
The package needs nothing outside the standard library.

## Contents

| Module                | What it provides |
|-----------------------|------------------|
| `dstructs.bintree`    | `BinaryNode` is a binary tree node with a parent link. It can step through a tree in in-order, pre-order and post-order, it offers `traverse`, `bfs` and `dfs` generators, and it supports `swap`, `replace` and `detach`. The module also has the `size`, `height`, `balance_factor` and `search_link` helpers, the `TraversalOrder` enum and `DuplicateKeyError`. |
| `dstructs.bst`        | `BinarySearchTree` is an unbalanced search tree over `BinaryNode` objects. |
| `dstructs.avl`        | `AVLTree` and `AVLNode` make a self-balancing search tree. A node's state is held in a `Balance` value. |
| `dstructs.array_heap` | `ArrayHeap` is a binary heap kept in a list. Its top item is the greatest under `cmp`. |
| `dstructs.mwaytree`   | `MwayNode` and `MwayEntry` are fixed-width nodes. Each slot holds one child link and one value. |
| `dstructs.trie`       | `Trie` maps strings to values over a fixed alphabet. It raises `UnknownSymbolError` for characters outside that alphabet. |
| `dstructs.slist`      | `SinglyLinkedList` is a forward-only list built from `SListItem` links. |
| `dstructs.dlist`      | `DoublyLinkedList` is a list built from `DListItem` links that can be walked and changed from either end. |
| `dstructs.clist`      | `CircularList` is an intrusive circular list of `ClistItem` hooks, anchored by a sentinel. |

### Comparison functions

The ordered structures take a comparison function `cmp(a, b)`. It returns:

- a negative number when `a` sorts before `b`;
- zero when the two are equal;
- a positive number otherwise.

The search trees use two kinds of comparison:

- Their `cmp` compares two nodes.
- Their `search(key, cmp)` takes a function `cmp(key, node)`.

### Teardown hooks

Several types have a `clear(deinit)` method. It empties the structure and passes each node or value to the optional `deinit` callable.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Search trees

```python
from dstructs.avl import AVLNode, AVLTree
from dstructs.bintree import DuplicateKeyError

def by_value(a, b):
    return (a.value > b.value) - (a.value < b.value)

tree = AVLTree(by_value)
for v in [5, 3, 8, 1, 4]:
    tree.add(AVLNode(v))

try:
    tree.add(AVLNode(3))
except DuplicateKeyError:
    pass

node = tree.search(4, lambda key, n: (key > n.value) - (key < n.value))
tree.remove(node)
print(len(tree), [n.value for n in tree])   # 4 [1, 3, 5, 8]
```

`BinarySearchTree` from `dstructs.bst` works the same way with `BinaryNode` objects, but it does no rebalancing.

### Binary tree nodes

```python
from dstructs.bintree import BinaryNode, TraversalOrder, height

root = BinaryNode(10)
root.left = BinaryNode(5)
root.right = BinaryNode(15)
root.left.left = BinaryNode(3)
root.left.right = BinaryNode(7)

print([n.value for n in root.traverse(TraversalOrder.PREORDER)])   # [10, 5, 3, 7, 15]
print([n.value for n in root.bfs()])                               # [10, 5, 15, 3, 7]
print(height(root), root.left.left.level())                        # 2 2
```

Assigning to `left` or `right` also sets the child's `parent`.

### Heap

```python
from dstructs.array_heap import ArrayHeap

heap = ArrayHeap(lambda a, b: (a > b) - (a < b))
for v in [3, 9, 1, 7]:
    heap.push(v)
print(heap.pop(), heap.pop())   # 9 7
```

Calling `pop` on an empty heap raises `IndexError`. To get a min-heap, pass a reversed comparison.

### Trie

```python
from dstructs.trie import Trie

trie = Trie(256, ord, chr)
trie.put("app", 1)
trie.put("apple", 2)
trie.put("application", 3)

print(trie.get("apple"))                                # 2
print("ap" in trie)                                     # False
print(trie.longest_prefix("applications"))              # 11
print([key for key, _ in trie.prefix_items("appl")])    # ['apple', 'application']
```

Rules for the trie:

- `put` returns the value it replaced, or `None`. Stored values must not be `None`.
- `get` and `remove` raise `KeyError` when a key is missing.
- `get` and `remove` raise `UnknownSymbolError` when a key contains a character that the mapper places outside the alphabet.
- `prefix_items` yields keys depth first, in slot order. It yields nothing for a prefix that is absent or that has unknown characters.

### Linked lists

```python
from dstructs.dlist import DoublyLinkedList
from dstructs.slist import SinglyLinkedList

items = DoublyLinkedList()
for v in [1, 2, 3]:
    items.push_back(v)
items.reverse()
print(list(items))   # [3, 2, 1]

forward = SinglyLinkedList()
for v in [30, 20, 10]:
    forward.push_front(v)
forward.remove_if(lambda v: v == 20)
print(list(forward))   # [10, 30]
```

For `CircularList`, make your own objects subclasses of `ClistItem`. The list links those objects directly and never creates or copies items.

```python
from dstructs.clist import CircularList, ClistItem

class Job(ClistItem):
    def __init__(self, name):
        super().__init__()
        self.name = name

queue = CircularList()
queue.push_back(Job("a"))
queue.push_back(Job("b"))
print(queue.pop_front().name, len(queue))   # a 1
```