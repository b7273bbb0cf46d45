# tdas

A small collection of classic abstract data types, together with a web
server log analyzer built on top of them. The package has no dependencies
beyond the standard library.

## Data types

| Module                | Type               | What it is                                        |
|-----------------------|--------------------|---------------------------------------------------|
| `tdas.pila`           | `Stack`            | Last-in, first-out stack                          |
| `tdas.cola`           | `Queue`            | Linked first-in, first-out queue                  |
| `tdas.lista`          | `LinkedList`       | Singly linked list with an editing `ListIterator` |
| `tdas.cola_prioridad` | `Heap`             | Binary max-heap driven by a comparison function   |
| `tdas.hashtable`      | `HashDictionary`   | Hash table with open addressing and linear probing |
| `tdas.abb`            | `BinarySearchTree` | Ordered dictionary with range iteration           |

All containers support `len()`. `LinkedList`, `HashDictionary` and
`BinarySearchTree` can be iterated with `for`; the dictionaries yield
`(key, value)` pairs (in table order for `HashDictionary`, in ascending key
order for `BinarySearchTree`) and support `in`.

Each also offers:

- an internal iterator, `iterate(visit)`, which calls `visit` on each item
  (or key and value) until it returns `False`;
- an external iterator, `iterator()`, with `has_next()`, `current()` and
  `advance()`. The `ListIterator` from `LinkedList.iterator()` can also
  `insert(item)` before its position and `remove()` the current item.
  `BinarySearchTree` adds `iterate_range(start, end, visit)` and
  `iterator_range(start, end)`, which cover keys with `start <= key <= end`;
  a bound of `None` leaves that side open.

`tdas.cola_prioridad` also provides `heap_from_list(items, cmp)`, which
builds a heap from a copy of the items, and `heap_sort(items, cmp)`, which
sorts a list in place in ascending order according to `cmp`.

`tdas.hashtable.hash_bytes(data)` is the 63-bit xxhash64-style digest the
hash table uses on `str(key).encode()`.

### Errors

Failures are raised as exceptions from `tdas.errors`:

| Exception                | Raised when                                   | Also a      |
|--------------------------|-----------------------------------------------|-------------|
| `EmptyStackError`        | peeking or popping an empty `Stack`           | `IndexError`  |
| `EmptyQueueError`        | peeking or dequeuing an empty `Queue` or `Heap` | `IndexError`  |
| `EmptyListError`         | peeking or removing from an empty `LinkedList`  | `IndexError`  |
| `KeyNotFoundError`       | `get` or `delete` of a missing key            | `KeyError`    |
| `IteratorExhaustedError` | using an external iterator that has finished  | `LookupError` |

### Examples

```python
from tdas.pila import Stack
from tdas.cola_prioridad import Heap, heap_sort
from tdas.abb import BinarySearchTree
from tdas.hashtable import HashDictionary

stack = Stack()
stack.push(1)
stack.push(2)
assert stack.pop() == 2

heap = Heap(lambda a, b: a - b)   # max-heap of ints
for n in (3, 5, 1):
    heap.enqueue(n)
assert heap.peek_max() == 5

items = [3, 1, 2]
heap_sort(items, lambda a, b: a - b)
assert items == [1, 2, 3]

tree = BinarySearchTree(lambda a, b: a - b)
for k in (10, 5, 15, 7):
    tree.put(k, str(k))
visited = []
tree.iterate_range(5, 10, lambda k, v: visited.append(k) or True)
assert visited == [5, 7, 10]

table = HashDictionary()
table.put("cat", "meow")
assert "cat" in table and table.get("cat") == "meow"
```

Comparison functions follow the usual convention: negative when the first
argument is smaller, zero when equal, positive when larger. A heap always
yields the element its comparison function considers largest.

## Log analysis

`tdas.analyzer.LogAnalyzer` reads access logs whose lines hold
whitespace-separated fields: IP address, timestamp in the form
`2024-01-02T15:04:05-03:00`, method and resource.

```python
from tdas.analyzer import LogAnalyzer

analyzer = LogAnalyzer()
suspects = analyzer.add_file("access.log")   # IPs flagged as DoS, sorted
in_range = analyzer.visitors("10.0.0.0", "10.0.0.255")
top = analyzer.most_visited(3)               # Resource(name, visits) items
```

- `add_file(path)` loads one file and returns the IPs flagged as
  denial-of-service sources in that file. Visitors and resource counts
  accumulate over every file added. It raises `OSError` if the file cannot
  be read and `ValueError` on a line with too few fields or a bad timestamp.
- `visitors(ip1, ip2)` returns every IP seen between the two addresses
  inclusive, in numeric order, and raises `LookupError` if there are none.
- `most_visited(count)` returns up to `count` `Resource` records, most
  visited first, and raises `LookupError` if nothing has been loaded.

An IP is flagged when it makes five requests within less than two seconds
(`tdas.dos.DoSDetector`, with `add_visit(ip, when)` and `attackers()`).
Addresses are ordered numerically by octet; `compare_ips(ip1, ip2)` returns
-1, 0 or 1.

## What it does not do

The package is a library only: it installs no command-line program, and the
log analyzer has to be driven from Python code. Results are kept in memory
and are not stored between runs.

## Running the tests

```
pip install -e .[test]
pytest
```