# zcore

Small, dependency-free building blocks for Python 3.10 and later.

## Modules

- `zcore.memory` has these helpers:
  - `is_power_of_two`.
  - `align_forward`, which rounds up to a power-of-two alignment.
  - `align_forward_value`, which rounds up to any positive alignment.
  - `memcompare`, which returns the difference of the first differing bytes, or 0.
  - The size units `kilobytes`, `megabytes`, `gigabytes` and `terabytes`.
- `zcore.buffer.FixedBuffer` is a sequence with a fixed capacity.
  - `append` and `extend` raise `OverflowError` when the items do not fit.
  - `pop` raises `IndexError` on an empty buffer.
- `zcore.linked_list.ListNode` is a doubly linked list node.
  - `add` inserts a node after this one and returns the inserted node.
  - `remove` unlinks the node from its predecessor and returns the next node.
  - Iterating over a node yields the values from that node to the end of the list.
- `zcore.ring.RingBuffer` is a circular FIFO queue holding at most `max_size` items.
  - When it is full, appending drops the oldest item.
  - `get` returns `None` when the ring is empty.
  - `get_array(n)` takes at most `n - 1` items. `get_array(0)` takes them all.
- `zcore.node` defines `Node`, the tree that both parsers produce, together with its enums:
  - `NodeType`
  - `NameStyle`
  - `AssignStyle`
  - `DelimStyle`
  - `Props`
- `zcore.json_parser` reads and writes JSON5-style text.
  - `parse(text)` returns a `Node`, or raises `JsonError` (its `code` is a `JsonErrorCode`).
  - `parse` accepts `//` and `/* */` comments, unquoted, single- or double-quoted keys, and `:`, `=` or `|` between a name and its value.
  - It accepts `,`, newline or `|` between pairs, backtick multi-line strings, hexadecimal numbers, and `true`, `false`, `null`, `Infinity`, `-Infinity`, `NaN` and `-NaN`.
  - A document that does not start with `{` or `[` is read as a flat list of pairs and marked `cfg_mode`.
  - `write(node, indent)` renders a tree back to text and keeps the quoting, assignment and delimiter style recorded at parse time.
- `zcore.csv_parser` reads and writes delimiter-separated tables.
  - `parse(text, has_header, delimiter)` stores the table column by column. The root holds one child node per column.
  - With a header, the root is an object and each column is named. Without one, the root is an array.
  - Quoted fields and `""` escapes are supported.
  - A field that is a number literal becomes a numeric node.
  - A row with a different number of fields, or empty input, raises `CsvError` (with a `CsvErrorCode`).
  - `write(node, delimiter)` renders the table back to text.
- `zcore.timer` provides `Timer` and `TimerPool`.
  - A timer calls its callback every `duration` seconds, `count` times; a count of -1 repeats forever.
  - A timer fires only from `update()`.
  - Time comes from the clock you pass in, or from `time.monotonic` when none is given.
- `zcore.affinity.Affinity` reports `core_count`, `threads_per_core`, `thread_count` and `is_accurate`.
  - The core count comes from the online processor count.
  - `threads_per_core` comes from the `cpu cores` line of `/proc/cpuinfo`; `parse_threads_per_core` reads that line from a given text.
  - `Affinity.set` does not pin threads. It always returns `True`.
- `zcore.process.Process` starts a child process with stdin, stdout and stderr piped.
  - `ProcessOptions` flags select these behaviours:
    - `INHERIT_ENV` passes this process's environment to the child.
    - `CUSTOM_ENV` passes an environment you supply, as a mapping or as `NAME=value` strings.
    - With neither flag, the child gets an empty environment.
    - `COMBINE_STD_OUTPUT` merges stderr into stdout.
  - `join()` closes stdin, waits for the child and returns its exit code.
  - `terminate(err_code)` kills the child.
  - `destroy()` closes the pipes and releases the child without waiting for it.
  - `Process` is a context manager; leaving the `with` block calls `destroy()`.
  - Failing to start raises `ProcessError`.

## What it does not do

zcore has no regular-expression engine. It has no locks, semaphores, barriers, atomics, memory fences or thread wrappers either; use the standard library's `re` and `threading` modules for those. Running `set` on `Affinity` does not change which CPU a thread runs on.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

JSON5:

```python
from zcore import json_parser

root = json_parser.parse("{ name = 'zcore', size: 3 }")
print(root.find("size").integer)   # 3
text = json_parser.write(root, 0)
```

CSV:

```python
from zcore import csv_parser

table = csv_parser.parse("a,b\n1,2\n", True, ",")
print(table.find("b").nodes[0].integer)   # 2
print(csv_parser.write(table, ","))
```

Ring buffer:

```python
from zcore.ring import RingBuffer

ring = RingBuffer(3)
ring.extend([1, 2, 3, 4])
ring.get()  # 2
```

Timers:

```python
import time
from zcore.timer import TimerPool

pool = TimerPool(time.monotonic)
t = pool.add()
t.set(0.5, 3, lambda data: print("tick"))
t.start(0.0)
pool.update()
```

Child processes:

```python
from zcore.process import Process, ProcessOptions

proc = Process(["echo", "hello"], options=ProcessOptions.INHERIT_ENV)
output = proc.stdout.read()
code = proc.join()
```