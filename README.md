# mlcore

Building blocks for application and controller code that works with named,
typed data. Pure Python, no dependencies.

- `mlcore.symbol`: interned `Symbol` objects backed by a process-wide `SymbolTable`
  (see `symbol_table()`), plus the `kr_hash` and `symbol_hash` functions.
- `mlcore.path`: `Path`, a sequence of at most 15 symbols parsed from text such as
  `"a/b/c"`, with the helpers `head`, `tail`, `but_last`, `last`, `last_n`, `substitute`,
  `path_to_text` and `text_to_path`.
- `mlcore.value`: `Value`, a small typed datum (undefined, single-precision float, text,
  unsigned 32-bit number, or a blob of up to 512 bytes), its `ValueType` enum and
  `NamedValue`.
- `mlcore.tree`: `Tree`, a recursive map from paths to values with parents-first iteration,
  plus `tree_node_exists` and `keep_nodes_in_list`.
- `mlcore.collection`: `Collection` and `CollectionRoot`, trees of objects addressed by
  path, with sub-collections and per-object or per-child callbacks.
- `mlcore.valuechange`: `ValueChange`, a record of a value at a path changing from an
  old value to a new one.
- `mlcore.text`: UTF-8 and code-point helpers such as `validate_code_point`,
  `text_to_bytes`, `bytes_to_text` and `code_points_to_text`.
- `mlcore.clock`: 32:32 fixed-point NTP-style times (`time_to_float`, `float_to_time`,
  `samples_at_rate_to_time`) and a `Clock` that can be stopped, started and advanced.
- `mlcore.spscqueue`: `Queue`, a fixed-size single-producer, single-consumer ring queue.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from mlcore.path import Path
from mlcore.tree import Tree
from mlcore.value import Value

props = Tree()
props["synth/osc/freq"] = Value(440.0)
props["synth/name"] = Value("lead")

assert props["synth/osc/freq"].get_float() == 440.0
assert [str(p) for p, _ in props.items()] == ["synth/osc/freq", "synth/name"]
```

Times are stored as integers whose upper 32 bits count seconds and lower
32 bits hold the fraction:

```python
from mlcore.clock import float_to_time, time_to_float

t = float_to_time(1.5)
assert time_to_float(t) == 1.5
```

The queue keeps one slot free, so its storage is the next power of two
above the requested capacity:

```python
from mlcore.spscqueue import Queue

q = Queue(3)
assert q.size() == 4
assert q.push("a") and q.push("b") and q.push("c")
assert not q.push("d")
assert q.pop() == "a"
```

## What it does not do

The package holds data in memory only. It has no way to save a tree of
values to bytes, JSON or a file and read it back, no message types or
message dispatch to the objects in a collection, and no general text
helpers such as number formatting, splitting, base64 or encryption.
There is no command-line program.