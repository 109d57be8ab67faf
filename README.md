# scutil

Small, dependency-free building blocks for systems-style Python code.

## Modules

- `scutil.hashmap` – `HashMap(capacity=0, load_factor=0)`, an open-addressing
  hash map with linear probing, a power-of-two table size and a load factor
  between 25 and 95 (0 selects the default of 75; anything else outside the
  range raises `ValueError`). Keys are `str`, `bytes` or `int`; `None` is
  accepted as a key too and is kept outside the table. `put`, `get` and
  `delete` return the value they found (or `None`), and `found()` tells
  whether the last of them found the key. `len()`, `capacity()`, `clear()`,
  `items()`, `keys()`, `values()` and iteration over keys are supported.
  Growing past 2³²−1 slots raises `MemoryError`.
- `scutil.hashing` – `murmurhash` (64-bit MurmurHash 64A folded to 32 bits),
  `hash_32` and `hash_64`, the hash functions the map uses.
- `scutil.logger` – `Logger` with levels (`LogLevel.DEBUG` … `LogLevel.OFF`,
  default `INFO`). Lines go to stdout (errors to stderr), to a pair of log
  files set with `set_file(prev, current)` — the current file is moved to
  `prev` once it passes 2 MiB — and to a callback `callback(level, message)`
  set with `set_callback`. `set_level` takes a level name in any case and
  raises `ValueError` for an unknown one. `set_thread_name` sets the name
  shown in each line logged from the calling thread.
- `scutil.memmap` – `MemoryMap(path, file_flags, prot, map_flags, offset,
  length)`, a memory-mapped file. When `prot` includes `PROT_WRITE` the file
  is extended to cover the mapping; a `length` of 0 maps to the end of the
  file. It supports indexing and slicing, `len()`, `msync(offset, length)`,
  `close()` and use as a context manager. Failures raise `OSError`.
- `scutil.mutex` – `Mutex`, a non-recursive lock with `lock()`, `unlock()`,
  `close()` and context-manager use. Closing a held mutex raises
  `RuntimeError`, as does locking a closed one.
- `scutil.option` – `Option(letter, name=None)` and
  `parse_option(options, arg)` for `-k`, `-k=value`, `--key` and
  `--key=value` arguments. It returns `(letter, value)`, with `""` as the
  value when none was given, and `("?", None)` for an unknown argument.

## Examples

```python
from scutil.hashmap import HashMap

m = HashMap()
m.put("jack", "chicago")
m.put("jane", "new york")
for key, value in m.items():
    print(key, value)

print(m.get("jane"), m.found())   # new york True
print(m.delete("nobody"), m.found())   # None False
```

```python
from scutil.logger import Logger

with Logger() as log:
    log.info("Hello %s!\n", "world")
    log.set_file("log.0.txt", "log-latest.txt")
    log.set_level("DEBUG")
    log.debug("to stdout and file\n")
```

```python
from scutil.memmap import MemoryMap
import os

with MemoryMap("x.bin", os.O_RDWR | os.O_CREAT | os.O_TRUNC, length=8192) as mm:
    mm[0] = ord("x")
    mm.msync(0, 4096)
```

```python
from scutil.option import Option, parse_option

options = [Option("m"), Option("k", "key"), Option("h", "help")]
letter, value = parse_option(options, "--key=value")   # ("k", "value")
```

## What it does not do

There are no typed map classes; `HashMap` takes any `str`, `bytes` or `int`
keys and any values. The package provides no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```