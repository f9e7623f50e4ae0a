# sszkit

Encode, decode and merkleize values with SimpleSerialize (SSZ).

A type object describes how a plain Python value is laid out. Each of
`Boolean()`, `Uint(bits)`, `Bitlist(bound)`, `Bitvector(length)`,
`Array(element_type, length)`, `Container(fields)` and `Union(options)`
offers `serialize(value)`, `deserialize(data)` and `hash_tree_root(value)`,
along with `is_variable_size()` and `size_hint()`.

Values are ordinary Python objects:

| Type | Value |
| --- | --- |
| `Boolean()` | `bool` |
| `Uint(bits)`, bits in 8, 16, 32, 64, 128, 256 | `int` |
| `Bitlist(bound)` | `list[bool]` of at most `bound` items |
| `Bitvector(length)` | `list[bool]` of exactly `length` items |
| `Array(element_type, length)` | `list` of exactly `length` items |
| `Container(fields)` | `dict` from field name to value |
| `Union(options)` | `(selector, value)` pair |

## Installation

```
pip install sszkit
```

## Usage

Basic types, with module-level helpers:

```python
from sszkit.basic import Boolean, Uint, serialize, deserialize, hash_tree_root

assert serialize(Uint(16), 65535) == b"\xff\xff"
assert deserialize(Boolean(), b"\x01") is True
assert hash_tree_root(Uint(8), 255) == b"\xff" + bytes(31)
```

Bit collections:

```python
from sszkit.bitlist import Bitlist
from sszkit.bitvector import Bitvector

bits = Bitlist(256)
value = bits.from_bools([False, True])
assert bits.serialize(value) == b"\x06"
assert bits.deserialize(b"\x06") == [False, True]

vector = Bitvector(4)
assert vector.deserialize(b"\x0c") == [False, False, True, True]
print(vector.format([False, False, True, True]))  # Bitvector<4>[0011]
```

Fixed-length arrays:

```python
from sszkit.basic import Uint
from sszkit.composite import Array

pair = Array(Uint(16), 2)
assert pair.serialize([1, 2]) == b"\x01\x00\x02\x00"
```

Containers hold named fields in order, given as a mapping or as
`(name, type)` pairs; `default()` returns every field at its zero value:

```python
from sszkit.basic import Boolean, Uint
from sszkit.container import Container

basic = Container({"a": Uint(32), "d": Boolean()})
assert basic.serialize({"a": 5, "d": True}) == b"\x05\x00\x00\x00\x01"
assert basic.deserialize(b"\x05\x00\x00\x00\x01") == {"a": 5, "d": True}
assert basic.default() == {"a": 0, "d": False}
```

Unions take a sequence of option types; only the first may be `None`:

```python
from sszkit.basic import Uint
from sszkit.bitlist import Bitlist
from sszkit.union import Union

either = Union([Uint(32), Bitlist(32)])
assert either.serialize((0, 5)) == b"\x00\x05\x00\x00\x00"
assert either.deserialize(b"\x00\x05\x00\x00\x00") == (0, 5)
```

The tree helpers in `sszkit.merkle` (`merkleize`, `pack_bytes`,
`mix_in_length`, `mix_in_selector`, `hash_nodes`, `zero_hash`) and the
composite helpers in `sszkit.composite` (`serialize_composite`,
`deserialize_homogeneous_composite`, `chunk_roots`) can be used directly to
build further types.

## Errors

Every error is a subclass of `sszkit.errors.SszError`. Malformed input raises
a `DeserializeError` such as `ExpectedFurtherInput`, `AdditionalInput`,
`InvalidByte`, `InvalidInstance`, `InvalidType`, `InvalidOffsetsLength` or
`OffsetNotIncreasing`. Values that cannot be encoded raise `SerializeError`,
and values that cannot be rooted raise `MerkleizationError`.

## What it does not do

- There is no variable-length list type other than `Bitlist`, and no
  byte-vector type; sequences of elements are covered only by the
  fixed-length `Array`.
- Types are described by objects, not by decorating classes; decoded values
  are plain dicts, lists and tuples.
- It reads and writes raw SSZ bytes only: no compression, no JSON form and
  no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```