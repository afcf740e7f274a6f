# cratekit

cratekit is a set of small, independent building blocks. It uses only the standard library.

## Boolean expressions

`cratekit.logic_ast` provides expression trees built from `Any`, `All`, `Not`, `Var` and
`Const`, all subclasses of `Expr`. The helpers `expr`, `any_`, `all_`, `not_`, `var` and
`const` build them. `expr` passes nodes through unchanged, turns bools into constants and
turns anything else into a variable. Printing an expression gives forms such as
`all(x, not(y))`.

`cratekit.logic_eval.eval_with(expr, f)` evaluates an expression. It asks `f` for the value
of each variable's payload.

```python
from cratekit.logic_ast import all_, any_, expr, not_
from cratekit.logic_eval import eval_with

e = expr(all_([not_(any_([0, 1])), 2]))
print(e)                                        # all(not(any(0, 1)), 2)
eval_with(e, lambda x: x == 2)                  # True
```

## cfg predicates

`cratekit.cfg_ast.Pred` is either a bare flag (`flag("unix")`) or a key with a string value
(`key_value(...)`). Shortcuts exist for `target_family`, `target_vendor`, `target_arch`,
`target_os`, `target_env` and `target_pointer_width`. `cratekit.cfg_parsing.parse` reads
text into an expression tree whose variables are `Pred` values. It raises `CfgParseError`,
a `ValueError`, on malformed input or on escaped string literals.

```python
from cratekit.cfg_parsing import parse

e = parse('all(not(any(target_os = "linux", target_os = "macos")), any(unix))')
print(e)    # all(not(any(target_os = "linux", target_os = "macos")), any(unix))
```

## Sorted collections

`cratekit.vecset.VecSet` and `cratekit.vecmap.VecMap` keep their contents in sorted lists
and look them up with binary search.

```python
from cratekit.vecset import VecSet
from cratekit.vecmap import VecMap

s = VecSet([5, 1, 3, 1])
s.as_list()                               # [1, 3, 5]
s.union(VecSet([2, 3])).as_list()         # [1, 2, 3, 5]
s.intersection(VecSet([3, 5, 7])).as_list()  # [3, 5]

m = VecMap([(1, 1), (3, 3), (5, 5)])
m.merge_with(VecMap([(3, 2), (4, 4), (5, 6)]), max)
list(m)                                   # [(1, 1), (3, 3), (4, 4), (5, 6)]
m.entry(9).or_insert(0)                   # 0
m.remove_less_than(4)                     # drops keys 1 and 3
```

`VecSet` also offers `insert`, `remove`, `union_inplace` and `difference_inplace`.
`VecMap` also offers `get`, `insert`, `remove`, `remove_max` and `apply(keys, f)`. The
entries returned by `entry` support `and_modify`, `or_default`, `or_insert_with` and
`or_insert_with_key`.

## Numeric casts

`cratekit.numeric_cast.numeric_cast(value, source, target)` converts between fixed-width
integer types (`IntType`, or its names such as `"i16"`). It raises `NumericCastError` when
the value does not fit the target. The pointer-sized types are 64 bits wide.

`cratekit.numeric_conv` adds `extending_cast`, `truncating_cast`, `wrapping_cast` and
`rounding_cast`. `rounding_cast` converts to and from `FloatType`.

```python
from cratekit.numeric_cast import IntType, numeric_cast
from cratekit.numeric_conv import rounding_cast, truncating_cast, wrapping_cast

numeric_cast(127, IntType.I16, IntType.I8)    # 127
numeric_cast(255, IntType.I16, IntType.I8)    # raises NumericCastError
truncating_cast(257, "u16", "u8")             # 1
wrapping_cast(-1, "i8")                       # 255
rounding_cast(300.0, "f32", "u8")             # 255 (saturated)
```

## Code emission

`cratekit.codegen_writer.Codegen` wraps a text writer. `Codegen.create_file(path)` opens a
file for writing. `scoped(g, f)` makes `g` the current output of the thread while `f`
runs. `emit` and `emit_lines` write lines to the current output. They raise `RuntimeError`
when no output is in scope.

```python
import io
from cratekit.codegen_writer import Codegen, emit, emit_lines, scoped

buf = io.StringIO()
scoped(Codegen(buf), lambda: (emit("fn {}() {{", "main"), emit_lines("}", "")))
buf.getvalue()      # 'fn main() {\n}\n\n'
```

## Concurrency helpers

- `cratekit.cst_mutex.CstMutex` is a first-come-first-served mutex. `acquire()` takes a
  place in line without blocking. `permit.wait()` blocks until all earlier permits are
  released and then returns a `CstMutexGuard`. The guard gives access through `.value`,
  can be used as a context manager, and is given up with `release()`.
- `cratekit.waitgroup.WaitGroup` is an asyncio wait group. Each `working()` handle counts
  as one unit of outstanding work until `done()` is called. `await wg.wait()` returns once
  the count is zero.
- `cratekit.transform_stream` provides `AsyncStream` and `AsyncTryStream`. Each is built
  from a factory that receives a `Yielder` and returns a coroutine.

```python
from cratekit.transform_stream import AsyncStream

async def body(y):
    await y.yield_("hello")

async def main():
    async for item in AsyncStream(body):
        print(item)
```

## What is not included

- Expressions can be built, printed, parsed and evaluated.
- There is no visitor for rewriting expression trees.
- There are no simplification passes, such as flattening, constant folding or De Morgan.
- There is no way to reduce a cfg expression to a canonical form.
- The package has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```