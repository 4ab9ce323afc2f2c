# uppkit

A small toolbox of general-purpose building blocks, with no dependencies
outside the standard library:

- `uppkit.strutil`: NUL-terminated string helpers (`strlen`, `strcmp`,
  `strcmp_ordering`, `strdup`), the `CString` view type, which carries an
  explicit length, and `c_str` to build one.
- `uppkit.ranges`: `upto(stop)`, which counts from the zero value of `stop`'s
  type up to `stop`, not including it.
- `uppkit.sync`: `Mutex` and `BasicMutex`, which wrap a value so that it can
  only be reached through a `MutexLock`, returned by `lock`, `lock_shared` or
  `try_lock`.
- `uppkit.functional`: the callable wrappers `Function`, `StaticFunction` and
  `Callback`, each of which splits into a plain function and its userdata, and
  `arity_of` / `matches_prototype` to inspect the parameters of a callable.
- `uppkit.enums`: `underlying_cast`, `is_enum_bitmask`, `BitMask`, and
  `EnumMap` / `EnumMapStatic`, maps keyed by enum members and iterated in
  declaration order.
- `uppkit.route`: URL route patterns such as `/users/{id}`, checked with
  `valid_route_pattern` and matched with `RoutePattern`, `parse_route` or
  `parse_route_params`; also the `Method` enum of HTTP methods.
- `uppkit.ring_buf` and `uppkit.queue`: the double-ended containers `RingBuf`
  (power-of-two capacity, with `reserve` and `shrink_to_fit`) and `Queue`.
- `uppkit.scheduler` and `uppkit.primitives`: a single-threaded cooperative
  scheduler for `async def` coroutines (`Task`, `Scheduler`, `Job`, `run`,
  `yield_now`, `suspend_current`), with `Semaphore`, `AsyncMutex`,
  `unique_lock`, `Channel` and `SignalChannel` to coordinate tasks.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Match a route pattern against a path:

```python
from uppkit.route import parse_route

route = parse_route("/a/{foo}/b", "/a/bar/b")
assert route.params["foo"] == "bar"
assert parse_route("/foo/{a}", "/bar/baz") is None
```

A malformed pattern, such as `/{a{b}}`, raises `ValueError`.

Use an enum-keyed map and a bitmask:

```python
import enum
from uppkit.enums import BitMask, EnumMap

class Flag(enum.Enum):
    A = 1
    B = 2

mask = BitMask(Flag, Flag.A) | Flag.B
assert mask.all()

m = EnumMap(Flag, int)
m[Flag.A] = 10
assert list(m.items()) == [(Flag.A, 10)]
```

Run cooperative tasks:

```python
from uppkit.scheduler import Task, run, yield_now
from uppkit.primitives import Channel

async def main():
    channel = Channel()

    async def producer():
        await yield_now()
        channel.write(1)

    await +Task(producer())   # detach: the producer runs alongside main
    assert await channel.read() == 1

run(Task(main()))
```

`Scheduler.run` raises `RuntimeError` when every remaining task is waiting,
since nothing could wake them.

## What it does not do

- `uppkit.route` only matches paths against patterns. There is no HTTP
  server or request dispatching; `Method` is an enum of method names only.
- The scheduler is single-threaded and runs only when stepped; it does no
  I/O and has no timers or sleeping.
- The package has no command-line interface.