"""A cooperative round-robin scheduler for ``async def`` coroutines.

Each dispatched task runs in its own context, which holds a stack of nested
tasks. One ``step`` resumes the innermost task of one context until it next
suspends. Awaiting a ``Task`` pushes it onto the current stack; it runs on the
following steps and its result reaches the awaiting task once it finishes.
"""

from __future__ import annotations

import inspect
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Coroutine, Generator


class _Suspended:
    def __repr__(self) -> str:
        return "<suspend>"


_SUSPEND = _Suspended()


@dataclass(frozen=True)
class _Push:
    task: Task


_CURRENT: ContextVar[Context | None] = ContextVar("uppkit_current_context", default=None)


class Task:
    """A coroutine that the scheduler runs; awaited, detached or dispatched once."""

    __slots__ = ("_coro", "_consumed", "_finished", "_result", "_error")

    def __init__(self, coro: Coroutine[Any, Any, Any] | Generator[Any, Any, Any]) -> None:
        if not (inspect.iscoroutine(coro) or inspect.isgenerator(coro)):
            raise TypeError(f"Task needs a coroutine, not {type(coro).__name__}")
        self._coro = coro
        self._consumed = False
        self._finished = False
        self._result: Any = None
        self._error: BaseException | None = None

    def _consume(self) -> None:
        if self._consumed:
            raise RuntimeError("task already awaited, detached or extracted")
        self._consumed = True

    def _finish(self, result: Any = None, error: BaseException | None = None) -> None:
        self._finished = True
        self._result = result
        self._error = error

    def extract(self) -> Coroutine[Any, Any, Any] | Generator[Any, Any, Any]:
        """Take the underlying coroutine out of the task."""
        self._consume()
        return self._coro

    def detach(self) -> Task:
        """A task that, once awaited, hands this one to the running scheduler."""
        self._consume()
        return Task(_dispatch_later(self))

    def __pos__(self) -> Task:
        return self.detach()

    def __await__(self) -> Generator[Any, Any, Any]:
        self._consume()
        yield _Push(self)
        if self._error is not None:
            raise self._error
        return self._result

    def __repr__(self) -> str:
        state = "finished" if self._finished else "pending"
        return f"<Task {state} {self._coro!r}>"


def _as_task(task: Task | Coroutine[Any, Any, Any]) -> Task:
    return task if isinstance(task, Task) else Task(task)


class Context:
    """The execution state of one dispatched task and the tasks it awaits."""

    def __init__(self, scheduler: Scheduler, root: Task) -> None:
        self.scheduler = scheduler
        self.active = True
        self._stack: list[Task] = [root]

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def push_stack(self, coro: Task | Coroutine[Any, Any, Any]) -> None:
        """Make ``coro`` the innermost task; it runs from the next step on."""
        task = _as_task(coro)
        task._consumed = True
        self._stack.append(task)

    @property
    def finished(self) -> bool:
        return not self._stack

    def _resume(self) -> bool:
        """Run the innermost task until it suspends; True once the stack is empty."""
        task = self._stack[-1]
        token = _CURRENT.set(self)
        try:
            instruction = task._coro.send(None)
        except StopIteration as stop:
            task._finish(result=stop.value)
            self._stack.pop()
            return not self._stack
        except Exception as exc:
            task._finish(error=exc)
            self._stack.pop()
            if not self._stack:
                raise
            return False
        finally:
            _CURRENT.reset(token)
        if isinstance(instruction, _Push):
            self.push_stack(instruction.task)
        elif instruction is not _SUSPEND:
            raise RuntimeError(f"unsupported value yielded to the scheduler: {instruction!r}")
        return False


class Scheduler:
    """Runs dispatched tasks in turn, one suspension at a time."""

    def __init__(self) -> None:
        self._contexts: list[Context] = []
        self._index = 0

    def dispatch(self, task: Task | Coroutine[Any, Any, Any]) -> None:
        """Add ``task`` as a new independently scheduled context."""
        task = _as_task(task)
        task._consume()
        self._adopt(task)

    def _adopt(self, task: Task) -> None:
        self._contexts.append(Context(self, task))

    def done(self) -> bool:
        return not self._contexts

    def step(self) -> None:
        """Resume the next context in turn, if it is not waiting."""
        if not self._contexts:
            raise RuntimeError("no tasks to run")
        if self._index >= len(self._contexts):
            self._index = 0
        ctx = self._contexts[self._index]
        if ctx.active:
            try:
                finished = ctx._resume()
            except Exception:
                if ctx.finished:
                    del self._contexts[self._index]
                raise
            if finished:
                del self._contexts[self._index]
                return
        self._index += 1

    def run(self) -> None:
        """Step until every task has finished.

        Raises RuntimeError when every remaining task waits, as none could wake them.
        """
        while self._contexts:
            if not any(ctx.active for ctx in self._contexts):
                raise RuntimeError("deadlock: every remaining task is waiting")
            self.step()


class Job:
    """A single task together with everything it detaches, run step by step."""

    def __init__(self, task: Task | Coroutine[Any, Any, Any]) -> None:
        self._scheduler = Scheduler()
        self._scheduler.dispatch(task)

    def done(self) -> bool:
        return self._scheduler.done()

    def step(self) -> None:
        self._scheduler.step()

    def run(self) -> None:
        self._scheduler.run()


class _Suspend:
    __slots__ = ("_deactivate",)

    def __init__(self, deactivate: bool) -> None:
        self._deactivate = deactivate

    def __await__(self) -> Generator[Any, Any, None]:
        if self._deactivate:
            current_context().deactivate()
        yield _SUSPEND


class _SchedulerAwaiter:
    def __await__(self) -> Generator[Any, Any, Scheduler]:
        ctx = current_context()
        yield _SUSPEND
        return ctx.scheduler


def scheduler() -> _SchedulerAwaiter:
    """Awaitable giving the scheduler the current task runs on."""
    return _SchedulerAwaiter()


def current_context() -> Context:
    """The context of the task being resumed; RuntimeError outside a scheduler."""
    ctx = _CURRENT.get()
    if ctx is None:
        raise RuntimeError("no task is running")
    return ctx


def suspend_current() -> _Suspend:
    """Awaitable that deactivates the current context and suspends it.

    The task continues only after something calls ``activate`` on its context.
    """
    return _Suspend(True)


def yield_now() -> _Suspend:
    """Awaitable that gives the other tasks a turn."""
    return _Suspend(False)


async def _dispatch_later(task: Task) -> None:
    sched = await scheduler()
    sched._adopt(task)


def run(task: Task | Coroutine[Any, Any, Any]) -> None:
    """Run ``task`` and everything it detaches to completion."""
    sched = Scheduler()
    sched.dispatch(task)
    sched.run()