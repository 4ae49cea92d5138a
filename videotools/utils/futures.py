"""
Non-blocking composition helpers for `concurrent.futures.Future`.

None of these helpers waits on a future. They chain work through
`add_done_callback`, so a join never occupies a worker thread while the
futures it joins still need one.
"""
import threading
from concurrent.futures import CancelledError, Future
from typing import Any, Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def completed(value: Any = None) -> Future:
    future: Future = Future()
    future.set_result(value)
    return future


def failed(error: BaseException) -> Future:
    future: Future = Future()
    future.set_exception(error)
    return future


def exception_of(future: Future) -> Optional[BaseException]:
    """Returns the exception of a finished future, treating cancellation as one."""
    if future.cancelled():
        return CancelledError()
    return future.exception()


def when_all(futures: Sequence[Future]) -> "Future[List[Any]]":
    """
    Joins `futures` into one future.

    The joined future completes only after every input has completed. It then
    carries the list of results, or the first exception in completion order.
    Inputs that fail do not short-circuit the join: their siblings are still
    awaited, since there is nothing to cancel them with.
    """
    joined: Future = Future()
    if not futures:
        joined.set_result([])
        return joined

    lock = threading.Lock()
    state = {"remaining": len(futures), "error": None}

    def _on_done(future: Future) -> None:
        error = exception_of(future)
        with lock:
            if error is not None and state["error"] is None:
                state["error"] = error
            state["remaining"] -= 1
            finished = state["remaining"] == 0
        if not finished:
            return
        if state["error"] is not None:
            joined.set_exception(state["error"])
        else:
            joined.set_result([f.result() for f in futures])

    for future in futures:
        future.add_done_callback(_on_done)
    return joined


def then(future: "Future[T]", fn: Callable[[T], Any]) -> Future:
    """
    Applies `fn` to the result of `future` once it succeeds.

    If `fn` returns a future, the returned future follows it. Exceptions from
    `future` or raised by `fn` propagate to the returned future unchanged.
    """
    chained: Future = Future()

    def _on_done(source: Future) -> None:
        error = exception_of(source)
        if error is not None:
            chained.set_exception(error)
            return
        try:
            value = fn(source.result())
        except Exception as e:
            chained.set_exception(e)
            return
        if isinstance(value, Future):
            relay(value, chained)
        else:
            chained.set_result(value)

    future.add_done_callback(_on_done)
    return chained


def relay(source: Future, target: Future) -> None:
    """Completes `target` with whatever `source` completes with."""

    def _on_done(done: Future) -> None:
        error = exception_of(done)
        if error is not None:
            target.set_exception(error)
        else:
            target.set_result(done.result())

    source.add_done_callback(_on_done)


def map_error(future: Future, fn: Callable[[BaseException], BaseException]) -> Future:
    """Replaces the exception of `future` with `fn(exception)`; results pass through."""
    mapped: Future = Future()

    def _on_done(done: Future) -> None:
        error = exception_of(done)
        if error is None:
            mapped.set_result(done.result())
        else:
            mapped.set_exception(fn(error))

    future.add_done_callback(_on_done)
    return mapped
