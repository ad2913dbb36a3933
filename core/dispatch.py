"""
Result delivery - hands every operation outcome to exactly one callback.

The operation either produces a value or raises; deliver() turns that into
a single Result and posts it through a UI dispatcher.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from core.logger import format_exception_short, logger
from core.messages import LogMessages
from interfaces.ui_dispatcher import IUIDispatcher

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of one operation: a value or an error, never both."""

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


class LoopDispatcher(IUIDispatcher):
    """Posts callbacks onto an asyncio event loop (the UI loop)."""

    def __init__(self, loop: asyncio.AbstractEventLoop):
        self.loop = loop

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        self.loop.call_soon_threadsafe(callback, *args)


class InlineDispatcher(IUIDispatcher):
    """Runs callbacks immediately on the calling thread."""

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        callback(*args)


async def deliver(
    operation: Awaitable[T],
    callback: Callable[[Result[T]], Any],
    dispatcher: IUIDispatcher,
) -> Result[T]:
    """
    Await operation and dispatch its Result to callback exactly once.

    A cancelled operation is delivered as a failure carrying the
    CancelledError, which is then re-raised.

    Args:
        operation: Awaitable producing the value
        callback: Receives the Result on the dispatcher's context
        dispatcher: UI dispatcher

    Returns:
        The Result that was dispatched
    """
    try:
        value = await operation
    except asyncio.CancelledError as e:
        dispatcher.dispatch(callback, Result.failure(e))
        raise
    except Exception as e:
        logger.debug(LogMessages.DELIVERY_FAILED.format(error=format_exception_short(e)))
        result: Result[T] = Result.failure(e)
    else:
        result = Result.success(value)

    dispatcher.dispatch(callback, result)
    return result
