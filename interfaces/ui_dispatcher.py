"""
UI Dispatcher Interface - Runs callbacks on the UI-safe execution context.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class IUIDispatcher(ABC):
    """
    Abstract interface for handing results back to UI code.

    Implementations:
    - core.dispatch.LoopDispatcher (posts onto an asyncio event loop)
    - core.dispatch.InlineDispatcher (calls immediately)
    """

    @abstractmethod
    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        """
        Schedule callback(*args) on the UI-safe context.

        Safe to call from any thread.
        """
        pass
