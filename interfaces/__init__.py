"""
Interface Layer - Abstract interfaces for dependency injection.

This layer defines contracts that infrastructure implementations must fulfill.
Services depend on these interfaces, not concrete implementations.
"""

from .request_gateway import IRequestGateway
from .audio_player import IAudioPlayer
from .recording_provider import IRecordingProvider
from .ui_dispatcher import IUIDispatcher

__all__ = [
    "IRequestGateway",
    "IAudioPlayer",
    "IRecordingProvider",
    "IUIDispatcher",
]
