"""
Infrastructure Layer - External system integrations.

This layer contains implementations of interfaces defined in the interfaces/ layer.
Each subdirectory groups implementations by external dependency.

Structure:
- http/   - Backend gateway (httpx) and wire codec
- audio/  - Local recordings and subprocess playback
"""

from .http import RequestGateway, get_request_gateway
from .audio import (
    LocalRecordingProvider,
    SubprocessAudioPlayer,
    get_audio_player,
    get_recording_provider,
)

__all__ = [
    # Backend gateway
    "RequestGateway",
    "get_request_gateway",
    # Audio collaborators
    "SubprocessAudioPlayer",
    "get_audio_player",
    "LocalRecordingProvider",
    "get_recording_provider",
]
