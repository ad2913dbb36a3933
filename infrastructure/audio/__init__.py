"""
Audio Infrastructure - Local recording lookup and playback.

This module provides:
- SubprocessAudioPlayer: ffplay-backed player (implements IAudioPlayer)
- LocalRecordingProvider: recording file locator (implements IRecordingProvider)
"""

from .player import SubprocessAudioPlayer, get_audio_player
from .recordings import LocalRecordingProvider, get_recording_provider

__all__ = [
    "SubprocessAudioPlayer",
    "get_audio_player",
    "LocalRecordingProvider",
    "get_recording_provider",
]
