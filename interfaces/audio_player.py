"""
Audio Player Interface - Plays a local audio file.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IAudioPlayer(ABC):
    """
    Abstract interface for local audio playback.

    Implementations:
    - infrastructure.audio.player.SubprocessAudioPlayer
    """

    @abstractmethod
    def play(self, path: Path) -> None:
        """
        Play an audio file, blocking until playback finishes.

        The caller may delete the file as soon as this returns.

        Args:
            path: Local audio file

        Raises:
            AudioPlaybackError: If the file cannot be played
        """
        pass
