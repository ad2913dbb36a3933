"""
Subprocess Audio Player - Plays local files through an external command.

Implements IAudioPlayer. Uses ffplay by default; any command that takes the
file path as its last argument and exits when playback ends will work.
"""

import shlex
import subprocess
from pathlib import Path
from typing import List, Optional

from core.config import get_settings
from core.errors import AudioPlaybackError
from core.logger import logger
from core.messages import ErrorMessages
from interfaces.audio_player import IAudioPlayer


class SubprocessAudioPlayer(IAudioPlayer):
    """Blocking audio player backed by a command line tool."""

    def __init__(self, command: Optional[str] = None, timeout: Optional[int] = None):
        """
        Args:
            command: Player command line, file path is appended (defaults to settings)
            timeout: Max playback time in seconds (defaults to settings)
        """
        settings = get_settings()
        self._command: List[str] = shlex.split(command or settings.audio_player_command)
        self._timeout = timeout or settings.audio_player_timeout_seconds

    @property
    def executable(self) -> str:
        return self._command[0] if self._command else ""

    def play(self, path: Path) -> None:
        """
        Play an audio file and wait for the player to exit.

        Implements IAudioPlayer.play() interface.

        Raises:
            AudioPlaybackError: If the player is missing, fails or times out
        """
        cmd = [*self._command, str(path)]
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=self._timeout
            )
        except FileNotFoundError as e:
            raise AudioPlaybackError(
                ErrorMessages.AUDIO_PLAYER_NOT_FOUND.format(executable=self.executable)
            ) from e
        except subprocess.TimeoutExpired as e:
            raise AudioPlaybackError(
                ErrorMessages.AUDIO_PLAYBACK_TIMEOUT.format(timeout=self._timeout)
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.strip() or "Unknown player error"
            raise AudioPlaybackError(
                ErrorMessages.AUDIO_PLAYBACK_FAILED.format(
                    file=path,
                    error=ErrorMessages.AUDIO_PLAYBACK_EXIT.format(
                        code=result.returncode, stderr=stderr
                    ),
                )
            )


# Global singleton instance
_audio_player: Optional[SubprocessAudioPlayer] = None


def get_audio_player() -> SubprocessAudioPlayer:
    """
    Get or create global SubprocessAudioPlayer instance (singleton).

    Returns:
        SubprocessAudioPlayer instance
    """
    global _audio_player

    if _audio_player is None:
        logger.info("Creating SubprocessAudioPlayer instance...")
        _audio_player = SubprocessAudioPlayer()

    return _audio_player
