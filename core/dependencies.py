"""
System dependencies validation.

The client itself only needs Python packages; label audio playback shells out
to an external player (ffplay by default) that must be on PATH.
"""

import shlex
import shutil
from typing import Optional, Tuple

from core.config import get_settings
from core.errors import MissingDependencyError
from core.logger import logger
from core.messages import ErrorMessages


def check_audio_player(command: Optional[str] = None) -> Tuple[bool, Optional[str]]:
    """
    Check if the configured audio player executable is installed.

    Args:
        command: Player command line (defaults to settings)

    Returns:
        Tuple of (is_available, path)
    """
    command = command or get_settings().audio_player_command
    parts = shlex.split(command)
    if not parts:
        return False, None

    path = shutil.which(parts[0])
    if path:
        return True, path

    logger.warning(f"Audio player '{parts[0]}' not found in PATH")
    return False, None


def validate_dependencies(strict: bool = False, command: Optional[str] = None) -> None:
    """
    Validate system dependencies for audio playback.

    Args:
        strict: If True, raise when the player is missing. If False, only warn
            (label audio playback will fail at runtime, everything else works).
        command: Player command line (defaults to settings)

    Raises:
        MissingDependencyError: If strict and the player is missing
    """
    logger.info("Validating system dependencies...")

    available, path = check_audio_player(command)
    if available:
        logger.info(f"All dependencies validated: audio player={path}")
        return

    executable = shlex.split(command or get_settings().audio_player_command or "")
    error_msg = ErrorMessages.AUDIO_PLAYER_NOT_FOUND.format(
        executable=executable[0] if executable else ""
    )
    if strict:
        logger.error(error_msg)
        raise MissingDependencyError(error_msg)

    logger.warning(f"{error_msg} Label audio playback will fail at runtime.")
