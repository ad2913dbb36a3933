"""
Local Recording Provider - Maps (scene, object) to a recorded voice clip.
"""

from pathlib import Path
from typing import Optional

from core.config import get_settings
from core.constants import RECORDING_FILE_TEMPLATE
from core.logger import logger
from interfaces.recording_provider import IRecordingProvider


class LocalRecordingProvider(IRecordingProvider):
    """Recordings live in one directory as <scene_id>_<obj_id>.m4a."""

    def __init__(self, recordings_dir: Optional[Path] = None):
        self.recordings_dir = Path(recordings_dir or get_settings().recordings_dir)

    def audio_file_path(self, scene_id: str, obj_id: int) -> Path:
        """Implements IRecordingProvider.audio_file_path() interface."""
        self.recordings_dir.mkdir(parents=True, exist_ok=True)
        return self.recordings_dir / RECORDING_FILE_TEMPLATE.format(
            scene_id=scene_id, obj_id=obj_id
        )


# Global singleton instance
_recording_provider: Optional[LocalRecordingProvider] = None


def get_recording_provider() -> LocalRecordingProvider:
    """
    Get or create global LocalRecordingProvider instance (singleton).

    Returns:
        LocalRecordingProvider instance
    """
    global _recording_provider

    if _recording_provider is None:
        logger.info("Creating LocalRecordingProvider instance...")
        _recording_provider = LocalRecordingProvider()

    return _recording_provider
