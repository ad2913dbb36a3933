"""
Recording Provider Interface - Locates recorded label voice clips.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IRecordingProvider(ABC):
    """
    Abstract interface for finding the local recording of an object label.

    Implementations:
    - infrastructure.audio.recordings.LocalRecordingProvider
    """

    @abstractmethod
    def audio_file_path(self, scene_id: str, obj_id: int) -> Path:
        """
        Get the location of the recording for an object in a scene.

        The file is not required to exist.

        Args:
            scene_id: Scene identifier
            obj_id: Object identifier within the scene

        Returns:
            Path of the recorded clip
        """
        pass
