"""
Tests for the subprocess-backed audio player.
"""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from core.errors import AudioPlaybackError
from infrastructure.audio.player import SubprocessAudioPlayer


@pytest.fixture
def player() -> SubprocessAudioPlayer:
    return SubprocessAudioPlayer(command="ffplay -nodisp -autoexit", timeout=30)


class TestSubprocessAudioPlayer:
    def test_play_appends_file_to_command(self, player):
        completed = MagicMock(returncode=0, stderr="")

        with patch("infrastructure.audio.player.subprocess.run", return_value=completed) as run:
            player.play(Path("/tmp/clip.m4a"))

        run.assert_called_once_with(
            ["ffplay", "-nodisp", "-autoexit", "/tmp/clip.m4a"],
            capture_output=True,
            text=True,
            timeout=30,
        )

    def test_nonzero_exit_raises(self, player):
        completed = MagicMock(returncode=1, stderr="Invalid data found\n")

        with patch("infrastructure.audio.player.subprocess.run", return_value=completed):
            with pytest.raises(AudioPlaybackError, match="Invalid data found"):
                player.play(Path("/tmp/clip.m4a"))

    def test_missing_executable_raises(self, player):
        with patch(
            "infrastructure.audio.player.subprocess.run", side_effect=FileNotFoundError()
        ):
            with pytest.raises(AudioPlaybackError, match="ffplay"):
                player.play(Path("/tmp/clip.m4a"))

    def test_timeout_raises(self, player):
        with patch(
            "infrastructure.audio.player.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="ffplay", timeout=30),
        ):
            with pytest.raises(AudioPlaybackError, match="30s"):
                player.play(Path("/tmp/clip.m4a"))

    def test_executable(self, player):
        assert player.executable == "ffplay"
