"""Shared fixtures for the SightGuide client tests."""

import copy
import io
from collections.abc import AsyncIterator
from unittest.mock import MagicMock

import pytest
from PIL import Image

from infrastructure.http.gateway import RequestGateway
from interfaces.audio_player import IAudioPlayer

BASE_URL = "http://sightguide.test:8080"

SCENE_PAYLOAD = {
    "scene_id": "s1",
    "scene_name": "Kitchen",
    "objs": [
        {"obj_id": 3, "obj_name": "cup", "like": 0},
        {"obj_id": 5, "obj_name": "kettle", "like": 1, "bbox": [0.1, 0.2, 0.3, 0.4]},
    ],
}

MEMORY_PAYLOAD = {
    "labels": [
        {
            "label_id": 1,
            "scene_id": "s1",
            "scene_name": "Kitchen",
            "obj_id": 3,
            "obj_name": "cup",
            "time": "2023-03-21 10:05:09",
            "record_name": "rec_001.m4a",
        },
        {
            "label_id": 2,
            "scene_id": "s2",
            "scene_name": "Office",
            "obj_id": 7,
            "obj_name": "lamp",
            "time": "2023-03-22 18:30:00",
        },
    ]
}


@pytest.fixture
def scene_json() -> dict:
    return copy.deepcopy(SCENE_PAYLOAD)


@pytest.fixture
def memory_json() -> dict:
    return copy.deepcopy(MEMORY_PAYLOAD)


@pytest.fixture
def audio_player() -> MagicMock:
    return MagicMock(spec=IAudioPlayer)


@pytest.fixture
async def gateway(tmp_path, audio_player) -> AsyncIterator[RequestGateway]:
    """Gateway against BASE_URL with a mocked audio player."""
    gw = RequestGateway(
        base_url=BASE_URL, audio_player=audio_player, temp_dir=tmp_path / "audio"
    )
    yield gw
    await gw.aclose()


@pytest.fixture
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 3), color=(255, 0, 0)).save(buffer, format="PNG")
    return buffer.getvalue()
