"""
Models Layer - Pydantic schemas for backend requests and responses.
"""

from .schemas import (
    CommonResponse,
    SceneObject,
    Scene,
    IMUData,
    CreateLabelResponse,
    MemoryLabel,
    MemoryResponse,
    LikeGlanceItemRequest,
    SceneRequest,
    CreateLabelRequest,
    LabelVoiceRequest,
)

__all__ = [
    # Response schemas
    "CommonResponse",
    "SceneObject",
    "Scene",
    "IMUData",
    "CreateLabelResponse",
    "MemoryLabel",
    "MemoryResponse",
    # Request bodies
    "LikeGlanceItemRequest",
    "SceneRequest",
    "CreateLabelRequest",
    "LabelVoiceRequest",
]
