"""
Pydantic Schemas - Request/Response DTOs for the scene-understanding backend.

This module consolidates all Pydantic models used across the client.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# Common Response Schemas
# =============================================================================


class CommonResponse(BaseModel):
    """
    Generic status envelope used by fire-and-forget endpoints.

    - result: 0 = success, anything else = failure
    """

    result: int

    class Config:
        json_schema_extra = {"examples": [{"result": 0}, {"result": 1}]}


# =============================================================================
# Glance Schemas
# =============================================================================


class SceneObject(BaseModel):
    """An object recognized inside a scene."""

    obj_id: int = Field(..., description="Object identifier within the scene")
    obj_name: str = Field(..., description="Recognized object name")
    like: int = Field(default=0, description="1 if the user liked the object")
    bbox: Optional[List[float]] = Field(
        default=None, description="Bounding box [x, y, width, height] if available"
    )


class Scene(BaseModel):
    """Server-side snapshot of the captured environment."""

    scene_id: str = Field(..., description="Scene identifier")
    scene_name: str = Field(default="", description="Human readable scene name")
    objs: List[SceneObject] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "examples": [
                {
                    "scene_id": "s1",
                    "scene_name": "Kitchen",
                    "objs": [{"obj_id": 3, "obj_name": "cup", "like": 0}],
                }
            ]
        }


class IMUData(BaseModel):
    """Orientation snapshot from the headset IMU."""

    roll: float
    pitch: float
    yaw: float
    timestamp: Optional[float] = None


# =============================================================================
# Fixation / Memory Schemas
# =============================================================================


class CreateLabelResponse(BaseModel):
    """Response model for the create label endpoint."""

    result: int = 0
    label_id: Optional[int] = None


class MemoryLabel(BaseModel):
    """A previously created fixation label."""

    label_id: int
    scene_id: str
    scene_name: str
    obj_id: int
    obj_name: str
    time: str = Field(..., description="Creation time, yyyy-MM-dd HH:mm:ss")
    record_name: Optional[str] = Field(
        default=None, description="Server-assigned name of the voice recording"
    )


class MemoryResponse(BaseModel):
    """Response model for the memory labels endpoint."""

    labels: List[MemoryLabel] = Field(default_factory=list)


# =============================================================================
# Request Bodies
# =============================================================================


class LikeGlanceItemRequest(BaseModel):
    obj_id: int
    like: int


class SceneRequest(BaseModel):
    """Body for endpoints keyed by scene only (fixation data and image)."""

    scene_id: str


class CreateLabelRequest(BaseModel):
    """Body for the create label endpoint. record_name is omitted when None."""

    scene_id: str
    scene_name: str
    obj_id: int
    obj_name: str
    time: str
    record_name: Optional[str] = None


class LabelVoiceRequest(BaseModel):
    scene_id: str
    label_id: int
    record_name: str
