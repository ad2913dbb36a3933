"""
SightGuide Service - Endpoint catalog for the scene-understanding backend.

Each operation is a thin specialization of the request gateway with a fixed
path and parameter shape. Operations are coroutines; callers that live on a
UI thread use submit() to run them on the background I/O worker and get the
Result back through a UI dispatcher.
"""

import asyncio
from concurrent.futures import Future
from datetime import datetime
from typing import Any, Callable, Coroutine, Optional, TypeVar

from core.constants import COMMON_RESULT_SUCCESS, LABEL_TIME_FORMAT, Endpoint, HttpMethod
from core.dispatch import InlineDispatcher, LoopDispatcher, Result, deliver
from core.errors import RequestFailedError
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from core.worker import IOWorker
from interfaces.recording_provider import IRecordingProvider
from interfaces.request_gateway import IRequestGateway
from interfaces.ui_dispatcher import IUIDispatcher
from models.schemas import (
    CommonResponse,
    CreateLabelRequest,
    CreateLabelResponse,
    IMUData,
    LabelVoiceRequest,
    LikeGlanceItemRequest,
    MemoryResponse,
    Scene,
    SceneRequest,
)

T = TypeVar("T")


class SightGuideService:
    """
    Glance, fixation and memory operations.

    Uses dependency injection through interfaces:
    - IRequestGateway: For every HTTP exchange
    - IRecordingProvider: For locating label voice recordings
    - IUIDispatcher: For delivering callback results (optional)
    """

    def __init__(
        self,
        gateway: Optional[IRequestGateway] = None,
        recording_provider: Optional[IRecordingProvider] = None,
        dispatcher: Optional[IUIDispatcher] = None,
        worker: Optional[IOWorker] = None,
    ):
        """
        Initialize SightGuideService with optional dependencies.

        Args:
            gateway: IRequestGateway implementation (default: RequestGateway from settings)
            recording_provider: IRecordingProvider implementation (default: LocalRecordingProvider)
            dispatcher: UI dispatcher for submit() callbacks. When omitted, the
                event loop running at submit() time is used, or callbacks run inline.
            worker: Background I/O worker for submit() (default: shared IOWorker)
        """
        self.gateway = gateway or self._get_default_gateway()
        self.recording_provider = recording_provider or self._get_default_recording_provider()
        self.dispatcher = dispatcher
        self.worker = worker or self._get_default_worker()

        logger.info(
            LogMessages.INIT_SERVICE.format(
                gateway=self.gateway.__class__.__name__,
                recordings=self.recording_provider.__class__.__name__,
            )
        )

    def _get_default_gateway(self) -> IRequestGateway:
        from infrastructure.http.gateway import get_request_gateway

        return get_request_gateway()

    def _get_default_recording_provider(self) -> IRecordingProvider:
        from infrastructure.audio.recordings import get_recording_provider

        return get_recording_provider()

    def _get_default_worker(self) -> IOWorker:
        from core.worker import get_io_worker

        return get_io_worker()

    # -------------------------------------------------------------------------
    # Glance
    # -------------------------------------------------------------------------

    async def get_scene(self) -> Scene:
        """Fetch the scene currently in view."""
        return await self.gateway.request(Endpoint.GLANCE_DATA.value, HttpMethod.GET, Scene)

    async def get_imu_data(self) -> IMUData:
        """Fetch the latest IMU orientation snapshot."""
        return await self.gateway.request(Endpoint.GLANCE_IMU.value, HttpMethod.GET, IMUData)

    async def post_like_glance_item(self, obj_id: int, like: int) -> None:
        """
        Like (1) or unlike (0) an object in the glance view.

        Raises:
            RequestFailedError: If the server answers with a non-zero result
        """
        path = Endpoint.GLANCE_LIKE.value
        response = await self.gateway.request(
            path,
            HttpMethod.POST,
            CommonResponse,
            body_params=LikeGlanceItemRequest(obj_id=obj_id, like=like),
        )
        if response.result != COMMON_RESULT_SUCCESS:
            raise RequestFailedError(
                ErrorMessages.RESULT_NOT_SUCCESS.format(path=path, result=response.result),
                path=path,
            )

    # -------------------------------------------------------------------------
    # Fixation
    # -------------------------------------------------------------------------

    async def post_fixation_data(self, scene_id: str) -> Scene:
        return await self.gateway.request(
            Endpoint.FIXATION_DATA.value,
            HttpMethod.POST,
            Scene,
            body_params=SceneRequest(scene_id=scene_id),
        )

    async def request_fixation_image(self, scene_id: str) -> Optional[Any]:
        """Fetch the fixation frame of a scene. None if it cannot be fetched or decoded."""
        return await self.gateway.request_image(
            Endpoint.FIXATION_IMAGE.value, SceneRequest(scene_id=scene_id)
        )

    async def request_upload_label_voice(self, scene_id: str, obj_id: int) -> Optional[str]:
        """
        Upload the local voice recording for an object label.

        Returns:
            Server-assigned record name, or None if the response carried none
        """
        file_path = self.recording_provider.audio_file_path(scene_id, obj_id)
        return await self.gateway.upload_audio_file(
            Endpoint.FIXATION_LABEL_VOICE.value, file_path
        )

    async def request_create_label(
        self,
        scene_id: str,
        scene_name: str,
        obj_id: int,
        obj_name: str,
        record_name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> CreateLabelResponse:
        """
        Create a fixation label stamped with the local time.

        Args:
            scene_id: Scene identifier
            scene_name: Scene display name
            obj_id: Labeled object identifier
            obj_name: Labeled object name
            record_name: Name returned by request_upload_label_voice(), if any
            now: Label time (defaults to the current local time)
        """
        body = CreateLabelRequest(
            scene_id=scene_id,
            scene_name=scene_name,
            obj_id=obj_id,
            obj_name=obj_name,
            time=(now or datetime.now()).strftime(LABEL_TIME_FORMAT),
            record_name=record_name,
        )
        return await self.gateway.request(
            Endpoint.FIXATION_LABEL.value,
            HttpMethod.POST,
            CreateLabelResponse,
            body_params=body,
        )

    # -------------------------------------------------------------------------
    # Memory
    # -------------------------------------------------------------------------

    async def request_memory_labels(self) -> MemoryResponse:
        return await self.gateway.request(
            Endpoint.MEMORY_LABELS.value, HttpMethod.GET, MemoryResponse
        )

    async def request_label_audio_and_play(
        self, scene_id: str, label_id: int, record_name: str
    ) -> None:
        """Download a memory label's recording and play it. Failures are only logged."""
        await self.gateway.request_audio_and_play(
            Endpoint.MEMORY_LABEL_VOICE.value,
            LabelVoiceRequest(scene_id=scene_id, label_id=label_id, record_name=record_name),
        )

    # -------------------------------------------------------------------------
    # Callback bridge
    # -------------------------------------------------------------------------

    def _resolve_dispatcher(self) -> IUIDispatcher:
        if self.dispatcher is not None:
            return self.dispatcher
        try:
            return LoopDispatcher(asyncio.get_running_loop())
        except RuntimeError:
            return InlineDispatcher()

    def submit(
        self,
        operation: Coroutine[Any, Any, T],
        callback: Optional[Callable[[Result[T]], Any]] = None,
    ) -> Future:
        """
        Run an operation on the I/O worker.

        With a callback, exactly one Result is delivered to it on the UI
        dispatcher. Without one, the returned future carries the outcome.

        Example:
            service.submit(service.get_scene(), lambda result: show(result.unwrap()))
        """
        if callback is None:
            return self.worker.submit(operation)
        return self.worker.submit(deliver(operation, callback, self._resolve_dispatcher()))

    async def aclose(self) -> None:
        await self.gateway.aclose()

    def shutdown(self, timeout: float = 5.0) -> None:
        """Close the gateway on the worker loop, then stop the worker."""
        if self.worker.is_running():
            self.worker.submit(self.gateway.aclose()).result(timeout)
            self.worker.stop(timeout)


# Global singleton instance
_sightguide_service: Optional[SightGuideService] = None


def get_sightguide_service(
    gateway: Optional[IRequestGateway] = None,
    recording_provider: Optional[IRecordingProvider] = None,
) -> SightGuideService:
    """
    Get or create global SightGuideService instance (singleton).

    Returns:
        SightGuideService instance
    """
    global _sightguide_service

    if _sightguide_service is None:
        logger.info("Creating SightGuideService instance...")
        _sightguide_service = SightGuideService(
            gateway=gateway,
            recording_provider=recording_provider,
        )

    return _sightguide_service
