"""
Request Gateway - Turns one logical operation into one HTTP exchange.

Implements IRequestGateway for dependency injection. Builds URLs against a
single injected base endpoint, encodes JSON or raw audio bodies, and decodes
typed JSON, image or audio responses. Single attempt only, no retries.
"""

import asyncio
import os
import uuid
from pathlib import Path
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx  # type: ignore

from core.config import get_settings
from core.constants import (
    ALLOWED_URL_SCHEMES,
    AUDIO_FILE_SUFFIX,
    AUDIO_STREAM_CHUNK_SIZE,
    AUDIO_UPLOAD_HEADERS,
    HTTP_CONNECT_TIMEOUT,
    HTTP_POOL_TIMEOUT,
    HTTP_READ_TIMEOUT,
    HTTP_WRITE_TIMEOUT,
    JSON_HEADERS,
    RECORD_NAME_FIELD,
    HttpMethod,
)
from core.errors import (
    ApiError,
    AudioPlaybackError,
    InvalidURLError,
    RequestFailedError,
)
from core.logger import logger
from core.messages import ErrorMessages, LogMessages
from infrastructure.http.codec import (
    IMAGE_DECODE_ERRORS,
    decode_image,
    decode_json_object,
    decode_json_response,
    encode_json_body,
)
from interfaces.audio_player import IAudioPlayer
from interfaces.request_gateway import BodyParams, IRequestGateway

T = TypeVar("T")

HTTP_TIMEOUT = httpx.Timeout(
    connect=HTTP_CONNECT_TIMEOUT,
    read=HTTP_READ_TIMEOUT,
    write=HTTP_WRITE_TIMEOUT,
    pool=HTTP_POOL_TIMEOUT,
)


class RequestGateway(IRequestGateway):
    """
    HTTP gateway to the scene-understanding backend.

    Every request carries Content-Type: application/json except raw audio
    uploads (audio/m4a). HTTP status codes are not inspected for typed
    requests: the body either decodes into the requested type or it does not.
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        audio_player: Optional[IAudioPlayer] = None,
        temp_dir: Optional[Path] = None,
        timeout: Optional[httpx.Timeout] = None,
    ):
        """
        Initialize the gateway.

        Args:
            base_url: Backend endpoint, e.g. "http://192.168.3.38:8080"
            client: Pre-built AsyncClient (not closed by aclose())
            audio_player: IAudioPlayer implementation (default: SubprocessAudioPlayer)
            temp_dir: Directory for downloaded audio (defaults to settings)
            timeout: Transport timeout for a gateway-owned client
        """
        self.base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout or HTTP_TIMEOUT
        self._audio_player = audio_player
        self.temp_dir = Path(temp_dir or get_settings().temp_dir)

        logger.info(
            LogMessages.INIT_GATEWAY.format(base_url=self.base_url, temp_dir=self.temp_dir)
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
            logger.debug(LogMessages.INIT_HTTP_CLIENT.format(base_url=self.base_url))
        return self._client

    def _get_audio_player(self) -> IAudioPlayer:
        """Get the injected audio player or the default one."""
        if self._audio_player is None:
            from infrastructure.audio.player import get_audio_player

            self._audio_player = get_audio_player()
        return self._audio_player

    def build_url(
        self, path: str, query_params: Optional[Mapping[str, str]] = None
    ) -> httpx.URL:
        """
        Combine the base endpoint, path and query into an absolute URL.

        Raises:
            InvalidURLError: If the result is not an absolute http(s) URL
        """
        try:
            url = httpx.URL(self.base_url + path)
            if query_params:
                url = url.copy_merge_params(dict(query_params))
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise InvalidURLError(
                ErrorMessages.URL_INVALID.format(path=path, error=e), path=path
            ) from e

        if url.scheme not in ALLOWED_URL_SCHEMES or not url.host:
            raise InvalidURLError(
                ErrorMessages.URL_NOT_ABSOLUTE.format(base_url=self.base_url, path=path),
                path=path,
            )
        return url

    async def request(
        self,
        path: str,
        method: HttpMethod,
        response_type: Type[T],
        query_params: Optional[Mapping[str, str]] = None,
        body_params: Optional[BodyParams] = None,
    ) -> T:
        """
        Issue one request and decode the JSON response as response_type.

        Implements IRequestGateway.request() interface.

        Raises:
            InvalidURLError: Before any I/O, if the URL is malformed
            ParsingFailedError: Before any I/O if body_params cannot be encoded,
                or after the exchange if the body does not decode
            RequestFailedError: On transport failure or empty body
        """
        method = HttpMethod(method)
        url = self.build_url(path, query_params)
        content = encode_json_body(body_params, path) if body_params is not None else None

        response = await self._send(method, url, path, content, JSON_HEADERS)
        if not response.content:
            raise RequestFailedError(ErrorMessages.RESPONSE_EMPTY.format(path=path), path=path)

        value = decode_json_response(response.content, response_type, path)
        logger.debug(
            LogMessages.REQUEST_DECODED.format(
                type_name=getattr(response_type, "__name__", response_type), path=path
            )
        )
        return value

    async def _send(
        self,
        method: HttpMethod,
        url: httpx.URL,
        path: str,
        content: Optional[bytes],
        headers: Mapping[str, str],
    ) -> httpx.Response:
        client = await self._get_client()
        logger.debug(LogMessages.REQUEST_SENDING.format(method=method.value, url=url))
        try:
            return await client.request(
                method.value, url, content=content, headers=dict(headers)
            )
        except httpx.HTTPError as e:
            raise RequestFailedError(
                ErrorMessages.REQUEST_FAILED.format(path=path, error=e), path=path
            ) from e

    async def request_image(
        self, path: str, query_params: Optional[BodyParams] = None
    ) -> Optional[Any]:
        """
        POST query_params as JSON and decode the response body as an image.

        Implements IRequestGateway.request_image() interface. Every failure
        collapses to None with a logged warning.
        """
        try:
            url = self.build_url(path)
            content = encode_json_body(query_params or {}, path)
            response = await self._send(HttpMethod.POST, url, path, content, JSON_HEADERS)
        except ApiError as e:
            logger.warning(LogMessages.IMAGE_UNAVAILABLE.format(path=path, reason=e))
            return None

        if not response.content:
            logger.warning(
                LogMessages.IMAGE_UNAVAILABLE.format(
                    path=path, reason=ErrorMessages.RESPONSE_EMPTY.format(path=path)
                )
            )
            return None

        try:
            return decode_image(response.content)
        except IMAGE_DECODE_ERRORS as e:
            logger.warning(LogMessages.IMAGE_DECODE_FAILED.format(path=path, error=e))
            return None

    async def request_audio_and_play(
        self, path: str, query_params: Optional[BodyParams] = None
    ) -> None:
        """
        POST query_params as JSON, stream the audio response to a temp file,
        play it, then remove the file.

        Implements IRequestGateway.request_audio_and_play() interface.
        Failures are only logged.
        """
        try:
            url = self.build_url(path)
            content = encode_json_body(query_params or {}, path)
        except ApiError as e:
            logger.warning(LogMessages.AUDIO_UNAVAILABLE.format(path=path, reason=e))
            return

        destination: Optional[Path] = None
        try:
            self.temp_dir.mkdir(parents=True, exist_ok=True)
            destination = self.temp_dir / f"{uuid.uuid4()}{AUDIO_FILE_SUFFIX}"
            if not await self._download(url, path, content, destination):
                return
            player = self._get_audio_player()
            logger.info(LogMessages.AUDIO_PLAYING.format(file=destination))
            await asyncio.to_thread(player.play, destination)
        except httpx.HTTPError as e:
            logger.error(
                LogMessages.AUDIO_UNAVAILABLE.format(
                    path=path, reason=ErrorMessages.REQUEST_FAILED.format(path=path, error=e)
                )
            )
        except (OSError, AudioPlaybackError) as e:
            logger.error(LogMessages.AUDIO_UNAVAILABLE.format(path=path, reason=e))
        finally:
            if destination is not None and destination.exists():
                try:
                    os.remove(destination)
                except OSError as e:
                    logger.warning(LogMessages.AUDIO_CLEANUP_FAILED.format(error=e))

    async def _download(
        self, url: httpx.URL, path: str, content: bytes, destination: Path
    ) -> bool:
        """Stream a POST response to destination. Returns False on an HTTP error status."""
        client = await self._get_client()
        logger.debug(LogMessages.REQUEST_SENDING.format(method=HttpMethod.POST.value, url=url))

        async with client.stream(
            HttpMethod.POST.value, url, content=content, headers=JSON_HEADERS
        ) as response:
            if response.is_error:
                logger.warning(
                    LogMessages.AUDIO_UNAVAILABLE.format(
                        path=path,
                        reason=LogMessages.AUDIO_HTTP_STATUS.format(
                            status_code=response.status_code
                        ),
                    )
                )
                return False

            size_bytes = 0
            with open(destination, "wb") as f:
                async for chunk in response.aiter_bytes(AUDIO_STREAM_CHUNK_SIZE):
                    f.write(chunk)
                    size_bytes += len(chunk)

        logger.info(
            LogMessages.AUDIO_DOWNLOADED.format(
                size_kb=size_bytes / 1024, destination=destination
            )
        )
        return True

    async def upload_audio_file(self, path: str, file_path: Path) -> Optional[str]:
        """
        Upload a local audio file as the raw request body.

        Implements IRequestGateway.upload_audio_file() interface.

        Returns:
            record_name from the response, or None if the response has none

        Raises:
            OSError: If the file cannot be read (no request is made)
            InvalidURLError: If the URL is malformed
            RequestFailedError: On transport failure
            ParsingFailedError: If the response body is empty or not valid JSON
        """
        url = self.build_url(path)

        try:
            with open(file_path, "rb") as f:
                audio_data = f.read()
        except OSError as e:
            logger.error(ErrorMessages.AUDIO_READ_FAILED.format(file=file_path, error=e))
            raise

        logger.info(
            LogMessages.AUDIO_UPLOADING.format(
                size_kb=len(audio_data) / 1024, file=file_path, path=path
            )
        )
        response = await self._send(
            HttpMethod.POST, url, path, audio_data, AUDIO_UPLOAD_HEADERS
        )
        data = decode_json_object(response.content, path) or {}
        record_name = data.get(RECORD_NAME_FIELD)
        if not isinstance(record_name, str):
            logger.warning(LogMessages.RECORD_NAME_MISSING.format(path=path))
            return None

        logger.info(LogMessages.AUDIO_UPLOADED.format(path=path, record_name=record_name))
        return record_name

    async def aclose(self) -> None:
        """Close the HTTP client if this gateway created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()


# Global singleton instance
_request_gateway: Optional[RequestGateway] = None


def get_request_gateway(audio_player: Optional[IAudioPlayer] = None) -> RequestGateway:
    """
    Get or create global RequestGateway instance (singleton) for the
    configured backend.

    Args:
        audio_player: IAudioPlayer used for label audio (default: SubprocessAudioPlayer)

    Returns:
        RequestGateway instance
    """
    global _request_gateway

    if _request_gateway is None:
        settings = get_settings()
        logger.info("Creating RequestGateway instance...")
        _request_gateway = RequestGateway(
            base_url=settings.base_url,
            audio_player=audio_player,
            temp_dir=Path(settings.temp_dir),
            timeout=httpx.Timeout(
                connect=settings.http_connect_timeout,
                read=settings.http_read_timeout,
                write=settings.http_write_timeout,
                pool=settings.http_pool_timeout,
            ),
        )

    return _request_gateway
