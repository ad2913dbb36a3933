"""
Request Gateway Interface - One HTTP exchange per logical operation.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel  # type: ignore

from core.constants import HttpMethod

T = TypeVar("T")

BodyParams = Union[BaseModel, Mapping[str, Any]]


class IRequestGateway(ABC):
    """
    Abstract interface for talking to the scene-understanding backend.

    Implementations:
    - infrastructure.http.gateway.RequestGateway
    """

    @abstractmethod
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

        Args:
            path: Path appended to the base endpoint
            method: GET or POST
            response_type: Pydantic model (or any TypeAdapter-compatible type)
            query_params: Flat string mapping appended as URL query
            body_params: JSON object body (mapping or request model)

        Returns:
            Decoded response

        Raises:
            InvalidURLError: If path and base endpoint do not form a valid URL
            RequestFailedError: On transport failure or empty response body
            ParsingFailedError: If the body cannot be encoded or decoded
        """
        pass

    @abstractmethod
    async def request_image(
        self, path: str, query_params: Optional[BodyParams] = None
    ) -> Optional[Any]:
        """
        POST query_params as JSON and decode the response as an image.

        Returns:
            Decoded image, or None on any failure
        """
        pass

    @abstractmethod
    async def request_audio_and_play(
        self, path: str, query_params: Optional[BodyParams] = None
    ) -> None:
        """
        POST query_params as JSON, stream the audio response to disk and play it.

        Failures are logged, never raised.
        """
        pass

    @abstractmethod
    async def upload_audio_file(self, path: str, file_path: Path) -> Optional[str]:
        """
        Upload a local audio file as raw bytes.

        Returns:
            record_name from the response, or None when the response has none

        Raises:
            OSError: If the file cannot be read (no request is made)
            InvalidURLError: If path and base endpoint do not form a valid URL
            RequestFailedError: On transport failure
            ParsingFailedError: If the response body is empty or not valid JSON
        """
        pass

    @abstractmethod
    async def aclose(self) -> None:
        """Release network resources."""
        pass
