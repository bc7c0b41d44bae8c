"""API client for communicating with the recommendation service."""

import logging

import httpx
from pydantic import ValidationError

from src.api.models import RecommendRequest, RecommendResponse
from src.config import get_settings
from src.ui.errors import DecodingError, ServiceError, TransportError

logger = logging.getLogger(__name__)


class APIClient:
    """Client for the ramen recommendation API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            base_url: Base URL of the recommendation service. If not provided, uses
                     the API_BASE_URL setting (which may be empty).
            timeout: Request timeout in seconds. Defaults to the REQUEST_TIMEOUT setting.
            transport: Optional httpx transport, used to fake the service in tests.
        """
        settings = get_settings()
        self.base_url = settings.api_base_url if base_url is None else base_url
        self.timeout = settings.request_timeout if timeout is None else timeout
        self._transport = transport

    @property
    def recommend_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/recommend"

    async def recommend(self, request: RecommendRequest) -> str:
        """Request a recommendation.

        Args:
            request: Selections to send.

        Returns:
            Raw markdown text from the ``message`` field of the response.

        Raises:
            TransportError: If the request could not be completed.
            ServiceError: If the service returned a non-2xx status.
            DecodingError: If the body has no string ``message`` field.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.recommend_url,
                    json=request.to_wire(),
                    headers={"Content-Type": "application/json"},
                )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(str(e)) from e

        logger.debug(f"Response from {self.recommend_url}: {response.status_code}")

        if not response.is_success:
            raise ServiceError(response.status_code)

        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> str:
        """Validate the response body structurally and extract the message."""
        try:
            data = response.json()
        except ValueError as e:
            raise DecodingError(f"Response body is not JSON: {e}") from e

        try:
            return RecommendResponse.model_validate(data).message
        except ValidationError as e:
            raise DecodingError(f"Unexpected response shape: {e}") from e
