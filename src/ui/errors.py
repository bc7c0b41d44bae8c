"""Errors raised while talking to the recommendation service."""

TRANSPORT_ERROR_MESSAGE = "APIリクエストに失敗しました。"
DECODING_ERROR_MESSAGE = "APIレスポンスの形式が不正です。"


class RecommendationError(Exception):
    """Base class for recommendation request failures.

    ``user_message`` is safe to show in the UI; the exception text may carry
    diagnostic detail and should only be logged.
    """

    kind = "error"
    user_message = TRANSPORT_ERROR_MESSAGE


class TransportError(RecommendationError):
    """Network failure, timeout, abort or unusable URL."""

    kind = "transport"


class ServiceError(RecommendationError):
    """The service answered with a non-2xx status."""

    kind = "service"

    def __init__(self, status_code: int):
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code

    @property
    def user_message(self) -> str:
        return f"APIリクエストに失敗しました。（HTTP {self.status_code}）"


class DecodingError(RecommendationError):
    """The response body is not JSON or lacks a string ``message`` field."""

    kind = "decoding"
    user_message = DECODING_ERROR_MESSAGE
