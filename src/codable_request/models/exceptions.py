from typing import Any, Optional

from httpx import Response


def _request_url(response: Optional[Response]) -> str:
    if response is None:
        return ""
    try:
        return str(response.request.url)
    except RuntimeError:
        return ""


class CodableRequestError(Exception):
    """Base class for errors raised by codable_request."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class RemoteError(CodableRequestError):
    """Raised when the server answers with an error status.

    Attributes:
        error: The decoded error payload, or an ``ErrorResponse`` built from
            the raw body when decoding failed.
        status_code: HTTP status of the response.
        body: Raw response body text.
        response: The httpx response.
        is_fallback: True when ``error`` is the synthesized fallback payload.
    """

    def __init__(
        self,
        error: Any,
        status_code: int,
        body: str,
        response: Optional[Response] = None,
        is_fallback: bool = False,
    ):
        self.error = error
        self.status_code = status_code
        self.body = body
        self.response = response
        self.is_fallback = is_fallback

        url = _request_url(response)
        message = f"HTTP {status_code}"
        if url:
            message += f" from {url}"
        super().__init__(f"{message}: {error}")

    @property
    def code(self) -> str:
        """Error code reported by the payload, else the HTTP status as a string."""
        nested = getattr(self.error, "error", None)
        code = getattr(nested, "code", None) or getattr(self.error, "code", None)
        if isinstance(code, (str, int)) and not isinstance(code, bool):
            return str(code)
        return str(self.status_code)
