from .errors import ErrorMsg, ErrorResponse
from .exceptions import CodableRequestError, RemoteError

__all__ = [
    "CodableRequestError",
    "ErrorMsg",
    "ErrorResponse",
    "RemoteError",
]
