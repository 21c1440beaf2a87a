from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorMsg(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    message: Optional[str] = None
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[str] = None


class ErrorResponse(BaseModel):
    """Default error model: ``{"error": {"message", "type", "param", "code"}}``.

    Also used as the fallback payload when a server's error body cannot be
    decoded into the caller's error type.
    """

    model_config = ConfigDict(extra="allow")

    error: Optional[ErrorMsg] = None

    @classmethod
    def fallback(cls, body: str, status_code: int) -> "ErrorResponse":
        return cls(
            error=ErrorMsg(message=body, type="", param="", code=str(status_code))
        )

    def __str__(self) -> str:
        if self.error is None:
            return "Unknown error"
        return f"{self.error.code}: {self.error.message}"
