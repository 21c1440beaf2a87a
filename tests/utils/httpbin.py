from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class HTTPBinHeaders(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    accept: Optional[str] = Field(default=None, alias="Accept")
    authorization: Optional[str] = Field(default=None, alias="Authorization")
    cache_control: Optional[str] = Field(default=None, alias="Cache-Control")
    content_type: Optional[str] = Field(default=None, alias="Content-Type")
    host: Optional[str] = Field(default=None, alias="Host")
    user_agent: Optional[str] = Field(default=None, alias="User-Agent")


class HTTPBin(BaseModel):
    """The subset of an httpbin.org echo response the tests look at."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    args: Optional[Dict[str, str]] = None
    data: Optional[str] = None
    files: Optional[Dict[str, str]] = None
    form: Optional[Dict[str, str]] = None
    headers: Optional[HTTPBinHeaders] = None
    json_: Optional[Dict[str, Any]] = Field(default=None, alias="json")
    origin: Optional[str] = None
    url: Optional[str] = None
