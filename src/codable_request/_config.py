from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ._utils.constants import USER_AGENT_PREFIX, VERSION


def user_agent_value() -> str:
    return f"{USER_AGENT_PREFIX}/{VERSION}"


class Config(BaseModel):
    """Settings applied to the httpx client built for a single request.

    Only used when the caller does not pass its own client.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_agent: str = Field(default_factory=user_agent_value)
    timeout: Optional[Union[int, float]] = None
    follow_redirects: bool = False
    verify_ssl: bool = True
