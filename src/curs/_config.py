import os

from pydantic import BaseModel, Field

from ._utils._user_agent import user_agent_value
from ._utils.constants import ENV_DISABLE_SSL_VERIFY, ENV_USER_AGENT


class Config(BaseModel):
    """Settings for the client that ``Request.send`` creates on its own.

    Ignored when the caller hands an ``httpx.Client`` to ``send``.
    """

    user_agent: str = Field(default_factory=user_agent_value)
    follow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        values: dict[str, object] = {}

        user_agent = os.getenv(ENV_USER_AGENT)
        if user_agent:
            values["user_agent"] = user_agent

        disable_ssl = os.getenv(ENV_DISABLE_SSL_VERIFY, "")
        if disable_ssl.lower() in ("1", "true", "yes"):
            values["verify_ssl"] = False

        return cls.model_validate(values)
