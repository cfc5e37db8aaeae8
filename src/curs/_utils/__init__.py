from ._ssl_context import get_httpx_client_kwargs
from ._user_agent import user_agent_value

__all__ = [
    "get_httpx_client_kwargs",
    "user_agent_value",
]
