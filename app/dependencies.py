from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from app.config.app_config import DEFAULT_USER_ID
from app.utils.identifiers import parse_user_id


@dataclass(frozen=True)
class RequestContext:
    """Identity of the caller, resolved once per request."""
    user_id: int


async def get_request_context(x_user_id: Optional[str] = Header(None)) -> RequestContext:
    # No authentication: the caller names itself, or acts as the demo user
    user_id = parse_user_id(x_user_id)
    return RequestContext(user_id=user_id if user_id is not None else DEFAULT_USER_ID)
