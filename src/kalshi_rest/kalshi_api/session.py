"""Authentication state carried by a client."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Optional

from .exceptions import NotAuthenticatedError

BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class Session:
    """Base URL plus the bearer token and member id obtained by login.

    Sessions are immutable; login and logout produce new values.
    """

    base_url: str
    token: Optional[str] = None
    member_id: Optional[str] = None

    def __repr__(self) -> str:
        token_state = "set" if self.token else None
        return f"Session(base_url={self.base_url!r}, token={token_state!r}, member_id={self.member_id!r})"

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def authenticated(self, raw_token: str, member_id: str) -> "Session":
        return replace(self, token=f"{BEARER_PREFIX}{raw_token}", member_id=member_id)

    def cleared(self) -> "Session":
        return replace(self, token=None, member_id=None)

    def auth_headers(self, operation: str = "") -> Dict[str, str]:
        if self.token is None:
            raise NotAuthenticatedError(operation)
        return {"Authorization": self.token}


__all__ = ["BEARER_PREFIX", "Session"]
