from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class SessionUser:
    id: str
    email: str
    name: str | None = None


@dataclass(frozen=True, kw_only=True)
class UserSession:
    user: SessionUser
    access_token: str
    refresh_token: str | None = None
