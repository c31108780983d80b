from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    phone: str | None = None
    created_at: str | None = None


@dataclass(frozen=True)
class UserCredentials:
    user_id: str
    password_hash: str
    provider: str = "email"
