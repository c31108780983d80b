from __future__ import annotations

import logging
from dataclasses import dataclass

from app.application.exceptions import AuthenticationError, ConflictError, NotFoundError
from app.application.ports.memoraid_store import MemoraidStorePort
from app.domain.entities.user import User, UserCredentials
from app.infrastructure.security.passwords import hash_password, verify_password
from app.infrastructure.security.tokens import TokenSigner

SHARE_PURPOSE = "memory-share"
DAY_SECONDS = 24 * 60 * 60


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    user: User
    token: str


@dataclass
class AuthUseCase:
    store: MemoraidStorePort
    signer: TokenSigner
    session_days: int = 7
    share_days: int = 30

    def register(self, name: str | None, email: str | None, phone: str | None, password: str | None) -> AuthResult:
        name = (name or "").strip()
        email = (email or "").strip()
        if not name or not email or not password:
            raise ValueError("Name, email, and password are required")

        if self.store.get_user_by_email(email) is not None:
            raise ConflictError("User already exists")

        password_hash = hash_password(password)
        user = self.store.create_user(name=name, email=email, phone=(phone or None))

        try:
            self.store.put_credentials(UserCredentials(user_id=user.id, password_hash=password_hash))
        except Exception:
            logger.exception("Storing credentials failed; removing user", extra={"user_id": user.id})
            self.store.delete_user(user.id)
            raise

        logger.info("User registered", extra={"user_id": user.id})
        return AuthResult(user=user, token=self._session_token(user))

    def login(self, email: str | None, password: str | None) -> AuthResult:
        email = (email or "").strip()
        if not email or not password:
            raise ValueError("Email and password are required")

        user = self.store.get_user_by_email(email)
        if user is None:
            raise NotFoundError("User not found")

        credentials = self.store.get_credentials(user.id)
        if credentials is None:
            raise NotFoundError("Authentication information not found")

        if not verify_password(password, credentials.password_hash):
            logger.info("Login rejected", extra={"user_id": user.id, "reason": "bad_password"})
            raise AuthenticationError("Invalid credentials")

        return AuthResult(user=user, token=self._session_token(user))

    def authenticate(self, token: str) -> User:
        """Resolve a session token to its user. Raises AuthenticationError or NotFoundError."""
        claims = self.signer.verify(token)
        user = self.store.get_user(str(claims.get("id") or ""))
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_current_user(self, user_id: str) -> User:
        user = self.store.get_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def generate_share_token(self, user_id: str) -> str:
        return self.signer.sign(
            {"userId": user_id, "purpose": SHARE_PURPOSE},
            expires_in_seconds=self.share_days * DAY_SECONDS,
        )

    def verify_share_token(self, token: str) -> User:
        if not token:
            raise ValueError("Token is required")

        claims = self.signer.verify(token)
        if claims.get("purpose") != SHARE_PURPOSE:
            raise AuthenticationError("Invalid token purpose")

        user = self.store.get_user(str(claims.get("userId") or ""))
        if user is None:
            raise NotFoundError("User not found")
        return user

    def _session_token(self, user: User) -> str:
        return self.signer.sign(
            {"id": user.id, "email": user.email},
            expires_in_seconds=self.session_days * DAY_SECONDS,
        )
