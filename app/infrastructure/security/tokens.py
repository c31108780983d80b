from __future__ import annotations

import base64
import hmac
import json
import logging
import time
from typing import Any

from app.application.exceptions import AuthenticationError


logger = logging.getLogger(__name__)

_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64decode(segment: str) -> bytes:
    padding = "=" * (-len(segment) % 4)
    return base64.urlsafe_b64decode(segment + padding)


class TokenSigner:
    """
    HS256 compact tokens (JWT wire format) signed with a shared secret.

    Claims `iat` and `exp` are added on sign and `exp` is enforced on verify.
    """

    def __init__(self, secret: str, clock=time.time) -> None:
        if not secret:
            raise ValueError("JWT_SECRET is required to sign tokens.")
        self._secret = secret.encode("utf-8")
        self._clock = clock

    def sign(self, claims: dict[str, Any], expires_in_seconds: int) -> str:
        now = int(self._clock())
        payload = dict(claims)
        payload["iat"] = now
        payload["exp"] = now + int(expires_in_seconds)

        header_seg = _b64encode(json.dumps(_HEADER, separators=(",", ":")).encode("utf-8"))
        payload_seg = _b64encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
        signing_input = f"{header_seg}.{payload_seg}".encode("ascii")
        signature = hmac.new(self._secret, signing_input, "sha256").digest()
        return f"{header_seg}.{payload_seg}.{_b64encode(signature)}"

    def verify(self, token: str) -> dict[str, Any]:
        try:
            header_seg, payload_seg, signature_seg = (token or "").split(".")
        except ValueError:
            raise AuthenticationError("Invalid or expired token")

        signing_input = f"{header_seg}.{payload_seg}".encode("ascii", errors="replace")
        expected = _b64encode(hmac.new(self._secret, signing_input, "sha256").digest())
        if not hmac.compare_digest(expected.encode("ascii"), signature_seg.encode("utf-8")):
            raise AuthenticationError("Invalid or expired token")

        try:
            header = json.loads(_b64decode(header_seg))
            payload = json.loads(_b64decode(payload_seg))
        except (ValueError, TypeError):
            raise AuthenticationError("Invalid or expired token")

        if not isinstance(header, dict) or header.get("alg") != "HS256" or not isinstance(payload, dict):
            raise AuthenticationError("Invalid or expired token")

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)) or exp <= self._clock():
            logger.info("Rejected token", extra={"reason": "expired"})
            raise AuthenticationError("Invalid or expired token")

        return payload
