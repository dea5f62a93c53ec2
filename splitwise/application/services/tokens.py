# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JWT bearer tokens.

Tokens are HS256-signed with a process-wide secret and carry ``sub`` /
``user_id`` (the user id), ``iss``, ``iat``, ``nbf`` and ``exp``. Nothing is
stored server side: a token is valid exactly when its signature, issuer and
time window check out.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from splitwise.domain.users.entities import SessionToken, TokenClaims
from splitwise.domain.users.exceptions import InvalidTokenError, TokenGenerationError
from splitwise.domain.users.repositories import TokenIssuer

ALGORITHM = "HS256"
DEFAULT_ISSUER = "splitwise-clone"
DEFAULT_TTL = timedelta(hours=24)

_REQUIRED_CLAIMS = ["sub", "iss", "iat", "nbf", "exp"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        *,
        secret: str,
        issuer: str = DEFAULT_ISSUER,
        ttl: timedelta = DEFAULT_TTL,
        leeway: timedelta = timedelta(0),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._issuer = issuer
        self._ttl = ttl
        self._leeway = leeway
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, user_id: UUID) -> SessionToken:
        # JWT NumericDate has whole-second precision.
        now = self._clock().replace(microsecond=0)
        expires_at = now + self._ttl
        payload = {
            "sub": str(user_id),
            "user_id": str(user_id),
            "iss": self._issuer,
            "iat": now,
            "nbf": now,
            "exp": expires_at,
        }
        try:
            token = jwt.encode(payload, self._secret, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as exc:
            raise TokenGenerationError() from exc
        if not token:
            raise TokenGenerationError()
        return SessionToken(user_id=user_id, token=token, issued_at=now, expires_at=expires_at)

    def decode(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                issuer=self._issuer,
                leeway=self._leeway,
                options={"require": _REQUIRED_CLAIMS},
            )
            return TokenClaims(
                user_id=UUID(payload["sub"]),
                issuer=payload["iss"],
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                not_before=datetime.fromtimestamp(payload["nbf"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (jwt.PyJWTError, KeyError, TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc
