# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for resolving a bearer token back to its verified claims."""

from __future__ import annotations

from splitwise.domain.users.entities import TokenClaims
from splitwise.domain.users.exceptions import InvalidTokenError
from splitwise.domain.users.repositories import TokenIssuer
from splitwise.shared.logging import logger

_BEARER_PREFIX = "bearer "


class AuthenticateTokenUseCase:
    def __init__(self, *, tokens: TokenIssuer) -> None:
        self._tokens = tokens

    def execute(self, token: str) -> TokenClaims:
        token = (token or "").strip()
        if token.lower().startswith(_BEARER_PREFIX):
            token = token[len(_BEARER_PREFIX):].strip()
        if not token:
            raise InvalidTokenError()

        try:
            claims = self._tokens.decode(token)
        except InvalidTokenError:
            logger.debug("auth.token: rejected")
            raise
        logger.debug(f"auth.token: ok user_id={claims.user_id}")
        return claims
