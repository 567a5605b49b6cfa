from __future__ import annotations

import hmac
from typing import Mapping

from domain.errors import AuthenticationError
from domain.models import AuthenticatedUser


class StaticTokenVerifier:
    """
    ``TokenVerifierPort`` backed by a fixed token-to-user mapping.

    Stands in for an identity provider; the mapping comes from the
    ``API_TOKENS`` entry of config.json.
    """

    def __init__(self, tokens: Mapping[str, str]) -> None:
        self._tokens = dict(tokens)

    def verify(self, token: str) -> AuthenticatedUser:
        if not token:
            raise AuthenticationError("No token provided")
        for known, uid in self._tokens.items():
            if hmac.compare_digest(known.encode("utf-8"), token.encode("utf-8")):
                return AuthenticatedUser(uid=uid)
        raise AuthenticationError("Invalid token")
