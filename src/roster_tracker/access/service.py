from __future__ import annotations

import hmac

from ..core.exceptions import AuthenticationError


class AccessService:
    """Shared access-code check for the dashboard.

    This is a convenience gate for a single organization, not user
    authentication: everyone shares one code and no identity is recorded.
    """

    def __init__(self, access_code: str):
        self._access_code = str(access_code or "")

    def verify(self, code: str) -> bool:
        if not self._access_code:
            return False
        return hmac.compare_digest(str(code or "").encode("utf-8"), self._access_code.encode("utf-8"))

    def require(self, code: str) -> None:
        if not self.verify(code):
            raise AuthenticationError("Invalid access code. Please try again.")
