"""Token Exceptions."""

from double_token.application.common.exceptions.base import ApplicationError


class InvalidTokenError(ApplicationError):
    """서명 또는 형식이 유효하지 않은 토큰."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)


class TokenExpiredError(ApplicationError):
    """서명은 유효하지만 만료된 토큰."""

    def __init__(self, reason: str = "Token has expired") -> None:
        super().__init__(reason)
