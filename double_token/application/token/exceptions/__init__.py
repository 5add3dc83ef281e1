"""Token Application Exceptions."""

from double_token.application.token.exceptions.token import (
    InvalidTokenError,
    TokenExpiredError,
)

__all__ = ["InvalidTokenError", "TokenExpiredError"]
