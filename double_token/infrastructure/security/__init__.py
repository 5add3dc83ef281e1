"""Security Adapters."""

from double_token.infrastructure.security.jwt_token_service import (
    ALGORITHM,
    JwtDoubleTokenService,
)

__all__ = ["ALGORITHM", "JwtDoubleTokenService"]
