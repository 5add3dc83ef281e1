"""double-token: HS256 refresh/access JWT pair issuer."""

from double_token.application.token.ports import Clock, DoubleTokenIssuer, TokenPair
from double_token.application.token.services import TokenService
from double_token.domain.enums import TokenValidity
from double_token.domain.exceptions import DomainError, ParseError, SigningError
from double_token.domain.value_objects import SigningConfig, TokenClaims, TokenStatus
from double_token.infrastructure.security import JwtDoubleTokenService

__all__ = [
    "Clock",
    "DoubleTokenIssuer",
    "DomainError",
    "JwtDoubleTokenService",
    "ParseError",
    "SigningConfig",
    "SigningError",
    "TokenClaims",
    "TokenPair",
    "TokenService",
    "TokenStatus",
    "TokenValidity",
]
