"""Domain Exceptions."""

from double_token.domain.exceptions.base import DomainError
from double_token.domain.exceptions.token import (
    ParseError,
    SigningError,
    TokenRejectedError,
)

__all__ = [
    "DomainError",
    "SigningError",
    "ParseError",
    "TokenRejectedError",
]
