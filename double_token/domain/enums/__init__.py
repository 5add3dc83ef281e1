"""Domain Enums."""

from double_token.domain.enums.token_validity import TokenValidity

__all__ = ["TokenValidity"]
