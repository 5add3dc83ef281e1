"""Domain Value Objects."""

from double_token.domain.value_objects.signing_config import SigningConfig
from double_token.domain.value_objects.token_claims import TokenClaims
from double_token.domain.value_objects.token_status import TokenStatus

__all__ = ["SigningConfig", "TokenClaims", "TokenStatus"]
