"""TokenValidity Enum."""

from __future__ import annotations

from enum import Enum

from double_token.domain.value_objects.token_status import TokenStatus


class TokenValidity(str, Enum):
    """토큰 검증 결과 (3-상태).

    외부 계약은 TokenStatus(well_formed, unexpired) 두 불리언입니다.
    """

    INVALID = "invalid"
    EXPIRED = "expired"
    VALID = "valid"

    @property
    def status(self) -> TokenStatus:
        """두 불리언 형태의 결과 반환."""
        return TokenStatus(
            well_formed=self is not TokenValidity.INVALID,
            unexpired=self is TokenValidity.VALID,
        )
