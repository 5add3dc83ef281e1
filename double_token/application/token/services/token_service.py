"""TokenService - 토큰 쌍 발급 및 갱신 서비스.

DoubleTokenIssuer 위에서 기본 TTL 적용, 리프레시 토큰을 통한 재발급,
만료 여부까지 확인하는 페이로드 조회를 담당합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from double_token.application.token.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
)
from double_token.domain.enums.token_validity import TokenValidity

if TYPE_CHECKING:
    from double_token.application.token.ports import DoubleTokenIssuer, TokenPair

logger = logging.getLogger(__name__)


class TokenService:
    """토큰 쌍 발급 및 갱신 서비스.

    Responsibilities:
        - 기본 TTL 로 토큰 쌍 발급
        - 리프레시 토큰으로 새 토큰 쌍 발급
        - 액세스 토큰 검증 후 페이로드 반환

    Collaborators:
        - DoubleTokenIssuer: JWT 토큰 쌍 발급/검증
    """

    def __init__(
        self,
        issuer: "DoubleTokenIssuer",
        *,
        refresh_ttl_seconds: int,
        access_ttl_seconds: int,
    ) -> None:
        self._issuer = issuer
        self._refresh_ttl = refresh_ttl_seconds
        self._access_ttl = access_ttl_seconds

    @property
    def issuer(self) -> "DoubleTokenIssuer":
        return self._issuer

    def issue(self, info: bytes) -> "TokenPair":
        """기본 TTL 로 토큰 쌍을 발급합니다.

        Raises:
            SigningError: 서명 실패
        """
        pair = self._issuer.create_pair(info, self._refresh_ttl, self._access_ttl)
        logger.info(
            "Token pair issued",
            extra={
                "refresh_expires_at": pair.refresh_expires_at,
                "access_expires_at": pair.access_expires_at,
            },
        )
        return pair

    def refresh(self, refresh_token: str) -> "TokenPair":
        """유효한 리프레시 토큰의 info 로 새 토큰 쌍을 발급합니다.

        Args:
            refresh_token: 리프레시 토큰

        Returns:
            새로 발급된 토큰 쌍

        Raises:
            InvalidTokenError: 유효하지 않은 토큰
            TokenExpiredError: 만료된 토큰
            ParseError: 검증기 오류
            SigningError: 서명 실패
        """
        self._ensure_valid(refresh_token, kind="refresh")
        info = self._issuer.decode_payload(refresh_token)
        pair = self._issuer.create_pair(info, self._refresh_ttl, self._access_ttl)
        logger.info(
            "Token pair refreshed",
            extra={
                "refresh_expires_at": pair.refresh_expires_at,
                "access_expires_at": pair.access_expires_at,
            },
        )
        return pair

    def authenticate(self, access_token: str) -> bytes:
        """만료되지 않은 토큰의 info 를 반환합니다.

        decode_payload 와 달리 만료된 토큰은 TokenExpiredError 로 거부합니다.
        """
        self._ensure_valid(access_token, kind="access")
        return self._issuer.decode_payload(access_token)

    def _ensure_valid(self, token: str, *, kind: str) -> None:
        validity = self._issuer.evaluate(token)
        if validity is TokenValidity.VALID:
            return

        logger.warning(
            "Token rejected",
            extra={"token_kind": kind, "validity": validity.value},
        )
        if validity is TokenValidity.EXPIRED:
            raise TokenExpiredError()
        raise InvalidTokenError()
