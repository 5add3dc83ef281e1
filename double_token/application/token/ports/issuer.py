"""DoubleTokenIssuer Port.

refresh/access 토큰 쌍 발급/검증을 위한 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol

from double_token.domain.enums.token_validity import TokenValidity
from double_token.domain.value_objects.signing_config import KeyLike, SigningConfig
from double_token.domain.value_objects.token_claims import TokenClaims
from double_token.domain.value_objects.token_status import TokenStatus


@dataclass(frozen=True, slots=True)
class TokenPair:
    """토큰 쌍 데이터 클래스.

    언패킹 순서는 (refresh_token, access_token) 입니다.
    """

    refresh_token: str
    access_token: str
    refresh_expires_at: int
    access_expires_at: int

    def __iter__(self) -> Iterator[str]:
        yield self.refresh_token
        yield self.access_token


class DoubleTokenIssuer(Protocol):
    """토큰 쌍 발급자 인터페이스.

    구현체:
        - JwtDoubleTokenService (infrastructure/security/)
    """

    @property
    def config(self) -> SigningConfig:
        """현재 서명 설정 스냅샷."""
        ...

    def configure(self, key: KeyLike, issuer: str) -> None:
        """서명 키와 발급자를 원자적으로 교체.

        Args:
            key: 서명 키 (검증하지 않음)
            issuer: 발급자 식별자
        """
        ...

    def create_pair(self, info: bytes, refresh_ttl: int, access_ttl: int) -> TokenPair:
        """refresh/access 토큰 쌍 발급.

        Args:
            info: 두 토큰에 공통으로 담기는 페이로드
            refresh_ttl: 리프레시 토큰 TTL (초, 0 이하 허용)
            access_ttl: 액세스 토큰 TTL (초, 0 이하 허용)

        Returns:
            토큰 쌍

        Raises:
            TypeError: info 가 bytes 계열이 아님
            SigningError: 서명 실패
        """
        ...

    def check_validity(self, token: str) -> TokenStatus:
        """토큰 검증 결과를 (well_formed, unexpired) 로 반환.

        Raises:
            ParseError: 토큰과 무관한 검증기 오류
        """
        ...

    def evaluate(self, token: str) -> TokenValidity:
        """check_validity 의 3-상태 버전."""
        ...

    def decode_payload(self, token: str) -> bytes:
        """서명 검증 후 info 반환. 만료 여부는 확인하지 않습니다.

        Raises:
            ParseError: 검증 또는 파싱 실패
        """
        ...

    def decode_claims(self, token: str) -> TokenClaims:
        """서명 검증 후 클레임 전체 반환. 만료 여부는 확인하지 않습니다.

        Raises:
            ParseError: 검증 또는 파싱 실패
        """
        ...
