"""JWT Double Token Service.

DoubleTokenIssuer 포트의 구현체입니다.
같은 info 를 담은 HS256 JWT 한 쌍(refresh/access)을 발급하고 검증합니다.

Wire 형식은 표준 JWS compact serialization 이며 header 는
{"alg": "HS256", "typ": "JWT"}, payload 클레임은 info/exp/iss 만 사용합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Union

from jose import jwk, jwt
from jose.exceptions import JOSEError, JWKError, JWTError
from pydantic import ValidationError

from double_token.application.token.ports.issuer import TokenPair
from double_token.domain.enums.token_validity import TokenValidity
from double_token.domain.exceptions import ParseError, SigningError, TokenRejectedError
from double_token.domain.value_objects.signing_config import KeyLike, SigningConfig
from double_token.domain.value_objects.token_claims import TokenClaims
from double_token.domain.value_objects.token_status import TokenStatus
from double_token.infrastructure.clock import SystemClock

if TYPE_CHECKING:
    from double_token.application.token.ports.clock import Clock

ALGORITHM = "HS256"

# exp 는 주입된 Clock 기준으로 직접 평가한다.
_DECODE_OPTIONS = {"verify_exp": False}

logger = logging.getLogger(__name__)


class JwtDoubleTokenService:
    """JWT 토큰 쌍 서비스.

    DoubleTokenIssuer 구현체. key 없이 생성하면 미설정 상태이며,
    configure() 호출 전까지 발급은 SigningError, 검증은 ParseError 가 됩니다.

    설정은 하나의 SigningConfig 참조로 보관하고 각 연산은 이를 한 번만
    읽으므로, 동시에 configure() 가 호출되어도 이전/새 설정 중 하나만 관찰됩니다.
    """

    def __init__(
        self,
        *,
        key: KeyLike = None,
        issuer: str = "",
        clock: "Clock | None" = None,
    ) -> None:
        self._config = SigningConfig(key=key, issuer=issuer)
        self._clock = clock or SystemClock()

    @property
    def config(self) -> SigningConfig:
        return self._config

    def configure(self, key: KeyLike, issuer: str) -> None:
        """서명 키와 발급자 교체."""
        self._config = SigningConfig(key=key, issuer=issuer)

    def create_pair(self, info: bytes, refresh_ttl: int, access_ttl: int) -> TokenPair:
        """토큰 쌍 발급.

        두 토큰의 exp 는 한 번 읽은 현재 시각에 각각의 TTL 을 더한 값입니다.
        TTL 이 0 이하이면 이미 만료된 토큰이 발급됩니다.

        Raises:
            TypeError: info 가 bytes 계열이 아님
            SigningError: 서명 실패
        """
        if not isinstance(info, (bytes, bytearray, memoryview)):
            raise TypeError(f"info must be bytes-like, not {type(info).__name__}")

        config = self._config
        if not config.is_configured:
            raise SigningError("Signing key is not configured")

        now = self._clock.now()
        refresh_claims = TokenClaims(info=info, exp=now + refresh_ttl, iss=config.issuer)
        access_claims = TokenClaims(info=info, exp=now + access_ttl, iss=config.issuer)

        refresh_token = self._sign(refresh_claims, config)
        access_token = self._sign(access_claims, config)
        return TokenPair(
            refresh_token=refresh_token,
            access_token=access_token,
            refresh_expires_at=refresh_claims.exp,
            access_expires_at=access_claims.exp,
        )

    def check_validity(self, token: str) -> TokenStatus:
        """(well_formed, unexpired) 반환.

        일반적인 무효 토큰은 (False, False) 로 보고하며 예외를 던지지 않습니다.
        """
        return self.evaluate(token).status

    def evaluate(self, token: str) -> TokenValidity:
        try:
            claims = self.decode_claims(token)
        except TokenRejectedError:
            return TokenValidity.INVALID

        if claims.is_expired_at(self._clock.now()):
            return TokenValidity.EXPIRED
        return TokenValidity.VALID

    def decode_payload(self, token: str) -> bytes:
        """info 반환. 만료된 토큰도 서명이 유효하면 디코딩됩니다."""
        return self.decode_claims(token).info

    def decode_claims(self, token: str) -> TokenClaims:
        """서명 검증 후 타입 검증된 클레임 반환 (만료 미확인).

        Raises:
            TokenRejectedError: 구조/서명/클레임 형식 오류
            ParseError: 키 미설정, 키 거부, 토큰 타입 오류
        """
        config = self._config
        key = self._verification_key(token, config)

        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=[ALGORITHM],
                options=_DECODE_OPTIONS,
            )
        except JWTError as e:
            logger.debug("Token verification failed", extra={"reason": str(e)})
            raise TokenRejectedError(str(e)) from e
        except RecursionError as e:
            # 과도하게 중첩된 header/payload JSON 은 JWTError 로 감싸지지 않음
            logger.debug("Token verification failed", extra={"reason": "json nesting too deep"})
            raise TokenRejectedError("Token JSON is nested too deeply") from e

        try:
            return TokenClaims.from_wire(payload)
        except ValidationError as e:
            logger.debug(
                "Token claims rejected",
                extra={"error_count": e.error_count()},
            )
            raise TokenRejectedError("Token claims do not match the expected schema") from e

    @staticmethod
    def _sign(claims: TokenClaims, config: SigningConfig) -> str:
        try:
            return jwt.encode(claims.to_wire(), config.key, algorithm=ALGORITHM)
        except JOSEError as e:
            raise SigningError(f"Failed to sign token: {e}") from e

    @staticmethod
    def _verification_key(token: Union[str, bytes], config: SigningConfig) -> jwk.Key:
        if not isinstance(token, (str, bytes)):
            raise ParseError(f"Token must be str or bytes, not {type(token).__name__}")
        if not config.is_configured:
            raise ParseError("Signing key is not configured")
        try:
            return jwk.construct(config.key, ALGORITHM)
        except JWKError as e:
            raise ParseError(f"Signing key rejected: {e}") from e
