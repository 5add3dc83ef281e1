"""Dependency Setup.

Settings 를 토큰 발급자/서비스로 조립하는 팩토리 함수입니다.
"""

from __future__ import annotations

from functools import lru_cache

from double_token.application.token.services import TokenService
from double_token.infrastructure.security import JwtDoubleTokenService
from double_token.setup.config import Settings, get_settings


def build_token_issuer(settings: Settings) -> JwtDoubleTokenService:
    """설정으로 JwtDoubleTokenService 생성."""
    return JwtDoubleTokenService(key=settings.signing_key, issuer=settings.issuer)


def build_token_service(
    settings: Settings,
    issuer: JwtDoubleTokenService | None = None,
) -> TokenService:
    """설정의 기본 TTL 로 TokenService 생성."""
    return TokenService(
        issuer or build_token_issuer(settings),
        refresh_ttl_seconds=settings.refresh_token_ttl_seconds,
        access_ttl_seconds=settings.access_token_ttl_seconds,
    )


@lru_cache
def get_token_issuer() -> JwtDoubleTokenService:
    """프로세스 공용 발급자 제공자."""
    return build_token_issuer(get_settings())


def get_token_service() -> TokenService:
    """TokenService 제공자."""
    return build_token_service(get_settings(), get_token_issuer())
