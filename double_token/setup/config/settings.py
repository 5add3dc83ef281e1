"""Application Settings.

env_prefix="DOUBLE_TOKEN_" 사용으로 DOUBLE_TOKEN_ISSUER 등의 환경변수 매핑.
서명 키는 기존 배포와의 호환을 위해 JWT_SECRET_KEY 도 허용합니다.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """토큰 발급 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        DOUBLE_TOKEN_SIGNING_KEY → signing_key
        DOUBLE_TOKEN_ACCESS_TOKEN_TTL_SECONDS → access_token_ttl_seconds
    """

    environment: str = "local"

    # JWT
    signing_key: str = Field(
        default="",
        validation_alias=AliasChoices("DOUBLE_TOKEN_SIGNING_KEY", "JWT_SECRET_KEY"),
    )
    issuer: str = ""
    access_token_ttl_seconds: int = 60 * 60 * 3
    refresh_token_ttl_seconds: int = 60 * 60 * 24 * 30

    model_config = SettingsConfigDict(
        env_prefix="DOUBLE_TOKEN_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
