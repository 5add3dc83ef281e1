"""TokenClaims Value Object.

토큰에 서명되어 담기는 클레임 레코드입니다.

Wire 형식 (JWT payload):
    info: 표준 base64 문자열 (padding 포함)
    exp:  만료 시각 (Unix seconds, 정수)
    iss:  발급자
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator


class TokenClaims(BaseModel):
    """토큰 클레임.

    외부 도구가 발급한 토큰의 추가 클레임(iat 등)은 무시합니다.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    info: bytes
    exp: int
    iss: StrictStr

    @field_validator("info", mode="before")
    @classmethod
    def _decode_info(cls, value: Any) -> bytes:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except binascii.Error as exc:
                raise ValueError("info must be standard base64") from exc
        raise ValueError("info must be a base64 string")

    @field_validator("exp", mode="before")
    @classmethod
    def _check_exp(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("exp must be a number of Unix seconds")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError("exp must be a whole number of seconds")
            return int(value)
        return value

    @classmethod
    def from_wire(cls, claims: Mapping[str, Any]) -> "TokenClaims":
        """디코딩된 JWT payload 를 타입 검증하여 변환.

        Raises:
            pydantic.ValidationError: 클레임 형식 불일치
        """
        return cls.model_validate(dict(claims))

    def to_wire(self) -> dict[str, Any]:
        """JWT payload 로 서명할 평탄한 클레임 반환."""
        return {
            "info": base64.b64encode(self.info).decode("ascii"),
            "exp": self.exp,
            "iss": self.iss,
        }

    def is_expired_at(self, now: int) -> bool:
        return self.exp < now
