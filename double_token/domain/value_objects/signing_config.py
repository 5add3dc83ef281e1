"""SigningConfig Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

KeyLike = Union[bytes, bytearray, memoryview, str, None]


def _as_bytes(key: KeyLike) -> bytes:
    if key is None:
        return b""
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


@dataclass(frozen=True, slots=True)
class SigningConfig:
    """서명 키와 발급자 식별자.

    설정 변경 시 인스턴스 전체를 교체합니다. 가변 버퍼로 전달된 키는
    bytes 로 복사되므로 호출자가 이후 버퍼를 수정해도 영향이 없습니다.
    """

    key: bytes = b""
    issuer: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", _as_bytes(self.key))

    @property
    def is_configured(self) -> bool:
        """서명 키가 설정되어 있는지 여부."""
        return bool(self.key)

    def __repr__(self) -> str:
        # 키 값은 노출하지 않음
        return f"SigningConfig(key=<{len(self.key)} bytes>, issuer={self.issuer!r})"
