"""Test Factories.

테스트용 시계와 토큰 조작 헬퍼.
"""

from __future__ import annotations

import base64
import json
from typing import Any

_B64URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"


class FrozenClock:
    """수동으로 진행시키는 Clock 구현체."""

    def __init__(self, now: int) -> None:
        self._now = now

    def now(self) -> int:
        return self._now

    def advance(self, seconds: int) -> None:
        self._now += seconds


def flip_char(segment: str, index: int) -> str:
    """base64url 문자 하나의 최상위 비트를 뒤집는다 (마지막 문자도 데이터 비트가 바뀜)."""
    flipped = _B64URL_ALPHABET[_B64URL_ALPHABET.index(segment[index]) ^ 0b100000]
    return segment[:index] + flipped + segment[index + 1 :]


def tamper_signature(token: str, index: int = 0) -> str:
    """서명 세그먼트의 index 번째 문자를 변조한 토큰 반환."""
    header, payload, signature = token.split(".")
    return f"{header}.{payload}.{flip_char(signature, index)}"


def b64url(data: Any) -> str:
    """JSON 직렬화 후 padding 없는 base64url 인코딩."""
    raw = data if isinstance(data, bytes) else json.dumps(data).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def unsigned_token(header: dict[str, Any], payload: dict[str, Any], signature: str = "") -> str:
    """임의의 header/payload 로 토큰 문자열 조립."""
    return f"{b64url(header)}.{b64url(payload)}.{signature}"
