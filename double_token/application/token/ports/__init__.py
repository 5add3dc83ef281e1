"""Token domain ports.

JWT 토큰 쌍 발급/검증 및 시계 관련 포트입니다.
"""

from double_token.application.token.ports.clock import Clock
from double_token.application.token.ports.issuer import DoubleTokenIssuer, TokenPair

__all__ = ["Clock", "DoubleTokenIssuer", "TokenPair"]
