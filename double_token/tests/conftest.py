"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from typing import Generator

import pytest

from double_token.infrastructure.security import JwtDoubleTokenService
from double_token.tests.unit.factories import FrozenClock

# ============================================================
# Environment
# ============================================================


@pytest.fixture(scope="session", autouse=True)
def _test_env() -> Generator[None, None, None]:
    """Set test environment variables."""
    original = os.environ.copy()
    os.environ.update(
        {
            "JWT_SECRET_KEY": "test-secret-key-for-testing-only",
            "DOUBLE_TOKEN_ENVIRONMENT": "test",
        }
    )
    yield
    os.environ.clear()
    os.environ.update(original)


# ============================================================
# Domain Fixtures
# ============================================================


@pytest.fixture
def signing_key() -> bytes:
    """테스트용 서명 키."""
    return b"secret"


@pytest.fixture
def issuer() -> str:
    """테스트용 발급자."""
    return "svc-a"


@pytest.fixture
def info() -> bytes:
    """테스트용 페이로드."""
    return b"user:42"


@pytest.fixture
def clock() -> FrozenClock:
    """고정 시계 (2026-01-01T00:00:00Z)."""
    return FrozenClock(1_767_225_600)


# ============================================================
# Service Fixtures
# ============================================================


@pytest.fixture
def token_service(
    signing_key: bytes, issuer: str, clock: FrozenClock
) -> JwtDoubleTokenService:
    return JwtDoubleTokenService(key=signing_key, issuer=issuer, clock=clock)
