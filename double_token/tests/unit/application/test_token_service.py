"""TokenService 단위 테스트."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, create_autospec

import pytest

from double_token.application.token.exceptions import (
    InvalidTokenError,
    TokenExpiredError,
)
from double_token.application.token.ports import DoubleTokenIssuer, TokenPair
from double_token.application.token.services import TokenService
from double_token.domain.enums.token_validity import TokenValidity
from double_token.domain.exceptions import ParseError
from double_token.infrastructure.security import JwtDoubleTokenService
from double_token.tests.unit.factories import FrozenClock, tamper_signature


class TestTokenService:
    """실제 JwtDoubleTokenService 를 사용하는 TokenService 테스트."""

    @pytest.fixture
    def service(self, token_service: JwtDoubleTokenService) -> TokenService:
        return TokenService(
            token_service,
            refresh_ttl_seconds=3600,
            access_ttl_seconds=60,
        )

    def test_issue_uses_default_ttls(
        self, service: TokenService, info: bytes, clock: FrozenClock
    ) -> None:
        """기본 TTL 로 토큰 쌍 발급."""
        # Act
        pair = service.issue(info)

        # Assert
        assert pair.refresh_expires_at == clock.now() + 3600
        assert pair.access_expires_at == clock.now() + 60
        assert service.issuer.decode_payload(pair.access_token) == info

    def test_issue_logs(
        self, service: TokenService, info: bytes, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO):
            service.issue(info)

        assert "Token pair issued" in caplog.text
        assert info.decode() not in caplog.text

    def test_refresh_mints_new_pair_with_same_info(
        self, service: TokenService, info: bytes, clock: FrozenClock
    ) -> None:
        """리프레시 토큰으로 새 토큰 쌍 발급."""
        # Arrange
        pair = service.issue(info)
        clock.advance(120)

        # Act
        new_pair = service.refresh(pair.refresh_token)

        # Assert
        assert service.issuer.check_validity(pair.access_token) == (True, False)
        assert service.issuer.check_validity(new_pair.access_token) == (True, True)
        assert service.issuer.decode_payload(new_pair.access_token) == info
        assert new_pair.access_expires_at == clock.now() + 60

    def test_refresh_expired_token_raises(
        self, service: TokenService, info: bytes, clock: FrozenClock
    ) -> None:
        # Arrange
        pair = service.issue(info)
        clock.advance(3601)

        # Act & Assert
        with pytest.raises(TokenExpiredError):
            service.refresh(pair.refresh_token)

    def test_refresh_invalid_token_raises(self, service: TokenService, info: bytes) -> None:
        pair = service.issue(info)

        with pytest.raises(InvalidTokenError):
            service.refresh(tamper_signature(pair.refresh_token))

    def test_authenticate_returns_info(self, service: TokenService, info: bytes) -> None:
        pair = service.issue(info)

        assert service.authenticate(pair.access_token) == info

    def test_authenticate_rejects_expired_token(
        self,
        service: TokenService,
        info: bytes,
        clock: FrozenClock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """decode_payload 와 달리 만료된 토큰은 거부."""
        # Arrange
        pair = service.issue(info)
        clock.advance(61)

        # Act & Assert
        with caplog.at_level(logging.WARNING), pytest.raises(TokenExpiredError):
            service.authenticate(pair.access_token)
        assert "Token rejected" in caplog.text
        assert service.issuer.decode_payload(pair.access_token) == info

    def test_authenticate_propagates_parse_error(self, info: bytes) -> None:
        """검증기 오류(키 미설정)는 그대로 전파."""
        service = TokenService(
            JwtDoubleTokenService(),
            refresh_ttl_seconds=3600,
            access_ttl_seconds=60,
        )

        with pytest.raises(ParseError):
            service.authenticate("a.b.c")


class TestTokenServiceWithMockIssuer:
    """Mock DoubleTokenIssuer 를 사용하는 TokenService 테스트."""

    @pytest.fixture
    def mock_issuer(self) -> MagicMock:
        return create_autospec(DoubleTokenIssuer, instance=True)

    @pytest.fixture
    def service(self, mock_issuer: MagicMock) -> TokenService:
        return TokenService(mock_issuer, refresh_ttl_seconds=100, access_ttl_seconds=10)

    def test_issue_delegates_to_create_pair(
        self, service: TokenService, mock_issuer: MagicMock
    ) -> None:
        # Arrange
        expected = TokenPair(
            refresh_token="r", access_token="a", refresh_expires_at=100, access_expires_at=10
        )
        mock_issuer.create_pair.return_value = expected

        # Act
        pair = service.issue(b"payload")

        # Assert
        assert pair is expected
        mock_issuer.create_pair.assert_called_once_with(b"payload", 100, 10)

    def test_invalid_refresh_token_is_not_decoded(
        self, service: TokenService, mock_issuer: MagicMock
    ) -> None:
        # Arrange
        mock_issuer.evaluate.return_value = TokenValidity.INVALID

        # Act & Assert
        with pytest.raises(InvalidTokenError):
            service.refresh("token")
        mock_issuer.decode_payload.assert_not_called()
        mock_issuer.create_pair.assert_not_called()
