"""Token Services."""

from double_token.application.token.services.token_service import TokenService

__all__ = ["TokenService"]
