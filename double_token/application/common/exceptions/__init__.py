"""Application Exceptions.

공통 예외만 포함합니다. 토큰 관련 예외는 다음에서 직접 import하세요:
  - double_token.application.token.exceptions.*
"""

from double_token.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
