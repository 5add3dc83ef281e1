"""Token Exceptions.

서명/검증 프리미티브에서 발생한 실패를 도메인 예외로 표현합니다.
"""

from double_token.domain.exceptions.base import DomainError


class SigningError(DomainError):
    """토큰 서명 실패.

    서명 키가 설정되지 않았거나 서명 프리미티브가 키를 거부한 경우 발생합니다.
    """

    def __init__(self, reason: str = "Failed to sign token") -> None:
        super().__init__(reason)


class ParseError(DomainError):
    """토큰 파싱/검증 실패.

    check_validity 에서는 토큰 자체와 무관한 검증기 오류(키 미설정, 키 거부,
    잘못된 입력 타입)일 때만 발생합니다.
    """

    def __init__(self, reason: str = "Failed to parse token") -> None:
        super().__init__(reason)


class TokenRejectedError(ParseError):
    """서명 불일치, 구조 오류, 클레임 형식 오류 등 일반적인 무효 토큰."""

    def __init__(self, reason: str = "Token could not be verified") -> None:
        super().__init__(reason)
