"""Application Base Exception."""


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    def __init__(self, message: str = "Application error") -> None:
        self.message = message
        super().__init__(message)
