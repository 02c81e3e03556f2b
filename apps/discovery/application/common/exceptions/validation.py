"""검증 관련 예외."""

from discovery.application.common.exceptions.base import ApplicationError


class InvalidArgumentError(ApplicationError):
    """호출자가 범위를 벗어난 인자를 전달함. 재시도하지 않습니다."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field}: {reason}")


class InvalidInteractionTypeError(ApplicationError):
    """유효하지 않은 interaction_type 값."""

    def __init__(self, value: str, allowed: list[str]) -> None:
        super().__init__(f"Invalid interaction_type '{value}'. Allowed values: {allowed}.")
