"""Business 도메인 예외."""

from discovery.domain.exceptions.base import DomainError


class BusinessNotFoundError(DomainError):
    """비즈니스를 찾을 수 없음."""

    def __init__(self, business_id: str | None = None) -> None:
        self.business_id = business_id
        super().__init__("Business not found")


class MalformedRecordError(DomainError):
    """카탈로그 레코드 형식 오류.

    내부 전용. 쿼리 전체를 실패시키지 않고 로깅 후 제외합니다.
    """

    def __init__(self, record_id: str | None, reason: str) -> None:
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"Malformed business record {record_id!r}: {reason}")
