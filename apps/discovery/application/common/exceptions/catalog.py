"""카탈로그 관련 예외."""

from discovery.application.common.exceptions.base import ApplicationError


class CatalogUnavailableError(ApplicationError):
    """업스트림 카탈로그 조회 실패 또는 타임아웃.

    재시도/백오프는 호출자의 몫입니다.
    """

    def __init__(self, reason: str = "Business catalog unavailable") -> None:
        self.reason = reason
        super().__init__(reason)
