"""
대시보드 공통 예외

- InvalidArgumentError: 잘못된 입력 (0 이하 페이지 수, 빈 매출 목록 등)
- UnparseableDateError: 날짜로 해석할 수 없는 문자열
- DataAccessError: DB 조회 실패 (원인은 로그에만 남기고 화면에는 일반 메시지)
"""


class DashboardError(Exception):
    """대시보드 예외 최상위 클래스"""


class InvalidArgumentError(DashboardError, ValueError):
    """호출자가 전제 조건을 어긴 경우"""


class UnparseableDateError(InvalidArgumentError):
    """날짜 문자열 파싱 실패"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"날짜 형식이 잘못되었습니다: {value!r}")


class DataAccessError(DashboardError):
    """데이터 조회 실패 (재시도하지 않음)"""
