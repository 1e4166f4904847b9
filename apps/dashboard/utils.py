"""
대시보드 표시용 유틸리티

- generate_pagination(): 페이지네이션 버튼 목록 (숫자 + 생략 기호)
- format_currency(): 센트 단위 정수 → 통화 문자열
- format_date(): 날짜 문자열 → 지역 형식의 짧은 날짜
- generate_y_axis(): 매출 차트 y축 라벨 + 최대값

모두 순수 함수이며 DB나 요청 상태에 의존하지 않습니다.
잘못된 입력은 조용히 넘기지 않고 InvalidArgumentError 로 알립니다.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from functools import lru_cache
from typing import Iterable, List, Optional, Tuple, Union

from babel import Locale, UnknownLocaleError
from babel.dates import format_skeleton
from babel.numbers import format_currency as babel_format_currency
from django.conf import settings

from apps.core.exceptions import InvalidArgumentError, UnparseableDateError


# 페이지네이션 생략 기호 (숫자가 아닌 별도 토큰)
ELLIPSIS = '...'

# 이 페이지 수 이하이면 생략 없이 전부 표시
FULL_PAGINATION_THRESHOLD = 7

# y축 눈금 단위 (1,000 달러)
Y_AXIS_STEP = 1000

# 허용하는 날짜 입력 형식 (순서대로 시도)
DATE_INPUT_FORMATS = [
    '%Y-%m-%d',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%dT%H:%M:%S.%f',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y/%m/%d',
]

PageToken = Union[int, str]


def _require_positive_int(value, name):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name}는 정수여야 합니다 (입력: {value!r})")
    if value < 1:
        raise InvalidArgumentError(f"{name}는 1 이상이어야 합니다 (입력: {value})")


def generate_pagination(current_page: int, total_pages: int) -> List[PageToken]:
    """
    페이지네이션 컨트롤에 표시할 페이지 번호 목록 생성

    규칙 (순서대로 적용):
    1. 전체 7페이지 이하 → 1..total_pages 전부
    2. 현재 페이지가 앞 3페이지 → 1, 2, 3, ..., 마지막 2개
    3. 현재 페이지가 뒤 3페이지 → 1, 2, ..., 마지막 3개
    4. 그 외 (가운데) → 1, ..., 현재-1, 현재, 현재+1, ..., 마지막

    current_page > total_pages 는 보정하지 않습니다 (호출하는 쪽 책임).

    Raises:
        InvalidArgumentError: current_page 또는 total_pages 가 1 미만
    """
    _require_positive_int(current_page, 'current_page')
    _require_positive_int(total_pages, 'total_pages')

    if total_pages <= FULL_PAGINATION_THRESHOLD:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]


@dataclass(frozen=True)
class RevenueRecord:
    """월별 매출 (y축 계산 입력)"""
    month: str
    revenue: int

    def __post_init__(self):
        if isinstance(self.revenue, bool) or not isinstance(self.revenue, int):
            raise InvalidArgumentError(f"매출은 정수여야 합니다 ({self.month}: {self.revenue!r})")
        if self.revenue < 0:
            raise InvalidArgumentError(f"매출은 음수일 수 없습니다 ({self.month}: {self.revenue})")

    @classmethod
    def from_row(cls, row):
        """Revenue 모델 인스턴스 또는 values() dict 를 RevenueRecord 로 변환"""
        if isinstance(row, dict):
            return cls(month=row['month'], revenue=row['revenue'])
        return cls(month=row.month, revenue=row.revenue)


def generate_y_axis(records: Iterable[RevenueRecord]) -> Tuple[List[str], int]:
    """
    매출 차트 y축 라벨과 최대값 계산

    가장 큰 매출을 1,000 단위로 올림한 값이 top_label 이고,
    top_label 부터 0 까지 1,000 씩 내려가며 "$5K" 형태의 라벨을 만듭니다.
    (위에서 아래로 그리므로 내림차순)

    Returns:
        (labels, top_label)

    Raises:
        InvalidArgumentError: 매출 목록이 비어 있음
    """
    records = list(records)
    if not records:
        raise InvalidArgumentError("매출 데이터가 비어 있어 y축을 계산할 수 없습니다")

    highest = max(record.revenue for record in records)
    # 정수 올림 (float 오차 방지)
    top_label = -(-highest // Y_AXIS_STEP) * Y_AXIS_STEP

    labels = [
        f"${value // Y_AXIS_STEP}K"
        for value in range(top_label, -1, -Y_AXIS_STEP)
    ]
    return labels, top_label


def parse_date(value) -> date:
    """문자열/날짜/일시 값을 date 로 변환"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise UnparseableDateError(value)

    date_str = value.strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    else:
        raise UnparseableDateError(value)


def _parse_locale(locale: str) -> Locale:
    try:
        return Locale.parse(str(locale).replace('-', '_'))
    except (UnknownLocaleError, ValueError, TypeError) as e:
        raise InvalidArgumentError(f"지원하지 않는 locale 입니다: {locale!r}") from e


class DisplayFormatter:
    """
    locale/통화 설정을 고정한 표시 형식 변환기

    프로세스 전역 상수 대신 생성 시점에 주입받으므로
    테스트에서 다른 locale/통화로 쉽게 바꿔 쓸 수 있습니다.
    """

    def __init__(self, locale: str = 'en-US', currency: str = 'USD'):
        self.locale = locale
        self.currency = currency
        self._locale = _parse_locale(locale)

    def __repr__(self):
        return f"DisplayFormatter(locale={self.locale!r}, currency={self.currency!r})"

    def format_currency(self, cents: int) -> str:
        """센트 단위 정수를 통화 문자열로 (123456 → "$1,234.56")"""
        if isinstance(cents, bool) or not isinstance(cents, int):
            raise InvalidArgumentError(f"금액은 센트 단위 정수여야 합니다 (입력: {cents!r})")

        # Decimal 나눗셈: 정수 나눗셈(소수 손실)이나 float 오차 없이 변환
        amount = Decimal(cents) / Decimal(100)
        return babel_format_currency(amount, self.currency, locale=self._locale)

    def format_date(self, value, locale: Optional[str] = None) -> str:
        """날짜를 "일(숫자) / 월(약어) / 연(숫자)" 지역 형식으로 ("2023-11-05" → "Nov 5, 2023")"""
        parsed = parse_date(value)
        target_locale = _parse_locale(locale) if locale else self._locale
        return format_skeleton('yMMMd', parsed, locale=target_locale)


@lru_cache(maxsize=16)
def _formatter_for(locale, currency):
    return DisplayFormatter(locale=locale, currency=currency)


def get_formatter() -> DisplayFormatter:
    """settings.DASHBOARD_LOCALE / DASHBOARD_CURRENCY 기준 formatter"""
    return _formatter_for(
        getattr(settings, 'DASHBOARD_LOCALE', 'en-US'),
        getattr(settings, 'DASHBOARD_CURRENCY', 'USD'),
    )


def format_currency(cents: int) -> str:
    return get_formatter().format_currency(cents)


def format_date(date_str, locale: Optional[str] = None) -> str:
    return get_formatter().format_date(date_str, locale=locale)
