"""
청구서/고객 데이터 조회

뷰에서 직접 ORM 을 호출하지 않고 이 모듈을 거칩니다.
- DB 오류는 원인을 로그로 남기고 DataAccessError 로 바꿔 올립니다 (재시도 없음)
- 금액은 센트 단위 정수 그대로 가져와 표시 직전에만 형식 변환합니다
"""
import logging
import math

from django.db import DatabaseError
from django.db.models import CharField, Count, F, IntegerField, Q, Sum, Value
from django.db.models.functions import Cast, Coalesce

from apps.core.exceptions import DataAccessError, InvalidArgumentError
from apps.dashboard.utils import RevenueRecord, format_currency
from .models import Customer, Invoice, Revenue

logger = logging.getLogger(__name__)

# 목록 한 페이지당 행 수
ITEMS_PER_PAGE = 6

# 최근 청구서 개수
LATEST_INVOICES_LIMIT = 5


def _page_offset(current_page):
    if isinstance(current_page, bool) or not isinstance(current_page, int) or current_page < 1:
        raise InvalidArgumentError(f"current_page는 1 이상의 정수여야 합니다 (입력: {current_page!r})")
    return (current_page - 1) * ITEMS_PER_PAGE


def _total_pages(count):
    return math.ceil(count / ITEMS_PER_PAGE)


def _filtered_invoices_qs(query):
    """이름/이메일/금액/날짜/상태 어디에든 검색어가 포함된 청구서"""
    qs = Invoice.objects.annotate(
        amount_text=Cast('amount', output_field=CharField()),
        date_text=Cast('date', output_field=CharField()),
    )
    if query:
        qs = qs.filter(
            Q(customer__name__icontains=query) |
            Q(customer__email__icontains=query) |
            Q(amount_text__icontains=query) |
            Q(date_text__icontains=query) |
            Q(status__icontains=query)
        )
    return qs


def _filtered_customers_qs(query):
    qs = Customer.objects.all()
    if query:
        qs = qs.filter(Q(name__icontains=query) | Q(email__icontains=query))
    return qs


def fetch_revenue():
    """월별 매출 → RevenueRecord 목록"""
    try:
        rows = list(Revenue.objects.values('month', 'revenue'))
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("매출 데이터를 불러오지 못했습니다.") from e

    return [RevenueRecord.from_row(row) for row in rows]


def fetch_latest_invoices():
    """최근 청구서 5건 (금액은 표시 형식)"""
    try:
        rows = list(
            Invoice.objects
            .values(
                'id', 'amount',
                name=F('customer__name'),
                email=F('customer__email'),
                image_url=F('customer__image_url'),
            )
            .order_by('-date', '-id')[:LATEST_INVOICES_LIMIT]
        )
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("최근 청구서를 불러오지 못했습니다.") from e

    return [
        {**row, 'amount': format_currency(row['amount'])}
        for row in rows
    ]


def fetch_card_data():
    """요약 카드: 고객 수, 청구서 수, 결제 완료/대기 합계"""
    try:
        number_of_customers = Customer.objects.count()
        totals = Invoice.objects.aggregate(
            count=Count('id'),
            paid=Coalesce(Sum('amount', filter=Q(status=Invoice.STATUS_PAID)), Value(0), output_field=IntegerField()),
            pending=Coalesce(Sum('amount', filter=Q(status=Invoice.STATUS_PENDING)), Value(0), output_field=IntegerField()),
        )
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("요약 데이터를 불러오지 못했습니다.") from e

    return {
        'number_of_customers': number_of_customers,
        'number_of_invoices': totals['count'] or 0,
        'total_paid_invoices': format_currency(totals['paid'] or 0),
        'total_pending_invoices': format_currency(totals['pending'] or 0),
    }


def fetch_filtered_invoices(query, current_page):
    """검색어로 필터링한 청구서 한 페이지 (최신순)"""
    offset = _page_offset(current_page)

    try:
        rows = list(
            _filtered_invoices_qs(query)
            .values(
                'id', 'amount', 'date', 'status',
                name=F('customer__name'),
                email=F('customer__email'),
                image_url=F('customer__image_url'),
            )
            .order_by('-date', '-id')[offset:offset + ITEMS_PER_PAGE]
        )
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("청구서 목록을 불러오지 못했습니다.") from e

    return rows


def fetch_invoices_for_export(query):
    """엑셀 내보내기용: 검색 결과 전체 (페이지 구분 없음)"""
    try:
        return list(
            _filtered_invoices_qs(query)
            .values(
                'id', 'amount', 'date', 'status',
                name=F('customer__name'),
                email=F('customer__email'),
            )
            .order_by('-date', '-id')
        )
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("청구서 내보내기에 실패했습니다.") from e


def fetch_invoices_pages(query):
    """검색 결과 전체 페이지 수 (결과가 없으면 0)"""
    try:
        count = _filtered_invoices_qs(query).count()
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("청구서 개수를 불러오지 못했습니다.") from e

    return _total_pages(count)


def fetch_filtered_customers(query, current_page=None):
    """
    고객 테이블 (청구서 건수, 대기/완료 합계 포함)

    current_page 를 넘기면 해당 페이지만, 아니면 전체를 반환합니다.
    """
    qs = (
        _filtered_customers_qs(query)
        .annotate(
            total_invoices=Count('invoices'),
            total_pending=Coalesce(
                Sum('invoices__amount', filter=Q(invoices__status=Invoice.STATUS_PENDING)), Value(0), output_field=IntegerField()
            ),
            total_paid=Coalesce(
                Sum('invoices__amount', filter=Q(invoices__status=Invoice.STATUS_PAID)), Value(0), output_field=IntegerField()
            ),
        )
        .values('id', 'name', 'email', 'image_url', 'total_invoices', 'total_pending', 'total_paid')
        .order_by('name')
    )
    if current_page is not None:
        offset = _page_offset(current_page)
        qs = qs[offset:offset + ITEMS_PER_PAGE]

    try:
        rows = list(qs)
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("고객 테이블을 불러오지 못했습니다.") from e

    return [
        {
            **row,
            'total_pending': format_currency(row['total_pending']),
            'total_paid': format_currency(row['total_paid']),
        }
        for row in rows
    ]


def fetch_customers_pages(query):
    """고객 검색 결과 전체 페이지 수"""
    try:
        count = _filtered_customers_qs(query).count()
    except DatabaseError as e:
        logger.error(f"Database Error: {e}")
        raise DataAccessError("고객 수를 불러오지 못했습니다.") from e

    return _total_pages(count)
