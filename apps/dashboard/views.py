"""
대시보드 개요 뷰
"""
import logging

from django.shortcuts import render

from apps.core.exceptions import DataAccessError
from apps.invoices.data import fetch_card_data, fetch_latest_invoices, fetch_revenue
from .utils import generate_y_axis

logger = logging.getLogger(__name__)


def render_data_error(request, error):
    """데이터 조회 실패 화면 (원인은 로그에만 남김)"""
    logger.warning(f"데이터 조회 실패: path={request.path}, error={error}")
    return render(request, 'dashboard/error.html', {'error_message': str(error)}, status=503)


def get_page_number(request, param='page'):
    """쿼리스트링의 페이지 번호 (숫자가 아니거나 1 미만이면 1)"""
    try:
        page = int(request.GET.get(param, 1))
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def build_querystring(request, param='page'):
    """page 를 제외한 현재 쿼리스트링 (페이지 링크에 이어 붙임)"""
    query_params = request.GET.copy()
    query_params.pop(param, None)
    return query_params.urlencode()


def build_revenue_chart(records):
    """
    매출 막대 차트 데이터

    각 막대 높이는 top_label 대비 백분율 (top_label 이 0 이면 0)
    """
    if not records:
        return {'y_axis_labels': [], 'top_label': 0, 'bars': []}

    y_axis_labels, top_label = generate_y_axis(records)
    bars = [
        {
            'month': record.month,
            'revenue': record.revenue,
            'height': round(record.revenue / top_label * 100, 1) if top_label else 0,
        }
        for record in records
    ]
    return {'y_axis_labels': y_axis_labels, 'top_label': top_label, 'bars': bars}


def overview(request):
    """
    대시보드 첫 화면

    - 요약 카드 4개 (결제 완료/대기 합계, 청구서 수, 고객 수)
    - 월별 매출 차트
    - 최근 청구서 5건
    """
    try:
        cards = fetch_card_data()
        revenue = fetch_revenue()
        latest_invoices = fetch_latest_invoices()
    except DataAccessError as e:
        return render_data_error(request, e)

    context = {
        'cards': cards,
        'chart': build_revenue_chart(revenue),
        'latest_invoices': latest_invoices,
    }
    return render(request, 'dashboard/overview.html', context)
