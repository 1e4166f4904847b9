from django import template

from apps.core.exceptions import InvalidArgumentError
from apps.dashboard.utils import ELLIPSIS, format_currency, format_date

register = template.Library()


@register.filter
def currency(cents):
    """
    {{ invoice.amount|currency }} → "$1,234.56"

    센트 정수만 받습니다. 달러 Decimal/float 은 InvalidArgumentError.
    """
    if cents is None or cents == '':
        return ''
    if isinstance(cents, str):
        # 이미 형식이 적용된 값은 그대로
        return cents
    return format_currency(cents)


@register.filter
def local_date(value, locale=None):
    """{{ invoice.date|local_date }} → "Nov 5, 2023" (파싱 실패 시 원래 값)"""
    if not value:
        return ''
    try:
        return format_date(value, locale=locale)
    except InvalidArgumentError:
        return value


@register.inclusion_tag('dashboard/includes/pagination.html')
def pagination(page_tokens, current_page, total_pages, querystring=''):
    """
    페이지네이션 컨트롤

    page_tokens 는 generate_pagination() 결과 (숫자 + '...')
    """
    prefix = f"?{querystring}&" if querystring else '?'
    pages = [
        {
            'number': token,
            'is_ellipsis': token == ELLIPSIS,
            'is_current': token == current_page,
            'url': '' if token == ELLIPSIS else f"{prefix}page={token}",
        }
        for token in page_tokens
    ]
    return {
        'pages': pages,
        'previous_url': f"{prefix}page={current_page - 1}" if current_page > 1 else '',
        'next_url': f"{prefix}page={current_page + 1}" if current_page < total_pages else '',
    }
