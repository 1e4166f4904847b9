import logging

from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils import timezone

from apps.core.exceptions import DataAccessError
from apps.dashboard.utils import generate_pagination
from apps.dashboard.views import (
    build_querystring,
    get_page_number,
    render_data_error,
)
from .data import (
    fetch_customers_pages,
    fetch_filtered_customers,
    fetch_filtered_invoices,
    fetch_invoices_for_export,
    fetch_invoices_pages,
)
from .forms import InvoiceForm
from .models import Invoice
from .utils import export_invoices_to_excel

logger = logging.getLogger(__name__)


def _pagination_context(request, total_pages):
    """
    페이지네이션 컨텍스트

    결과가 없어도 1페이지로 보고, 요청 페이지는 [1, total_pages] 로 보정합니다.
    """
    total_pages = max(total_pages, 1)
    current_page = min(get_page_number(request), total_pages)
    return {
        'current_page': current_page,
        'total_pages': total_pages,
        'page_tokens': generate_pagination(current_page, total_pages),
        'querystring': build_querystring(request),
    }


# ============================================================
# Invoice
# ============================================================

def invoice_list(request):
    """청구서 목록 (검색 + 페이지네이션)"""
    query = request.GET.get('query', '').strip()

    try:
        pagination = _pagination_context(request, fetch_invoices_pages(query))
        invoices = fetch_filtered_invoices(query, pagination['current_page'])
    except DataAccessError as e:
        return render_data_error(request, e)

    context = {
        'query': query,
        'invoices': invoices,
        **pagination,
    }
    return render(request, 'invoices/invoice_list.html', context)


def invoice_create(request):
    """청구서 생성"""
    if request.method == 'POST':
        form = InvoiceForm(request.POST)
        if form.is_valid():
            invoice = form.save()
            logger.info(f"청구서 생성: id={invoice.id}, customer={invoice.customer_id}, amount={invoice.amount}")
            messages.success(request, '청구서가 생성되었습니다.')
            return redirect('invoices:invoice_list')
    else:
        form = InvoiceForm(initial={'date': timezone.localdate()})

    return render(request, 'invoices/invoice_form.html', {
        'form': form,
        'title': '청구서 추가',
    })


def invoice_update(request, pk):
    """청구서 수정"""
    invoice = get_object_or_404(Invoice, pk=pk)
    # 바인딩된 폼이 instance 를 바꾸기 전 저장된 값
    current = {
        'amount': invoice.amount,
        'status': invoice.status,
        'date': invoice.date,
    }

    if request.method == 'POST':
        form = InvoiceForm(request.POST, instance=invoice)
        if form.is_valid():
            form.save()
            logger.info(f"청구서 수정: id={invoice.id}, amount={invoice.amount}, status={invoice.status}")
            messages.success(request, '청구서가 수정되었습니다.')
            return redirect('invoices:invoice_list')
    else:
        form = InvoiceForm(instance=invoice)

    return render(request, 'invoices/invoice_form.html', {
        'form': form,
        'current': current,
        'title': '청구서 수정',
    })


def invoice_delete(request, pk):
    """청구서 삭제 (GET: 확인 화면, POST: 삭제)"""
    invoice = get_object_or_404(Invoice.objects.with_customer(), pk=pk)

    if request.method == 'POST':
        invoice_id = invoice.id
        invoice.delete()
        logger.info(f"청구서 삭제: id={invoice_id}")
        messages.success(request, '청구서가 삭제되었습니다.')
        return redirect('invoices:invoice_list')

    return render(request, 'invoices/invoice_confirm_delete.html', {
        'invoice': invoice,
    })


def invoice_export_view(request):
    """현재 검색 조건의 청구서 전체를 엑셀로 내려받기"""
    query = request.GET.get('query', '').strip()

    try:
        rows = fetch_invoices_for_export(query)
    except DataAccessError as e:
        return render_data_error(request, e)

    excel_file = export_invoices_to_excel(rows)
    timestamp = timezone.localtime().strftime('%Y%m%d_%H%M%S')

    # HTTP 응답 설정
    filename = f"invoices_{timestamp}.xlsx"
    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{filename}"'

    return response


# ============================================================
# Customer
# ============================================================

def customer_list(request):
    """고객 목록 (청구서 건수/대기/완료 합계)"""
    query = request.GET.get('query', '').strip()

    try:
        pagination = _pagination_context(request, fetch_customers_pages(query))
        customers = fetch_filtered_customers(query, pagination['current_page'])
    except DataAccessError as e:
        return render_data_error(request, e)

    context = {
        'query': query,
        'customers': customers,
        **pagination,
    }
    return render(request, 'customers/customer_list.html', context)
