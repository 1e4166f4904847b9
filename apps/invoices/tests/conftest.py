"""
invoices 앱 테스트용 공통 fixture
"""
import pytest
from datetime import date

from apps.invoices.models import Customer, Invoice, Revenue


@pytest.fixture
def customer(db):
    """테스트용 고객"""
    return Customer.objects.create(name='Lee Robinson', email='lee@robinson.com')


@pytest.fixture
def other_customer(db):
    """두 번째 고객 (검색/집계 테스트용)"""
    return Customer.objects.create(name='Amy Burrell', email='amy@burrell.com')


@pytest.fixture
def paid_invoice(customer):
    """결제 완료 청구서 ($448.00)"""
    return Invoice.objects.create(customer=customer, amount=44800, status='paid', date=date(2023, 9, 10))


@pytest.fixture
def pending_invoice(customer):
    """결제 대기 청구서 ($157.95)"""
    return Invoice.objects.create(customer=customer, amount=15795, status='pending', date=date(2022, 12, 6))


@pytest.fixture
def many_invoices(customer, other_customer):
    """13건 (페이지당 6건 → 3페이지)"""
    invoices = []
    for day in range(1, 14):
        invoices.append(Invoice.objects.create(
            customer=customer if day % 2 else other_customer,
            amount=1000 * day,
            status='paid' if day % 3 == 0 else 'pending',
            date=date(2023, 6, day),
        ))
    return invoices


@pytest.fixture
def revenue(db):
    """월별 매출 3개월"""
    rows = [('Jan', 2000), ('Feb', 1800), ('Mar', 4500)]
    return [
        Revenue.objects.create(month=month, revenue=value, order=order)
        for order, (month, value) in enumerate(rows, start=1)
    ]
