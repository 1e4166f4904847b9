"""
dashboard 앱 테스트용 fixture
"""
import pytest
from datetime import date

from apps.invoices.models import Customer, Invoice, Revenue


@pytest.fixture
def customer(db):
    return Customer.objects.create(name='Evil Rabbit', email='evil@rabbit.com')


@pytest.fixture
def invoices(customer):
    """결제 완료 1건 + 대기 1건"""
    return [
        Invoice.objects.create(customer=customer, amount=123456, status='paid', date=date(2023, 11, 5)),
        Invoice.objects.create(customer=customer, amount=666, status='pending', date=date(2023, 6, 27)),
    ]


@pytest.fixture
def revenue(db):
    rows = [('Jan', 2000), ('Feb', 4500), ('Mar', 1000)]
    return [
        Revenue.objects.create(month=month, revenue=value, order=order)
        for order, (month, value) in enumerate(rows, start=1)
    ]
