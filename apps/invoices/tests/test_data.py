"""
데이터 조회 함수 테스트

- 검색/페이지 나누기
- 집계 (요약 카드, 고객별 합계)
- DB 오류 → DataAccessError
"""
from datetime import date

import pytest
from django.db import DatabaseError

from apps.core.exceptions import DataAccessError, InvalidArgumentError
from apps.dashboard.utils import RevenueRecord
from apps.invoices import data
from apps.invoices.models import Customer, Invoice


class _BrokenManager:
    """모든 조회에서 DB 오류를 내는 가짜 매니저"""

    def __getattr__(self, name):
        def _raise(*args, **kwargs):
            raise DatabaseError('connection refused')
        return _raise


class _BrokenModel:
    objects = _BrokenManager()


@pytest.mark.django_db
class TestFetchRevenue:

    def test_returns_revenue_records_in_order(self, revenue):
        records = data.fetch_revenue()
        assert records == [
            RevenueRecord('Jan', 2000),
            RevenueRecord('Feb', 1800),
            RevenueRecord('Mar', 4500),
        ]

    def test_empty_table(self):
        assert data.fetch_revenue() == []

    def test_database_error_wrapped(self, monkeypatch):
        monkeypatch.setattr(data, 'Revenue', _BrokenModel)
        with pytest.raises(DataAccessError):
            data.fetch_revenue()


@pytest.mark.django_db
class TestFetchCardData:

    def test_totals(self, customer, other_customer, paid_invoice, pending_invoice):
        cards = data.fetch_card_data()
        assert cards == {
            'number_of_customers': 2,
            'number_of_invoices': 2,
            'total_paid_invoices': '$448.00',
            'total_pending_invoices': '$157.95',
        }

    def test_no_invoices(self):
        cards = data.fetch_card_data()
        assert cards['number_of_invoices'] == 0
        assert cards['total_paid_invoices'] == '$0.00'
        assert cards['total_pending_invoices'] == '$0.00'

    def test_database_error_wrapped(self, monkeypatch):
        monkeypatch.setattr(data, 'Customer', _BrokenModel)
        with pytest.raises(DataAccessError):
            data.fetch_card_data()


@pytest.mark.django_db
class TestFetchLatestInvoices:

    def test_latest_five_newest_first(self, many_invoices):
        latest = data.fetch_latest_invoices()
        assert len(latest) == 5
        # 6월 13일 청구서 (13,000센트) 가 가장 최근
        assert latest[0]['amount'] == '$130.00'
        assert {'id', 'amount', 'name', 'email', 'image_url'} <= set(latest[0])


@pytest.mark.django_db
class TestFetchFilteredInvoices:

    def test_first_page_has_items_per_page(self, many_invoices):
        rows = data.fetch_filtered_invoices('', 1)
        assert len(rows) == data.ITEMS_PER_PAGE
        assert rows[0]['date'] == date(2023, 6, 13)

    def test_last_page_remainder(self, many_invoices):
        rows = data.fetch_filtered_invoices('', 3)
        assert len(rows) == 1
        assert rows[0]['date'] == date(2023, 6, 1)

    def test_page_beyond_results_is_empty(self, many_invoices):
        assert data.fetch_filtered_invoices('', 10) == []

    def test_search_by_customer_name_case_insensitive(self, many_invoices):
        rows = data.fetch_filtered_invoices('amy', 1)
        assert rows
        assert all(row['name'] == 'Amy Burrell' for row in rows)

    def test_search_by_email(self, paid_invoice, pending_invoice):
        rows = data.fetch_filtered_invoices('robinson.com', 1)
        assert {row['id'] for row in rows} == {paid_invoice.id, pending_invoice.id}

    def test_search_by_status(self, paid_invoice, pending_invoice):
        rows = data.fetch_filtered_invoices('PAID', 1)
        assert [row['id'] for row in rows] == [paid_invoice.id]

    def test_search_by_amount(self, paid_invoice, pending_invoice):
        rows = data.fetch_filtered_invoices('15795', 1)
        assert [row['id'] for row in rows] == [pending_invoice.id]

    def test_search_by_date(self, paid_invoice, pending_invoice):
        rows = data.fetch_filtered_invoices('2023-09', 1)
        assert [row['id'] for row in rows] == [paid_invoice.id]

    def test_amount_stays_in_cents(self, paid_invoice):
        rows = data.fetch_filtered_invoices('', 1)
        assert rows[0]['amount'] == 44800

    @pytest.mark.parametrize("page", [0, -1, '1'])
    def test_invalid_page_rejected(self, page):
        with pytest.raises(InvalidArgumentError):
            data.fetch_filtered_invoices('', page)


@pytest.mark.django_db
class TestFetchInvoicesPages:

    @pytest.mark.parametrize("count,expected_pages", [
        (0, 0),
        (1, 1),
        (6, 1),
        (7, 2),
        (13, 3),
    ])
    def test_page_count(self, customer, count, expected_pages):
        for day in range(1, count + 1):
            Invoice.objects.create(customer=customer, amount=100, date=date(2023, 1, day))
        assert data.fetch_invoices_pages('') == expected_pages

    def test_page_count_follows_query(self, many_invoices):
        # Amy: 짝수 일자 6건
        assert data.fetch_invoices_pages('Amy') == 1

    def test_database_error_wrapped(self, monkeypatch):
        monkeypatch.setattr(data, 'Invoice', _BrokenModel)
        with pytest.raises(DataAccessError):
            data.fetch_invoices_pages('')


@pytest.mark.django_db
class TestFetchFilteredCustomers:

    def test_filtered_customers_aggregates(self, customer, other_customer, paid_invoice, pending_invoice):
        rows = data.fetch_filtered_customers('lee')
        assert len(rows) == 1
        row = rows[0]
        assert row['name'] == 'Lee Robinson'
        assert row['total_invoices'] == 2
        assert row['total_paid'] == '$448.00'
        assert row['total_pending'] == '$157.95'

    def test_customer_without_invoices(self, other_customer):
        row = data.fetch_filtered_customers('')[0]
        assert row['total_invoices'] == 0
        assert row['total_paid'] == '$0.00'
        assert row['total_pending'] == '$0.00'

    def test_search_by_email(self, customer, other_customer):
        rows = data.fetch_filtered_customers('burrell.com')
        assert [row['name'] for row in rows] == ['Amy Burrell']

    def test_paginated(self, db):
        for i in range(8):
            Customer.objects.create(name=f'Customer {i}', email=f'c{i}@example.com')
        assert len(data.fetch_filtered_customers('', 1)) == data.ITEMS_PER_PAGE
        assert len(data.fetch_filtered_customers('', 2)) == 2
        assert data.fetch_customers_pages('') == 2
