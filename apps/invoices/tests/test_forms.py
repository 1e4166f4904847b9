from decimal import Decimal

import pytest

from apps.invoices.forms import InvoiceForm


@pytest.mark.django_db
class TestInvoiceForm:
    """청구서 폼 (달러 입력 → 센트 저장)"""

    def _data(self, customer, **overrides):
        data = {
            'customer': customer.id,
            'amount': '157.95',
            'status': 'pending',
            'date': '2022-12-06',
        }
        data.update(overrides)
        return data

    @pytest.mark.parametrize("amount,expected_cents", [
        ('157.95', 15795),
        ('0.01', 1),
        ('1000', 100000),
        ('0.1', 10),
    ])
    def test_amount_converted_to_cents(self, customer, amount, expected_cents):
        form = InvoiceForm(data=self._data(customer, amount=amount))
        assert form.is_valid(), form.errors
        assert form.cleaned_data['amount'] == expected_cents

    @pytest.mark.parametrize("amount", ['0', '-5', '1.234', 'abc', ''])
    def test_invalid_amount(self, customer, amount):
        form = InvoiceForm(data=self._data(customer, amount=amount))
        assert not form.is_valid()
        assert 'amount' in form.errors

    def test_invalid_status(self, customer):
        form = InvoiceForm(data=self._data(customer, status='overdue'))
        assert not form.is_valid()
        assert 'status' in form.errors

    def test_initial_amount_in_dollars(self, pending_invoice):
        form = InvoiceForm(instance=pending_invoice)
        assert form.initial['amount'] == Decimal('157.95')

    def test_save(self, customer):
        form = InvoiceForm(data=self._data(customer, amount='12.30', status='paid'))
        invoice = form.save()
        assert invoice.amount == 1230
        assert invoice.status == 'paid'
