import pytest
from django.contrib.auth.models import User
from django.urls import reverse


@pytest.fixture
def admin_client_logged_in(client, db):
    admin = User.objects.create_superuser(username='admin', email='admin@example.com', password='pass')
    client.force_login(admin)
    return client


@pytest.mark.django_db
class TestInvoiceAdmin:

    def test_invoice_changelist_shows_formatted_amount(self, admin_client_logged_in, paid_invoice):
        response = admin_client_logged_in.get(reverse('admin:invoices_invoice_changelist'))

        assert response.status_code == 200
        assert '$448.00' in response.content.decode()

    def test_customer_changelist_invoice_count(self, admin_client_logged_in, paid_invoice, pending_invoice):
        response = admin_client_logged_in.get(reverse('admin:invoices_customer_changelist'))

        assert response.status_code == 200
        assert 'Lee Robinson' in response.content.decode()

    def test_customer_change_page_inline(self, admin_client_logged_in, customer, paid_invoice):
        response = admin_client_logged_in.get(reverse('admin:invoices_customer_change', args=[customer.pk]))
        assert response.status_code == 200

    def test_revenue_changelist(self, admin_client_logged_in, revenue):
        response = admin_client_logged_in.get(reverse('admin:invoices_revenue_changelist'))
        assert response.status_code == 200
