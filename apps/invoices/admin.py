from django.contrib import admin
from django.db.models import Count

from apps.dashboard.utils import format_currency
from .models import Customer, Invoice, Revenue


class InvoiceInline(admin.TabularInline):
    model = Invoice
    extra = 0
    fields = ['date', 'amount', 'status']
    show_change_link = True


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """
    고객 관리
    """
    list_display = ['name', 'email', 'get_invoice_count', 'created_at']
    search_fields = ['name', 'email']
    inlines = [InvoiceInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(invoice_count=Count('invoices'))

    @admin.display(description='청구서 수', ordering='invoice_count')
    def get_invoice_count(self, obj):
        return obj.invoice_count


@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    """
    청구서 관리
    """
    list_display = ['date', 'customer', 'get_amount_display', 'status']
    list_filter = ['status']
    search_fields = ['customer__name', 'customer__email']
    date_hierarchy = 'date'
    list_select_related = ['customer']

    @admin.display(description='금액', ordering='amount')
    def get_amount_display(self, obj):
        return format_currency(obj.amount)


@admin.register(Revenue)
class RevenueAdmin(admin.ModelAdmin):
    list_display = ['month', 'revenue', 'order']
    list_editable = ['revenue', 'order']
    ordering = ['order']
