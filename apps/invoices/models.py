from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel


class Customer(TimeStampedModel):
    """고객"""

    name = models.CharField(max_length=100, db_index=True)
    email = models.EmailField(unique=True)
    image_url = models.CharField(max_length=255, blank=True)

    class Meta:
        db_table = 'customers'
        ordering = ['name']

    def __str__(self):
        return self.name


class InvoiceQuerySet(models.QuerySet):
    """Invoice 전용 QuerySet (헬퍼 메서드)"""
    def paid(self): return self.filter(status=Invoice.STATUS_PAID)
    def pending(self): return self.filter(status=Invoice.STATUS_PENDING)
    def with_customer(self): return self.select_related('customer')


class Invoice(TimeStampedModel):
    """
    청구서

    amount 는 센트 단위 정수로 저장합니다 (float 저장 금지).
    화면 표시 시에만 달러로 변환합니다.
    """
    STATUS_PENDING = 'pending'
    STATUS_PAID = 'paid'
    STATUS_CHOICES = [
        (STATUS_PENDING, 'Pending'),
        (STATUS_PAID, 'Paid'),
    ]

    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name='invoices')
    amount = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True)
    date = models.DateField(db_index=True)

    objects = InvoiceQuerySet.as_manager()

    class Meta:
        db_table = 'invoices'
        ordering = ['-date', '-id']
        indexes = [
            models.Index(fields=['customer', 'status'], name='invoice_customer_status_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name='invoice_amount_positive'),
        ]

    def __str__(self):
        return f"{self.customer.name} {self.amount_in_dollars:,.2f} ({self.get_status_display()})"

    @property
    def amount_in_dollars(self):
        """센트 → 달러 (Decimal)"""
        return Decimal(self.amount) / Decimal(100)


class Revenue(models.Model):
    """월별 매출 (차트용 집계 테이블)"""

    month = models.CharField(max_length=4, unique=True)
    revenue = models.PositiveIntegerField(default=0)
    order = models.PositiveSmallIntegerField(default=0, db_index=True)

    class Meta:
        db_table = 'revenue'
        ordering = ['order', 'id']

    def __str__(self):
        return f"{self.month}: {self.revenue:,}"
