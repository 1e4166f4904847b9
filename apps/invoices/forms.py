from decimal import Decimal

from django import forms

from .models import Customer, Invoice


class InvoiceForm(forms.ModelForm):
    """
    청구서 입력/수정 폼

    화면에서는 달러(소수 2자리)로 입력받고 저장할 때 센트 정수로 바꿉니다.
    """
    amount = forms.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.01'),
        widget=forms.NumberInput(attrs={'step': '0.01', 'placeholder': '0.00'}),
        label='금액 (USD)',
    )

    class Meta:
        model = Invoice
        fields = ['customer', 'amount', 'status', 'date']
        widgets = {
            'date': forms.DateInput(attrs={'type': 'date'}),
            'status': forms.RadioSelect,
        }
        labels = {
            'customer': '고객',
            'status': '상태',
            'date': '청구일',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['customer'].queryset = Customer.objects.order_by('name')

        # 수정 시 센트 → 달러로 초기값 표시
        if self.instance.pk and not self.is_bound:
            self.initial['amount'] = self.instance.amount_in_dollars

    def clean_amount(self):
        """달러 → 센트 정수"""
        amount = self.cleaned_data['amount']
        return int((amount * 100).to_integral_value())
