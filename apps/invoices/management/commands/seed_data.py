from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.invoices.models import Customer, Invoice, Revenue


CUSTOMERS = [
    {'name': 'Evil Rabbit', 'email': 'evil@rabbit.com', 'image_url': '/static/customers/evil-rabbit.png'},
    {'name': 'Delba de Oliveira', 'email': 'delba@oliveira.com', 'image_url': '/static/customers/delba-de-oliveira.png'},
    {'name': 'Lee Robinson', 'email': 'lee@robinson.com', 'image_url': '/static/customers/lee-robinson.png'},
    {'name': 'Michael Novotny', 'email': 'michael@novotny.com', 'image_url': '/static/customers/michael-novotny.png'},
    {'name': 'Amy Burrell', 'email': 'amy@burrell.com', 'image_url': '/static/customers/amy-burrell.png'},
    {'name': 'Balazs Orban', 'email': 'balazs@orban.com', 'image_url': '/static/customers/balazs-orban.png'},
]

# (고객 이메일, 금액(센트), 상태, 청구일)
INVOICES = [
    ('evil@rabbit.com', 15795, 'pending', date(2022, 12, 6)),
    ('delba@oliveira.com', 20348, 'pending', date(2022, 11, 14)),
    ('amy@burrell.com', 3040, 'paid', date(2022, 10, 29)),
    ('michael@novotny.com', 44800, 'paid', date(2023, 9, 10)),
    ('balazs@orban.com', 34577, 'pending', date(2023, 8, 5)),
    ('lee@robinson.com', 54246, 'pending', date(2023, 7, 16)),
    ('evil@rabbit.com', 666, 'pending', date(2023, 6, 27)),
    ('michael@novotny.com', 32545, 'paid', date(2023, 6, 9)),
    ('amy@burrell.com', 1250, 'paid', date(2023, 6, 17)),
    ('balazs@orban.com', 8546, 'paid', date(2023, 6, 7)),
    ('delba@oliveira.com', 500, 'paid', date(2023, 8, 19)),
    ('balazs@orban.com', 8945, 'paid', date(2023, 6, 3)),
    ('evil@rabbit.com', 1000, 'paid', date(2022, 6, 5)),
]

REVENUE = [
    ('Jan', 2000), ('Feb', 1800), ('Mar', 2200), ('Apr', 2500),
    ('May', 2300), ('Jun', 3200), ('Jul', 3500), ('Aug', 3700),
    ('Sep', 2500), ('Oct', 2800), ('Nov', 3000), ('Dec', 4800),
]


class Command(BaseCommand):
    help = '대시보드 예시 데이터 생성 (고객/청구서/월별 매출)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='기존 청구서/고객/매출 데이터를 지우고 다시 생성',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['reset']:
            Invoice.objects.all().delete()
            Customer.objects.all().delete()
            Revenue.objects.all().delete()
            self.stdout.write(self.style.WARNING('기존 데이터 삭제 완료'))

        customers = {}
        for data in CUSTOMERS:
            customer, _ = Customer.objects.update_or_create(email=data['email'], defaults=data)
            customers[customer.email] = customer

        created = 0
        for email, amount, status, invoice_date in INVOICES:
            _, created_flag = Invoice.objects.get_or_create(
                customer=customers[email],
                amount=amount,
                date=invoice_date,
                defaults={'status': status},
            )
            if created_flag:
                created += 1

        for order, (month, revenue) in enumerate(REVENUE, start=1):
            Revenue.objects.update_or_create(month=month, defaults={'revenue': revenue, 'order': order})

        self.stdout.write(
            self.style.SUCCESS(
                f'✅ 고객 {len(customers)}명, 청구서 {created}건 생성, 월별 매출 {len(REVENUE)}개월'
            )
        )
