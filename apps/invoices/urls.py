from django.urls import path
from . import views

app_name = 'invoices'

urlpatterns = [
    # Invoice
    path('invoices/', views.invoice_list, name='invoice_list'),
    path('invoices/create/', views.invoice_create, name='invoice_create'),
    path('invoices/<int:pk>/edit/', views.invoice_update, name='invoice_update'),
    path('invoices/<int:pk>/delete/', views.invoice_delete, name='invoice_delete'),

    # excel
    path('invoices/export/', views.invoice_export_view, name='invoice_export'),

    # Customer
    path('customers/', views.customer_list, name='customer_list'),
]
