from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='dashboard:overview', permanent=False), name='home'),

    path('admin/', admin.site.urls),
    path('dashboard/', include('apps.dashboard.urls')),
    path('dashboard/', include('apps.invoices.urls')),
]
