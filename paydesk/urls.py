# paydesk/urls.py
from __future__ import annotations

from django.conf import settings
from django.conf.urls.static import static
from django.urls import include, path

urlpatterns = [
    path("api/payment/", include(("payments.api.urls", "payments_api"), namespace="payments_api")),
    path("", include(("payments.urls", "payments"), namespace="payments")),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
