from django.urls import path

from .views import CreatePaymentView, PaymentCallbackView, PaymentStatusView, PaymentWebhookView

urlpatterns = [
    path('create', CreatePaymentView.as_view(), name='create'),
    path('callback', PaymentCallbackView.as_view(), name='callback'),
    path('status', PaymentStatusView.as_view(), name='status'),
    path('webhook', PaymentWebhookView.as_view(), name='webhook'),
]
