"""
User-facing texts for the payment pages and API.
Anything shown to an end user is defined here; raw exception text never is.
"""

SUCCESS_MESSAGES = {
    'payment_successful': 'Payment successful! Order ID: {order_id}',
    'payment_successful_api': 'Payment successful',
}

WARNING_MESSAGES = {
    'payment_pending': 'Payment pending',
}

ERROR_MESSAGES = {
    'no_order': 'No order found',
    'not_completed': 'Payment was not completed',
    'payment_error': 'Payment error: {detail}',
    'gateway_unavailable': 'The payment provider could not handle the request. Please try again later.',
    'processing_failed': 'Error processing payment',
    'status_check_failed': 'Error checking payment status',
}


def gateway_error_message(exc) -> str:
    detail = getattr(exc, 'friendly_message', None) or ERROR_MESSAGES['gateway_unavailable']
    return ERROR_MESSAGES['payment_error'].format(detail=detail)


def unexpected_error_message() -> str:
    # internal failure: nothing the provider said, so nothing to blame it for
    return ERROR_MESSAGES['processing_failed']
