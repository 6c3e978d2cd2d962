# payments/apps.py
import logging

from django.apps import AppConfig
from django.conf import settings

log = logging.getLogger("payments")


class PaymentsConfig(AppConfig):
    name = "payments"

    def ready(self):
        from .gateways.paynl import PayNLConfig

        cfg = getattr(settings, "PAYMENTS", {}) or {}
        name = cfg.get("DEFAULT_GATEWAY", "paynl")
        if name != "paynl":
            log.info("PAYMENTS_GATEWAY name=%s", name)
            return

        paynl = PayNLConfig.from_options((cfg.get("GATEWAYS") or {}).get("paynl", {}))
        if not paynl.is_complete:
            log.warning(
                "PAYNL_CONFIG_INCOMPLETE api_token=%s token_code=%s service_id=%s",
                bool(paynl.api_token), bool(paynl.token_code), bool(paynl.service_id),
            )
        else:
            log.info("PAYNL_CONFIG service=%s test_mode=%s", paynl.service_id, paynl.test_mode)
