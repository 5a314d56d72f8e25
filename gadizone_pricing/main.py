"""Process bootstrap for services embedding the pricing engine"""

from typing import Tuple

from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from gadizone_pricing.config import settings
from gadizone_pricing.infrastructure.observability.logging import setup_logging


def configure() -> None:
    """Install structured logging at the configured level; call once at startup"""
    setup_logging(settings.log_level)


def metrics_payload() -> Tuple[bytes, str]:
    """Prometheus exposition body and content type for the host's /metrics route"""
    return generate_latest(), CONTENT_TYPE_LATEST
