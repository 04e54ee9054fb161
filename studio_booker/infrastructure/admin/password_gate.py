from __future__ import annotations

import hmac
import logging


logger = logging.getLogger(__name__)


def verify_admin_password(candidate: str | None, expected: str | None) -> bool:
    """Placeholder gate for the admin page: a shared password compare."""
    if not expected:
        logger.error("Missing admin password in settings")
        return False
    if not candidate:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
