import logging
from dataclasses import dataclass, field
from typing import Optional

from django.utils import timezone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncOutcome:
    """Result of one Content API call made for a product record."""

    skipped: bool = False
    succeeded: bool = False
    errors: list = field(default_factory=list)
    remote_id: Optional[str] = None
    response: object = None

    @classmethod
    def skip(cls):
        return cls(skipped=True)


def error_detail(response):
    """Structured error list to persist, or None when the call succeeded."""
    error = response.error
    if error is None or not error.errors:
        return None
    return list(error.errors)


def errors_in(response):
    return error_detail(response) is not None


class SyncOutcomeRecorder:
    def __init__(self, clock=timezone.now):
        self.clock = clock

    def record(self, record, response) -> SyncOutcome:
        errors = error_detail(response)
        record.last_sync_error = errors
        record.last_sync_at = self.clock()
        record.save(update_fields=['last_sync_error', 'last_sync_at'])

        if errors:
            logger.warning("Google sync for %s failed: %s", record, errors)
        else:
            logger.info("Google sync for %s succeeded", record)

        return SyncOutcome(
            succeeded=errors is None,
            errors=errors or [],
            remote_id=response.remote_id,
            response=response,
        )
