import logging

from django.apps import apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from google_shopping.auth import AuthSession, TokenRefreshError
from google_shopping.models import GoogleShoppingSetting
from google_shopping.outcome import SyncOutcome, SyncOutcomeRecorder

logger = logging.getLogger(__name__)


class RemoteSyncClient:
    """Runs get/insert/delete for a ``GoogleProduct`` and records the outcome on it.

    A call that fails with invalid credentials is retried once after the
    access token has been refreshed and persisted.
    """

    def __init__(self, transport, auth, shopping_settings, registry, recorder=None):
        self.transport = transport
        self.auth = auth
        self.settings = shopping_settings
        self.registry = registry
        self.recorder = recorder or SyncOutcomeRecorder()

    @classmethod
    def from_settings(cls):
        shopping_settings = GoogleShoppingSetting.load()
        if not shopping_settings.merchant_id:
            raise ImproperlyConfigured(
                "GoogleShoppingSetting.merchant_id is blank; set GOOGLE_SHOPPING_MERCHANT_ID"
            )
        auth = AuthSession.from_settings(shopping_settings)
        transport_class = import_string(getattr(
            settings, 'GOOGLE_SHOPPING_TRANSPORT_CLASS',
            'google_shopping.clients.content_api.ContentApiTransport',
        ))
        return cls(
            transport=transport_class(auth),
            auth=auth,
            shopping_settings=shopping_settings,
            registry=apps.get_app_config('google_shopping').registry,
        )

    @property
    def merchant_id(self):
        return self.settings.merchant_id

    def fetch(self, record) -> SyncOutcome:
        if not record.has_remote_id:
            logger.debug("No remote id for %s, skipping get", record)
            return SyncOutcome.skip()

        return self._refresh_if_unauthorized(
            record,
            lambda: self.transport.get_product(self.merchant_id, record.remote_product_id),
        )

    def create_or_update(self, record) -> SyncOutcome:
        body = record.attributes_hash(self.registry, camelize_keys=True)
        return self._refresh_if_unauthorized(
            record,
            lambda: self.transport.insert_product(self.merchant_id, body),
        )

    def delete(self, record) -> SyncOutcome:
        if not record.has_remote_id:
            logger.debug("No remote id for %s, skipping delete", record)
            return SyncOutcome.skip()

        return self._refresh_if_unauthorized(
            record,
            lambda: self.transport.delete_product(self.merchant_id, record.remote_product_id),
        )

    def _refresh_if_unauthorized(self, record, call):
        response = call()

        if response.has_auth_error:
            if self.auth.has_refresh_token:
                if self._refresh():
                    logger.info("Got bad authorization from Google. Refreshing token...")
                    response = call()
                    if response.has_auth_error:
                        logger.warning("Still unauthorized after token refresh for %s", record)
            else:
                logger.warning("No refresh token; OAuth authentication required.")

        return self.recorder.record(record, response)

    def _refresh(self):
        try:
            token = self.auth.refresh()
        except TokenRefreshError as exc:
            logger.error("Could not refresh Google access token: %s", exc)
            return False
        self.settings.update_from(token)
        return True
