import json

from django.apps import apps
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models

MERCHANT_CENTER_URL = (
    "https://google.com/merchants/view?"
    "merchantOfferId={sku}&channel=0&country=US&language=en"
)


class GoogleShoppingSetting(models.Model):
    """Single-row store for the merchant identity and OAuth credentials."""

    merchant_id = models.CharField(max_length=64, blank=True)
    application_name = models.CharField(max_length=100, default='Django')
    client_id = models.CharField(max_length=255, blank=True)
    client_secret = models.CharField(max_length=255, blank=True)
    access_token = models.TextField(blank=True)
    refresh_token = models.TextField(blank=True)
    token_expires_at = models.DateTimeField(null=True, blank=True)

    def __str__(self):
        return f"Google Shopping settings (merchant {self.merchant_id or 'unset'})"

    @classmethod
    def load(cls):
        instance, _ = cls.objects.get_or_create(
            pk=1,
            defaults={
                'merchant_id': getattr(settings, 'GOOGLE_SHOPPING_MERCHANT_ID', ''),
                'client_id': getattr(settings, 'GOOGLE_SHOPPING_CLIENT_ID', ''),
                'client_secret': getattr(settings, 'GOOGLE_SHOPPING_CLIENT_SECRET', ''),
                'refresh_token': getattr(settings, 'GOOGLE_SHOPPING_REFRESH_TOKEN', ''),
            },
        )
        return instance

    def update_from(self, token):
        self.access_token = token.access_token
        if token.refresh_token:
            self.refresh_token = token.refresh_token
        self.token_expires_at = token.expires_at
        self.save(update_fields=['access_token', 'refresh_token', 'token_expires_at'])


class GoogleProduct(models.Model):
    variant = models.OneToOneField(
        'catalog.Variant', on_delete=models.CASCADE, related_name='google_product',
    )
    remote_product_id = models.CharField(max_length=255, null=True, blank=True)
    last_sync_error = models.JSONField(null=True, blank=True)
    last_sync_at = models.DateTimeField(null=True, blank=True)
    auto_update = models.BooleanField(default=False)

    def __str__(self):
        return f"{self.variant.sku} ({self.remote_product_id or 'not uploaded'})"

    @property
    def has_remote_id(self):
        return bool(self.remote_product_id)

    @property
    def merchant_center_link(self):
        if not self.has_remote_id:
            return None
        return MERCHANT_CENTER_URL.format(sku=self.variant.sku)

    def attributes_hash(self, registry=None, camelize_keys=False):
        if registry is None:
            registry = apps.get_app_config('google_shopping').registry
        return registry.attributes_hash(self.variant, camelize_keys=camelize_keys)

    def attributes_json(self, registry=None):
        return json.dumps(self.attributes_hash(registry, camelize_keys=True), cls=DjangoJSONEncoder)
