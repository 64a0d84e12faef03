from django.apps import AppConfig


class GoogleShoppingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'google_shopping'
    verbose_name = 'Google Shopping'

    registry = None

    def ready(self):
        from .attributes import AttributeRegistry

        self.registry = AttributeRegistry.from_settings().freeze()
