from django.core.management.base import BaseCommand, CommandError

from google_shopping.models import GoogleProduct
from google_shopping.sync import RemoteSyncClient

ACTIONS = ('show', 'get', 'insert', 'delete')


class Command(BaseCommand):
    help = "Show a Google product payload or sync it with the merchant feed."

    def add_arguments(self, parser):
        parser.add_argument('pk', type=int, help="GoogleProduct id")
        parser.add_argument('action', choices=ACTIONS)

    def handle(self, *args, pk, action, **options):
        try:
            google_product = GoogleProduct.objects.select_related('variant__product').get(pk=pk)
        except GoogleProduct.DoesNotExist:
            raise CommandError(f"GoogleProduct {pk} does not exist")

        if action == 'show':
            self.stdout.write(google_product.attributes_json())
            return

        client = RemoteSyncClient.from_settings()
        operation = {
            'get': client.fetch,
            'insert': client.create_or_update,
            'delete': client.delete,
        }[action]
        outcome = operation(google_product)

        if outcome.skipped:
            self.stdout.write(self.style.WARNING("Skipped: no remote product id"))
        elif outcome.succeeded:
            self.stdout.write(self.style.SUCCESS(f"Successfully synced {google_product} ({action})"))
        else:
            self.stdout.write(self.style.ERROR(
                f"Failed to sync {google_product} ({action}): {outcome.errors}"
            ))

        if google_product.merchant_center_link:
            self.stdout.write(google_product.merchant_center_link)
