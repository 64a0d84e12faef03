from decimal import Decimal

from django.apps import apps
from django.test import TestCase, override_settings

from catalog.models import Product, Variant
from google_shopping.attributes import (
    G_ATTRIBUTES,
    AttributeRegistry,
    RegistryFrozenError,
    UnknownAttributeError,
    camelize_key,
)


def custom_gender(variant):
    return 'unisex'


def _make_variant(**kwargs):
    product = Product.objects.create(
        name="Widget", slug="widget", description="A very useful widget", brand="Acme",
    )
    defaults = {'sku': "W-1", 'price': Decimal("9.99"), 'count_on_hand': 4}
    defaults.update(kwargs)
    return Variant.objects.create(product=product, **defaults)


class TestCamelizeKey(TestCase):
    def test_snake_to_lower_camel(self):
        self.assertEqual(camelize_key('google_product_category'), 'googleProductCategory')
        self.assertEqual(camelize_key('sale_price_effective_date'), 'salePriceEffectiveDate')

    def test_single_word_unchanged(self):
        self.assertEqual(camelize_key('title'), 'title')

    def test_additional_image_link_is_pluralized(self):
        self.assertEqual(camelize_key('additional_image_link'), 'additionalImageLinks')

    def test_deterministic(self):
        self.assertEqual(camelize_key('offer_id'), camelize_key('offer_id'))

    def test_every_attribute_is_camel_case(self):
        for name in G_ATTRIBUTES:
            key = camelize_key(name)
            self.assertNotIn('_', key)
            self.assertTrue(key[0].islower())


class TestAttributeRegistry(TestCase):
    def test_unregistered_attribute_resolves_to_none(self):
        registry = AttributeRegistry()
        self.assertIsNone(registry.value_of(object(), 'title'))

    def test_register_and_resolve(self):
        registry = AttributeRegistry()
        registry.register('title', lambda v: "Widget")
        self.assertEqual(registry.value_of(object(), 'title'), "Widget")

    def test_register_as_decorator(self):
        registry = AttributeRegistry()

        @registry.register('brand')
        def brand(variant):
            return "Acme"

        self.assertEqual(registry.value_of(object(), 'brand'), "Acme")
        self.assertEqual(brand(None), "Acme")

    def test_unknown_attribute_rejected(self):
        registry = AttributeRegistry()
        with self.assertRaises(UnknownAttributeError):
            registry.register('colour', lambda v: "red")

    def test_frozen_registry_rejects_registration(self):
        registry = AttributeRegistry().freeze()
        self.assertTrue(registry.frozen)
        with self.assertRaises(RegistryFrozenError):
            registry.register('title', lambda v: "Widget")

    def test_hash_omits_none_and_keeps_field_order(self):
        registry = AttributeRegistry({
            'channel': lambda v: 'online',
            'title': lambda v: "Widget",
            'price': lambda v: 9.99,
            'description': lambda v: None,
        })
        result = registry.attributes_hash(object())

        self.assertEqual(list(result.keys()), ['title', 'price', 'channel'])
        self.assertNotIn('description', result)

    def test_hash_camelizes_keys(self):
        registry = AttributeRegistry({
            'offer_id': lambda v: "W-1",
            'additional_image_link': lambda v: ["https://img.example/2.jpg"],
        })
        result = registry.attributes_hash(object(), camelize_keys=True)
        self.assertEqual(dict(result), {
            'offerId': "W-1",
            'additionalImageLinks': ["https://img.example/2.jpg"],
        })

    def test_app_registry_is_frozen_at_startup(self):
        registry = apps.get_app_config('google_shopping').registry
        self.assertIsInstance(registry, AttributeRegistry)
        self.assertTrue(registry.frozen)

    @override_settings(GOOGLE_SHOPPING_ATTRIBUTE_RESOLVERS={
        'gender': 'google_shopping.tests.test_attributes.custom_gender',
    })
    def test_from_settings_applies_overrides(self):
        registry = AttributeRegistry.from_settings()
        self.assertEqual(registry.value_of(object(), 'gender'), 'unisex')


class TestDefaultResolvers(TestCase):
    def setUp(self):
        self.registry = AttributeRegistry.defaults(link_template="https://shop.example/products/{slug}?sku={sku}")

    def test_widget_payload(self):
        variant = _make_variant()
        result = self.registry.attributes_hash(variant, camelize_keys=True)

        self.assertEqual(result['offerId'], "W-1")
        self.assertEqual(result['title'], "Widget")
        self.assertEqual(result['price'], 9.99)
        self.assertEqual(result['link'], "https://shop.example/products/widget?sku=W-1")
        self.assertEqual(result['availability'], 'in stock')
        self.assertEqual(result['condition'], 'new')
        self.assertEqual(result['contentLanguage'], 'en')
        self.assertEqual(result['targetCountry'], 'US')
        self.assertEqual(result['channel'], 'online')
        for missing in ('salePrice', 'mobileLink', 'imageLink', 'additionalImageLinks',
                        'gtin', 'color', 'itemGroupId', 'shippingWeight'):
            self.assertNotIn(missing, result)

    def test_out_of_stock(self):
        variant = _make_variant(count_on_hand=0)
        self.assertEqual(self.registry.value_of(variant, 'availability'), 'out of stock')

    def test_identifier_exists_only_sent_when_missing(self):
        variant = _make_variant()
        self.assertIs(self.registry.value_of(variant, 'identifier_exists'), False)
        variant.gtin = "00012345600012"
        self.assertIsNone(self.registry.value_of(variant, 'identifier_exists'))

    def test_image_falls_back_to_product(self):
        variant = _make_variant()
        variant.product.image_url = "https://img.example/product.jpg"
        self.assertEqual(self.registry.value_of(variant, 'image_link'), "https://img.example/product.jpg")
        variant.image_url = "https://img.example/variant.jpg"
        self.assertEqual(self.registry.value_of(variant, 'image_link'), "https://img.example/variant.jpg")

    def test_additional_images(self):
        variant = _make_variant(additional_image_urls=["https://img.example/2.jpg"])
        self.assertEqual(self.registry.value_of(variant, 'additional_image_link'), ["https://img.example/2.jpg"])

    def test_sale_price_and_weight(self):
        variant = _make_variant(sale_price=Decimal("7.50"), weight=Decimal("1.500"))
        self.assertEqual(self.registry.value_of(variant, 'sale_price'), 7.5)
        self.assertEqual(self.registry.value_of(variant, 'shipping_weight'), "1.5 kg")

    def test_item_group_id_for_multi_variant_products(self):
        variant = _make_variant()
        self.assertIsNone(self.registry.value_of(variant, 'item_group_id'))
        Variant.objects.create(product=variant.product, sku="W-2", price=Decimal("9.99"))
        self.assertEqual(self.registry.value_of(variant, 'item_group_id'), "widget")

    def test_link_omitted_without_template(self):
        variant = _make_variant()
        self.assertIsNone(AttributeRegistry.defaults().value_of(variant, 'link'))
