"""Mapping of local variants onto the Content API product schema.

Every attribute in ``G_ATTRIBUTES`` is resolved through an
``AttributeRegistry``; attributes without a resolver, or whose resolver
returns ``None``, are left out of the payload entirely.
"""
from collections import OrderedDict

from django.conf import settings
from django.utils.module_loading import import_string

G_ATTRIBUTES = (
    'offer_id', 'title', 'description', 'google_product_category', 'product_type',
    'link', 'mobile_link', 'image_link', 'additional_image_link', 'condition',

    'availability', 'availability_date', 'price', 'sale_price',
    'sale_price_effective_date',

    'brand', 'gtin', 'mpn', 'identifier_exists', 'gender', 'age_group',
    'size_type', 'size_system',

    'color', 'size',

    'material', 'pattern', 'item_group_id',

    'tax', 'shipping', 'shipping_weight', 'shipping_label',

    'multipack', 'is_bundle',

    'adult', 'adwords_grouping', 'adwords_labels', 'adwords_redirect',

    'excluded_destination', 'expiration_date',

    'content_language', 'target_country', 'channel',
)

# Wire names that do not follow the lowerCamelCase rule
IRREGULAR_KEYS = {
    'additional_image_link': 'additionalImageLinks',
}


class UnknownAttributeError(KeyError):
    pass


class RegistryFrozenError(RuntimeError):
    pass


def camelize_key(key):
    key = str(key)
    if key in IRREGULAR_KEYS:
        return IRREGULAR_KEYS[key]
    head, *rest = key.split('_')
    return head + ''.join(part.capitalize() for part in rest)


def _blank_to_none(value):
    return value or None


def _as_float(value):
    return None if value is None else float(value)


def default_resolvers(link_template='', content_language='en', target_country='US', channel='online'):
    """Build the stock resolvers for ``catalog.Variant``.

    Returns a dict of attribute name -> callable(variant).
    """

    def link(variant):
        if not link_template:
            return None
        return link_template.format(slug=variant.product.slug, sku=variant.sku)

    def image_link(variant):
        return variant.image_url or variant.product.image_url or None

    def identifier_exists(variant):
        # Google assumes identifiers exist unless told otherwise
        if variant.gtin or variant.mpn:
            return None
        return False

    def item_group_id(variant):
        if variant.product.variants.count() > 1:
            return variant.product.slug
        return None

    def shipping_weight(variant):
        if variant.weight is None:
            return None
        return f"{variant.weight.normalize():f} kg"

    return {
        'offer_id': lambda v: v.sku,
        'title': lambda v: v.product.name,
        'description': lambda v: _blank_to_none(v.product.description),
        'google_product_category': lambda v: _blank_to_none(v.product.google_product_category),
        'product_type': lambda v: _blank_to_none(v.product.product_type),
        'link': link,
        'image_link': image_link,
        'additional_image_link': lambda v: list(v.additional_image_urls) or None,
        'condition': lambda v: 'new',
        'availability': lambda v: 'in stock' if v.in_stock else 'out of stock',
        'price': lambda v: _as_float(v.price),
        'sale_price': lambda v: _as_float(v.sale_price),
        'brand': lambda v: _blank_to_none(v.product.brand),
        'gtin': lambda v: _blank_to_none(v.gtin),
        'mpn': lambda v: _blank_to_none(v.mpn),
        'identifier_exists': identifier_exists,
        'color': lambda v: _blank_to_none(v.color),
        'size': lambda v: _blank_to_none(v.size),
        'item_group_id': item_group_id,
        'shipping_weight': shipping_weight,
        'content_language': lambda v: content_language,
        'target_country': lambda v: target_country,
        'channel': lambda v: channel,
    }


class AttributeRegistry:
    """Per-attribute value resolvers, configured once at startup and read afterwards."""

    def __init__(self, resolvers=None):
        self._resolvers = {}
        self._frozen = False
        for name, resolver in (resolvers or {}).items():
            self.register(name, resolver)

    @classmethod
    def defaults(cls, **options):
        return cls(default_resolvers(**options))

    @classmethod
    def from_settings(cls):
        registry = cls.defaults(
            link_template=getattr(settings, 'GOOGLE_SHOPPING_PRODUCT_URL', ''),
            content_language=getattr(settings, 'GOOGLE_SHOPPING_CONTENT_LANGUAGE', 'en'),
            target_country=getattr(settings, 'GOOGLE_SHOPPING_TARGET_COUNTRY', 'US'),
            channel=getattr(settings, 'GOOGLE_SHOPPING_CHANNEL', 'online'),
        )
        overrides = getattr(settings, 'GOOGLE_SHOPPING_ATTRIBUTE_RESOLVERS', {}) or {}
        for name, path in overrides.items():
            registry.register(name, import_string(path))
        return registry

    def register(self, name, resolver=None):
        """Register ``resolver`` for ``name``; usable as a decorator when ``resolver`` is omitted."""
        if self._frozen:
            raise RegistryFrozenError(f"cannot register {name!r}: registry is frozen")
        if name not in G_ATTRIBUTES:
            raise UnknownAttributeError(name)

        if resolver is None:
            def decorator(func):
                self.register(name, func)
                return func
            return decorator

        self._resolvers[name] = resolver
        return resolver

    def freeze(self):
        self._frozen = True
        return self

    @property
    def frozen(self):
        return self._frozen

    def value_of(self, variant, name):
        resolver = self._resolvers.get(name)
        if resolver is None:
            return None
        return resolver(variant)

    def attributes_hash(self, variant, camelize_keys=False):
        result = OrderedDict()
        for name in G_ATTRIBUTES:
            value = self.value_of(variant, name)
            if value is None:
                continue
            key = camelize_key(name) if camelize_keys else name
            result[key] = value
        return result
