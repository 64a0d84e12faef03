from django.db import models


class Product(models.Model):
    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    brand = models.CharField(max_length=100, blank=True)
    product_type = models.CharField(max_length=255, blank=True)
    google_product_category = models.CharField(max_length=255, blank=True)
    image_url = models.URLField(blank=True)

    def __str__(self):
        return self.name


class Variant(models.Model):
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='variants')
    sku = models.CharField(max_length=100, unique=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)
    sale_price = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    count_on_hand = models.IntegerField(default=0)

    color = models.CharField(max_length=50, blank=True)
    size = models.CharField(max_length=50, blank=True)
    gtin = models.CharField(max_length=14, blank=True)
    mpn = models.CharField(max_length=70, blank=True)
    weight = models.DecimalField(max_digits=8, decimal_places=3, null=True, blank=True)  # kg

    image_url = models.URLField(blank=True)
    additional_image_urls = models.JSONField(default=list, blank=True)

    def __str__(self):
        return f"{self.product.name} ({self.sku})"

    @property
    def in_stock(self):
        return self.count_on_hand > 0
