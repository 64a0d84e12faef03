from abc import ABC, abstractmethod

from .api_response import ApiResponse


class BaseTransport(ABC):
    @abstractmethod
    def get_product(self, merchant_id, product_id) -> ApiResponse:
        """Fetch a single product from the merchant feed."""

    @abstractmethod
    def insert_product(self, merchant_id, body) -> ApiResponse:
        """Create or replace a product from a camel-cased attribute mapping."""

    @abstractmethod
    def delete_product(self, merchant_id, product_id) -> ApiResponse:
        """Remove a product from the merchant feed."""
