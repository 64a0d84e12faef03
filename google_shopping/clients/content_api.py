import json
import logging
from urllib.parse import quote

import requests
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder

from .api_response import ApiResponse
from .base import BaseTransport

logger = logging.getLogger(__name__)

CONTENT_API_BASE_URL = getattr(
    settings, 'GOOGLE_SHOPPING_API_BASE_URL', 'https://shoppingcontent.googleapis.com/content/v2.1'
)
CONTENT_API_TIMEOUT = getattr(settings, 'GOOGLE_SHOPPING_API_TIMEOUT', 30)


class ContentApiTransport(BaseTransport):
    def __init__(self, auth, base_url=None, timeout=None, http=None):
        self.auth = auth
        self.base_url = (base_url or CONTENT_API_BASE_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else CONTENT_API_TIMEOUT
        self.http = http or self.make_session()

    def make_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            'Content-Type': 'application/json',
            'Accept': 'application/json',
        })
        return session

    def _products_url(self, merchant_id, product_id=None):
        url = f"{self.base_url}/{quote(str(merchant_id), safe='')}/products"
        if product_id is not None:
            url = f"{url}/{quote(str(product_id), safe='')}"
        return url

    def _execute(self, method, url, **kwargs):
        # Authorization is read per request so a refreshed token is picked up on retry
        response = self.http.request(
            method, url, headers=self.auth.authorization_header(), timeout=self.timeout, **kwargs,
        )
        logger.debug("%s %s -> %d", method, url, response.status_code)
        return ApiResponse.from_http(response)

    def get_product(self, merchant_id, product_id) -> ApiResponse:
        return self._execute('GET', self._products_url(merchant_id, product_id))

    def insert_product(self, merchant_id, body) -> ApiResponse:
        payload = json.dumps(body, cls=DjangoJSONEncoder)
        return self._execute('POST', self._products_url(merchant_id), data=payload)

    def delete_product(self, merchant_id, product_id) -> ApiResponse:
        return self._execute('DELETE', self._products_url(merchant_id, product_id))
