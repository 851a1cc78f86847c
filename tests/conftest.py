import os
from unittest.mock import MagicMock

# records still reach caplog through the root logger
os.environ.setdefault("LOG_TO_CONSOLE", "false")

import pytest
import requests

from storefront.api_client import StoreApiClient
from storefront.stores import ProductCache

from .helpers import BASE, product_dict


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return StoreApiClient(base_url=BASE, session=session)


@pytest.fixture
def twenty_products():
    return [product_dict(i + 1) for i in range(20)]


@pytest.fixture
def cache():
    return ProductCache()
