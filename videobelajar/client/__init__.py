"""Async clients for this backend and the hosted mock API, plus client-side state."""

from videobelajar.client.catalog import CourseCatalog
from videobelajar.client.http import ApiError
from videobelajar.client.mock_api import MockApiClient
from videobelajar.client.node_api import NodeApiClient
from videobelajar.client.storage import LocalStorage

__all__ = [
    "ApiError",
    "CourseCatalog",
    "LocalStorage",
    "MockApiClient",
    "NodeApiClient",
]
