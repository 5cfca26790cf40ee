"""State slices and the store factory."""

from dataclasses import dataclass

from videobelajar.client.node_api import NodeApiClient
from videobelajar.client.slices.auth import auth_slice
from videobelajar.client.slices.courses import courses_slice
from videobelajar.client.slices.users import users_slice
from videobelajar.client.storage import LocalStorage
from videobelajar.client.store import Store


@dataclass
class ClientContext:
    """Dependencies thunks receive as store.extra."""

    api: NodeApiClient
    storage: LocalStorage


def create_store(api: NodeApiClient | None = None, storage: LocalStorage | None = None) -> Store:
    """Store with the auth, users and courses slices; api and storage share one session file."""
    if api is None:
        api = NodeApiClient(storage)
    context = ClientContext(api=api, storage=storage or api.storage)
    return Store([auth_slice, users_slice, courses_slice], extra=context)
