"""Client for this backend: unwraps the {success, message, data} envelope and sends the stored token."""

import logging
from typing import Any

import httpx

from videobelajar.client.http import ApiError, JsonHttpClient
from videobelajar.client.mock_api import ALL_CATEGORIES
from videobelajar.client.storage import LocalStorage
from videobelajar.core.config import settings

logger = logging.getLogger(__name__)

# Storage key holding the logged-in user (with its token) as JSON.
SESSION_USER_KEY = "user"
SESSION_FLAG_KEY = "isLoggedIn"


def stored_token(storage: LocalStorage) -> str | None:
    user = storage.get_json(SESSION_USER_KEY)
    if isinstance(user, dict):
        return user.get("token")
    return None


class AuthApi:
    def __init__(self, http: JsonHttpClient) -> None:
        self.http = http

    async def login(self, email: str, password: str) -> dict[str, Any]:
        """Returns {"user": ..., "token": ...}."""
        response = await self.http.post("/auth/login", json={"email": email, "password": password})
        return response["data"]

    async def register(self, data: dict[str, Any]) -> dict[str, Any]:
        response = await self.http.post("/auth/register", json=data)
        return response["data"]

    async def verify_token(self) -> dict[str, Any]:
        response = await self.http.get("/auth/verify")
        return response["data"]


class UsersApi:
    def __init__(self, http: JsonHttpClient) -> None:
        self.http = http

    async def get_all(self) -> list[dict[str, Any]]:
        response = await self.http.get("/users")
        return response["data"]

    async def get_by_id(self, user_id: int | str) -> dict[str, Any]:
        response = await self.http.get(f"/users/{user_id}")
        return response["data"]

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        response = await self.http.post("/users", json=data)
        return response["data"]

    async def update(self, user_id: int | str, data: dict[str, Any]) -> dict[str, Any]:
        response = await self.http.put(f"/users/{user_id}", json=data)
        return response["data"]

    async def delete(self, user_id: int | str) -> dict[str, Any]:
        """Returns the whole envelope (there is no data on delete)."""
        return await self.http.delete(f"/users/{user_id}")

    async def reset_password(self, user_id: int | str, new_password: str) -> dict[str, Any]:
        response = await self.http.patch(
            f"/users/{user_id}/reset-password",
            json={"newPassword": new_password},
        )
        return response["data"]

    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        users = await self.get_all()
        return next((u for u in users if u.get("email") == email), None)

    async def email_exists(self, email: str) -> bool:
        """False when the lookup itself fails."""
        try:
            return await self.find_by_email(email) is not None
        except ApiError as e:
            logger.error("Error checking email existence: %s", e.message)
            return False


class CoursesApi:
    def __init__(self, http: JsonHttpClient) -> None:
        self.http = http

    async def get_all(
        self,
        category: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[dict[str, Any]]:
        params: dict[str, Any] = {}
        if category:
            params["category"] = category
        if limit:
            params["limit"] = limit
        if offset:
            params["offset"] = offset
        response = await self.http.get("/courses", params=params or None)
        return response["data"]

    async def get_by_id(self, course_id: int | str) -> dict[str, Any]:
        response = await self.http.get(f"/courses/{course_id}")
        return response["data"]

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        response = await self.http.post("/courses", json=data)
        return response["data"]

    async def update(self, course_id: int | str, data: dict[str, Any]) -> dict[str, Any]:
        response = await self.http.put(f"/courses/{course_id}", json=data)
        return response["data"]

    async def delete(self, course_id: int | str) -> dict[str, Any]:
        return await self.http.delete(f"/courses/{course_id}")

    async def get_by_category(self, category: str) -> list[dict[str, Any]]:
        if category == ALL_CATEGORIES:
            return await self.get_all()
        response = await self.http.get(f"/courses/category/{category}")
        return response["data"]

    async def reset_to_default(self) -> list[dict[str, Any]]:
        response = await self.http.post("/courses/reset-default")
        return response["data"]


class NodeApiClient:
    """Entry point: NodeApiClient(storage).auth / .users / .courses / .health_check()."""

    def __init__(
        self,
        storage: LocalStorage | None = None,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.storage = storage or LocalStorage(settings.CLIENT_STORAGE_PATH)
        self.http = JsonHttpClient(
            base_url or settings.API_BASE_URL,
            timeout=timeout or settings.CLIENT_REQUEST_TIMEOUT_SEC,
            token_getter=lambda: stored_token(self.storage),
            envelope_errors=True,
            transport=transport,
        )
        self.auth = AuthApi(self.http)
        self.users = UsersApi(self.http)
        self.courses = CoursesApi(self.http)

    async def health_check(self) -> dict[str, Any]:
        try:
            return await self.http.get("/health")
        except ApiError as e:
            logger.error("Backend health check failed: %s", e.message)
            raise ApiError("Backend server is not responding", status_code=e.status_code) from e
