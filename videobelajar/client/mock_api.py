"""Client for the hosted mock API (raw JSON resources, no envelope)."""

from typing import Any

import httpx

from videobelajar.client.http import JsonHttpClient
from videobelajar.core.config import settings

ALL_CATEGORIES = "Semua Kelas"


class MockUsersApi:
    def __init__(self, http: JsonHttpClient) -> None:
        self.http = http

    async def get_all(self) -> list[dict[str, Any]]:
        return await self.http.get("/users")

    async def get_by_id(self, user_id: int | str) -> dict[str, Any]:
        return await self.http.get(f"/users/{user_id}")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self.http.post("/users", json=data)

    async def update(self, user_id: int | str, data: dict[str, Any]) -> dict[str, Any]:
        return await self.http.put(f"/users/{user_id}", json=data)

    async def delete(self, user_id: int | str) -> Any:
        return await self.http.delete(f"/users/{user_id}")

    async def find_by_email(self, email: str) -> dict[str, Any] | None:
        """Linear scan of every user; the mock API has no email filter."""
        users = await self.get_all()
        return next((u for u in users if u.get("email") == email), None)

    async def email_exists(self, email: str) -> bool:
        return await self.find_by_email(email) is not None


class MockProductsApi:
    def __init__(self, http: JsonHttpClient) -> None:
        self.http = http

    async def get_all(self) -> list[dict[str, Any]]:
        return await self.http.get("/product")

    async def get_by_id(self, product_id: int | str) -> dict[str, Any]:
        return await self.http.get(f"/product/{product_id}")

    async def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return await self.http.post("/product", json=data)

    async def update(self, product_id: int | str, data: dict[str, Any]) -> dict[str, Any]:
        return await self.http.put(f"/product/{product_id}", json=data)

    async def delete(self, product_id: int | str) -> Any:
        return await self.http.delete(f"/product/{product_id}")

    async def get_by_category(self, category: str) -> list[dict[str, Any]]:
        """Filtered client-side; "Semua Kelas" returns everything."""
        products = await self.get_all()
        if category == ALL_CATEGORIES:
            return products
        return [p for p in products if p.get("category") == category]


class MockApiClient:
    """Entry point: MockApiClient().users / .products."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.http = JsonHttpClient(
            base_url or settings.MOCK_API_BASE_URL,
            timeout=timeout or settings.CLIENT_REQUEST_TIMEOUT_SEC,
            transport=transport,
        )
        self.users = MockUsersApi(self.http)
        self.products = MockProductsApi(self.http)
