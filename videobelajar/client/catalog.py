"""Course list for the landing page with a short in-memory cache and an offline fallback."""

import logging
import time
from collections.abc import Callable
from typing import Any, Protocol

from videobelajar.client.http import ApiError
from videobelajar.client.mock_api import ALL_CATEGORIES
from videobelajar.client.transforms import course_to_component
from videobelajar.core.defaults import DEFAULT_COURSES

logger = logging.getLogger(__name__)

CACHE_TTL_SEC = 30.0

CATEGORIES = (ALL_CATEGORIES, "Pemasaran", "Desain", "Pengembangan Diri", "Bisnis")

FALLBACK_COURSES: tuple[dict[str, Any], ...] = tuple(
    {"id": index, **course} for index, course in enumerate(DEFAULT_COURSES, start=1)
)


class CourseSource(Protocol):
    """What the catalog needs from an API client (MockProductsApi or CoursesApi)."""

    async def get_all(self) -> list[dict[str, Any]]: ...

    async def get_by_category(self, category: str) -> list[dict[str, Any]]: ...

    async def create(self, data: dict[str, Any]) -> dict[str, Any]: ...

    async def update(self, course_id: int | str, data: dict[str, Any]) -> dict[str, Any]: ...

    async def delete(self, course_id: int | str) -> Any: ...


def fallback_courses(category: str = ALL_CATEGORIES) -> list[dict[str, Any]]:
    courses = [course_to_component(c) for c in FALLBACK_COURSES]
    if category == ALL_CATEGORIES:
        return courses
    return [c for c in courses if c["category"] == category]


class CourseCatalog:
    """
    Caches the transformed course list for CACHE_TTL_SEC.

    Read failures fall back to the built-in default courses (and that fallback
    is cached too); write failures propagate. Every successful write clears the
    cache.
    """

    def __init__(
        self,
        source: CourseSource,
        ttl: float = CACHE_TTL_SEC,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.source = source
        self.ttl = ttl
        self.clock = clock
        self._cache: list[dict[str, Any]] | None = None
        self._cached_at = 0.0

    def clear_cache(self) -> None:
        self._cache = None
        self._cached_at = 0.0

    async def get_all_courses(self) -> list[dict[str, Any]]:
        now = self.clock()
        if self._cache is not None and now - self._cached_at < self.ttl:
            return self._cache
        try:
            courses = [course_to_component(c) for c in await self.source.get_all()]
        except ApiError as e:
            logger.error("Error fetching courses from API: %s", e.message)
            courses = fallback_courses()
        self._cache = courses
        self._cached_at = now
        return courses

    async def get_courses_by_category(self, category: str) -> list[dict[str, Any]]:
        try:
            return [course_to_component(c) for c in await self.source.get_by_category(category)]
        except ApiError as e:
            logger.error("Error fetching courses by category: %s", e.message)
            return fallback_courses(category)

    async def get_featured_courses(self, limit: int = 6) -> list[dict[str, Any]]:
        courses = await self.get_all_courses()
        return courses[:limit]

    async def refresh(self) -> list[dict[str, Any]]:
        self.clear_cache()
        return await self.get_all_courses()

    async def add_course(self, data: dict[str, Any]) -> dict[str, Any]:
        created = await self.source.create(data)
        self.clear_cache()
        return created

    async def update_course(self, course_id: int | str, data: dict[str, Any]) -> dict[str, Any]:
        updated = await self.source.update(course_id, data)
        self.clear_cache()
        return updated

    async def delete_course(self, course_id: int | str) -> bool:
        await self.source.delete(course_id)
        self.clear_cache()
        return True

    async def reset_to_default(self) -> bool:
        """Delete every course one by one, then recreate the default courses."""
        for course in await self.source.get_all():
            await self.source.delete(course["id"])
        for course in DEFAULT_COURSES:
            await self.source.create(dict(course))
        self.clear_cache()
        logger.info("Default courses reset successfully")
        return True
