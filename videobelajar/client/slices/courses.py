"""Courses slice: the catalog as rendered, the active category filter and course CRUD thunks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from videobelajar.client.mock_api import ALL_CATEGORIES
from videobelajar.client.slices.users import replace_by_id
from videobelajar.client.store import Action, AsyncThunk, Slice, Store, lifecycle_state, with_lifecycle
from videobelajar.client.transforms import course_to_component, transform_product_data

if TYPE_CHECKING:
    from videobelajar.client.slices import ClientContext


def initial_state() -> dict[str, Any]:
    return {"courses": [], "activeCategory": ALL_CATEGORIES, **lifecycle_state()}


async def _fetch(arg: dict[str, Any] | None, ctx: ClientContext) -> list[dict[str, Any]]:
    params = arg or {}
    courses = await ctx.api.courses.get_all(
        category=params.get("category"),
        limit=params.get("limit"),
        offset=params.get("offset"),
    )
    return [course_to_component(c) for c in courses]


async def _fetch_by_category(arg: str, ctx: ClientContext) -> list[dict[str, Any]]:
    return [course_to_component(c) for c in await ctx.api.courses.get_by_category(arg)]


async def _add(arg: dict[str, Any], ctx: ClientContext) -> dict[str, Any]:
    created = await ctx.api.courses.create(transform_product_data(arg))
    return course_to_component(created)


async def _update(arg: dict[str, Any], ctx: ClientContext) -> dict[str, Any]:
    updated = await ctx.api.courses.update(arg["id"], transform_product_data(arg["courseData"]))
    return course_to_component(updated)


async def _delete(arg: int | str, ctx: ClientContext) -> int | str:
    await ctx.api.courses.delete(arg)
    return arg


async def _reset(arg: Any, ctx: ClientContext) -> list[dict[str, Any]]:
    return [course_to_component(c) for c in await ctx.api.courses.reset_to_default()]


fetch_courses = AsyncThunk("courses/fetchCourses", _fetch, "Failed to fetch courses")
fetch_courses_by_category = AsyncThunk(
    "courses/fetchCoursesByCategory",
    _fetch_by_category,
    "Failed to fetch courses by category",
)
add_course = AsyncThunk("courses/addCourse", _add, "Failed to add course")
update_course = AsyncThunk("courses/updateCourse", _update, "Failed to update course")
delete_course = AsyncThunk("courses/deleteCourse", _delete, "Failed to delete course")
reset_courses_to_default = AsyncThunk("courses/resetCoursesToDefault", _reset, "Failed to reset courses")


def _on_loaded(state: dict[str, Any], action: Action) -> None:
    state["courses"] = action.payload


def _on_added(state: dict[str, Any], action: Action) -> None:
    state["courses"].append(action.payload)


def _on_updated(state: dict[str, Any], action: Action) -> None:
    replace_by_id(state["courses"], action.payload)


def _on_deleted(state: dict[str, Any], action: Action) -> None:
    state["courses"] = [c for c in state["courses"] if c.get("id") != action.payload]


def _set_active_category(state: dict[str, Any], action: Action) -> None:
    state["activeCategory"] = action.payload


def _clear_error(state: dict[str, Any], action: Action) -> None:
    state["error"] = None


def _reset_courses(state: dict[str, Any], action: Action) -> None:
    state["courses"] = []
    state["error"] = None
    state["loading"] = False


courses_slice = Slice(
    "courses",
    initial_state,
    reducers={
        "setActiveCategory": _set_active_category,
        "clearError": _clear_error,
        "resetCourses": _reset_courses,
    },
    extra_reducers={
        **with_lifecycle(fetch_courses, _on_loaded),
        **with_lifecycle(fetch_courses_by_category, _on_loaded),
        **with_lifecycle(add_course, _on_added),
        **with_lifecycle(update_course, _on_updated),
        **with_lifecycle(delete_course, _on_deleted),
        **with_lifecycle(reset_courses_to_default, _on_loaded),
    },
)


def set_active_category(store: Store, category: str) -> Action:
    return store.dispatch(courses_slice.actions["setActiveCategory"](category))


def clear_error(store: Store) -> Action:
    return store.dispatch(courses_slice.actions["clearError"]())


def reset_courses(store: Store) -> Action:
    return store.dispatch(courses_slice.actions["resetCourses"]())
