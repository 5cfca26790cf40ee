"""Users slice: the admin user list and its CRUD thunks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from videobelajar.client.store import Action, AsyncThunk, Slice, Store, lifecycle_state, with_lifecycle
from videobelajar.client.transforms import transform_user_data

if TYPE_CHECKING:
    from videobelajar.client.slices import ClientContext


def initial_state() -> dict[str, Any]:
    return {"users": [], **lifecycle_state()}


async def _fetch(arg: Any, ctx: ClientContext) -> list[dict[str, Any]]:
    return await ctx.api.users.get_all()


async def _add(arg: dict[str, Any], ctx: ClientContext) -> dict[str, Any]:
    return await ctx.api.users.create(transform_user_data(arg))


async def _update(arg: dict[str, Any], ctx: ClientContext) -> dict[str, Any]:
    return await ctx.api.users.update(arg["id"], arg["userData"])


async def _delete(arg: int | str, ctx: ClientContext) -> int | str:
    await ctx.api.users.delete(arg)
    return arg


async def _reset_password(arg: dict[str, Any], ctx: ClientContext) -> dict[str, Any]:
    return await ctx.api.users.reset_password(arg["userId"], arg["newPassword"])


fetch_users = AsyncThunk("users/fetchUsers", _fetch, "Failed to fetch users")
add_user = AsyncThunk("users/addUser", _add, "Failed to add user")
update_user = AsyncThunk("users/updateUser", _update, "Failed to update user")
delete_user = AsyncThunk("users/deleteUser", _delete, "Failed to delete user")
reset_user_password = AsyncThunk("users/resetUserPassword", _reset_password, "Failed to reset password")


def replace_by_id(items: list[dict[str, Any]], updated: dict[str, Any]) -> None:
    """Swap in the updated record; unknown ids are ignored."""
    for index, item in enumerate(items):
        if item.get("id") == updated.get("id"):
            items[index] = updated
            return


def _on_fetched(state: dict[str, Any], action: Action) -> None:
    state["users"] = action.payload


def _on_added(state: dict[str, Any], action: Action) -> None:
    state["users"].append(action.payload)


def _on_updated(state: dict[str, Any], action: Action) -> None:
    replace_by_id(state["users"], action.payload)


def _on_deleted(state: dict[str, Any], action: Action) -> None:
    state["users"] = [u for u in state["users"] if u.get("id") != action.payload]


def _clear_users_error(state: dict[str, Any], action: Action) -> None:
    state["error"] = None


def _reset_users(state: dict[str, Any], action: Action) -> None:
    state["users"] = []
    state["error"] = None
    state["loading"] = False


users_slice = Slice(
    "users",
    initial_state,
    reducers={"clearUsersError": _clear_users_error, "resetUsers": _reset_users},
    extra_reducers={
        **with_lifecycle(fetch_users, _on_fetched),
        **with_lifecycle(add_user, _on_added),
        **with_lifecycle(update_user, _on_updated),
        **with_lifecycle(delete_user, _on_deleted),
        **with_lifecycle(reset_user_password, _on_updated),
    },
)


def clear_users_error(store: Store) -> Action:
    return store.dispatch(users_slice.actions["clearUsersError"]())


def reset_users(store: Store) -> Action:
    return store.dispatch(users_slice.actions["resetUsers"]())
