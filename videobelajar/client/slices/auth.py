"""Auth slice: session state, login/register/verify thunks and the persisted session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from videobelajar.client.http import ApiError
from videobelajar.client.node_api import SESSION_FLAG_KEY, SESSION_USER_KEY
from videobelajar.client.store import Action, AsyncThunk, Slice, Store, lifecycle_state, with_lifecycle
from videobelajar.client.transforms import transform_user_data
from videobelajar.core.defaults import match_hardcoded_account

if TYPE_CHECKING:
    from videobelajar.client.slices import ClientContext

GUEST_USER = {
    "id": "guest",
    "name": "Guest User",
    "email": "guest@example.com",
    "role": "guest",
}


def initial_state() -> dict[str, Any]:
    return {"user": None, "isLoggedIn": False, "token": None, **lifecycle_state()}


def _persist_session(ctx: ClientContext, user: dict[str, Any]) -> None:
    ctx.storage.set_json(SESSION_USER_KEY, user)
    ctx.storage.set_item(SESSION_FLAG_KEY, "true")


def _clear_session(ctx: ClientContext) -> None:
    ctx.storage.remove_item(SESSION_USER_KEY)
    ctx.storage.remove_item(SESSION_FLAG_KEY)


async def _login(arg: dict[str, str], ctx: ClientContext) -> dict[str, Any]:
    """Hardcoded demo accounts resolve locally; everyone else goes through the backend."""
    email, password = arg["email"], arg["password"]
    account = match_hardcoded_account(email, password)
    if account is not None:
        user = {"id": account.id, "name": account.name, "email": account.email, "role": account.role}
    else:
        data = await ctx.api.auth.login(email, password)
        user = {**data["user"], "token": data["token"]}
    _persist_session(ctx, user)
    return user


async def _register(arg: dict[str, Any], ctx: ClientContext) -> dict[str, Any]:
    return await ctx.api.auth.register(transform_user_data(arg))


async def _verify(arg: Any, ctx: ClientContext) -> dict[str, Any]:
    try:
        return await ctx.api.auth.verify_token()
    except ApiError:
        _clear_session(ctx)
        raise


login_user = AsyncThunk("auth/loginUser", _login, "Terjadi kesalahan saat login")
register_user = AsyncThunk(
    "auth/registerUser",
    _register,
    "Terjadi kesalahan saat mendaftar. Silakan coba lagi.",
)
verify_token = AsyncThunk("auth/verifyToken", _verify, "Token tidak valid")


def _signed_out(state: dict[str, Any]) -> None:
    state["user"] = None
    state["isLoggedIn"] = False
    state["token"] = None


def _on_login(state: dict[str, Any], action: Action) -> None:
    state["user"] = action.payload
    state["isLoggedIn"] = True
    state["token"] = action.payload.get("token")


def _on_login_rejected(state: dict[str, Any], action: Action) -> None:
    _signed_out(state)


def _on_verified(state: dict[str, Any], action: Action) -> None:
    state["user"] = {**(state["user"] or {}), **action.payload}
    state["isLoggedIn"] = True


def _on_verify_rejected(state: dict[str, Any], action: Action) -> None:
    _signed_out(state)


def _logout(state: dict[str, Any], action: Action) -> None:
    _signed_out(state)
    state["error"] = None


def _clear_auth_error(state: dict[str, Any], action: Action) -> None:
    state["error"] = None


def _set_user_from_storage(state: dict[str, Any], action: Action) -> None:
    user = action.payload
    state["user"] = user
    state["isLoggedIn"] = bool(user)
    state["token"] = user.get("token") if user else None


def _set_guest_user(state: dict[str, Any], action: Action) -> None:
    state["user"] = dict(GUEST_USER)
    state["isLoggedIn"] = True
    state["error"] = None
    state["token"] = None


auth_slice = Slice(
    "auth",
    initial_state,
    reducers={
        "logout": _logout,
        "clearAuthError": _clear_auth_error,
        "setUserFromStorage": _set_user_from_storage,
        "setGuestUser": _set_guest_user,
    },
    extra_reducers={
        **with_lifecycle(login_user, _on_login, _on_login_rejected),
        # Registration never logs the new account in.
        **with_lifecycle(register_user),
        **with_lifecycle(verify_token, _on_verified, _on_verify_rejected),
    },
)


def logout(store: Store) -> Action:
    _clear_session(store.extra)
    return store.dispatch(auth_slice.actions["logout"]())


def clear_auth_error(store: Store) -> Action:
    return store.dispatch(auth_slice.actions["clearAuthError"]())


def set_user_from_storage(store: Store) -> Action:
    """Restore the persisted session, if any."""
    user = store.extra.storage.get_json(SESSION_USER_KEY)
    return store.dispatch(auth_slice.actions["setUserFromStorage"](user))


def set_guest_user(store: Store) -> Action:
    _persist_session(store.extra, dict(GUEST_USER))
    return store.dispatch(auth_slice.actions["setGuestUser"]())
