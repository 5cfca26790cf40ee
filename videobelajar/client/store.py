"""
Minimal pub/sub state container for the client.

Each slice owns a dict of state and reducers keyed by action type. An
AsyncThunk wraps one network call and dispatches "<prefix>/pending" and then
"<prefix>/fulfilled" or "<prefix>/rejected". Late responses are not
cancelled; whichever finishes last writes last.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from videobelajar.client.http import ApiError

logger = logging.getLogger(__name__)

IDLE = "idle"
PENDING = "pending"
FULFILLED = "fulfilled"
REJECTED = "rejected"

Reducer = Callable[[dict[str, Any], "Action"], None]
Listener = Callable[[dict[str, dict[str, Any]], "Action"], None]


@dataclass(frozen=True)
class Action:
    type: str
    payload: Any = None
    meta: dict[str, Any] = field(default_factory=dict)


class ActionCreator:
    """Callable that builds an Action of a fixed type; compares by type in reducer tables."""

    def __init__(self, type_: str) -> None:
        self.type = type_

    def __call__(self, payload: Any = None) -> Action:
        return Action(self.type, payload)

    def __repr__(self) -> str:
        return f"ActionCreator({self.type!r})"


def lifecycle_state() -> dict[str, Any]:
    return {"status": IDLE, "loading": False, "error": None}


class Slice:
    """
    Named part of the store.

    reducers: sync action name -> reducer; exposed as slice.actions[name].
    extra_reducers: full action type -> reducer, for thunk lifecycle actions.
    Reducers mutate the state dict they are given.
    """

    def __init__(
        self,
        name: str,
        initial_state: Callable[[], dict[str, Any]],
        reducers: dict[str, Reducer] | None = None,
        extra_reducers: dict[str, Reducer] | None = None,
    ) -> None:
        self.name = name
        self.initial_state = initial_state
        self.actions = {key: ActionCreator(f"{name}/{key}") for key in (reducers or {})}
        self._reducers: dict[str, Reducer] = {
            f"{name}/{key}": reducer for key, reducer in (reducers or {}).items()
        }
        self._reducers.update(extra_reducers or {})

    def reduce(self, state: dict[str, Any], action: Action) -> dict[str, Any]:
        reducer = self._reducers.get(action.type)
        if reducer is None:
            return state
        next_state = copy.deepcopy(state)
        reducer(next_state, action)
        return next_state


class Store:
    """Holds every slice's state; extra is handed to thunks (API client, storage)."""

    def __init__(self, slices: list[Slice], extra: Any = None) -> None:
        self.slices = {s.name: s for s in slices}
        self.extra = extra
        self._state = {name: s.initial_state() for name, s in self.slices.items()}
        self._listeners: list[Listener] = []

    def get_state(self) -> dict[str, dict[str, Any]]:
        return self._state

    def dispatch(self, action: Action) -> Action:
        self._state = {
            name: self.slices[name].reduce(state, action)
            for name, state in self._state.items()
        }
        for listener in list(self._listeners):
            listener(self._state, action)
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class AsyncThunk:
    """
    Async action: await thunk(store, arg) runs payload_creator(arg, store.extra).

    ApiError (and ValueError from malformed form input) become a rejected
    action whose payload is the error message, or default_error when the
    message is empty. Anything else propagates.
    """

    def __init__(
        self,
        type_prefix: str,
        payload_creator: Callable[[Any, Any], Awaitable[Any]],
        default_error: str,
    ) -> None:
        self.type_prefix = type_prefix
        self.payload_creator = payload_creator
        self.default_error = default_error
        self.pending = f"{type_prefix}/pending"
        self.fulfilled = f"{type_prefix}/fulfilled"
        self.rejected = f"{type_prefix}/rejected"

    async def __call__(self, store: Store, arg: Any = None) -> Action:
        meta = {"arg": arg}
        store.dispatch(Action(self.pending, None, meta))
        try:
            result = await self.payload_creator(arg, store.extra)
        except ApiError as e:
            return store.dispatch(Action(self.rejected, e.message or self.default_error, meta))
        except ValueError as e:
            logger.warning("%s rejected: %s", self.type_prefix, e)
            return store.dispatch(Action(self.rejected, str(e) or self.default_error, meta))
        return store.dispatch(Action(self.fulfilled, result, meta))


def with_lifecycle(
    thunk: AsyncThunk,
    on_fulfilled: Reducer | None = None,
    on_rejected: Reducer | None = None,
) -> dict[str, Reducer]:
    """
    Reducers for one thunk: status/loading/error bookkeeping plus optional extras.

    pending clears the error; rejected stores the payload as the error.
    """

    def pending(state: dict[str, Any], action: Action) -> None:
        state["status"] = PENDING
        state["loading"] = True
        state["error"] = None

    def fulfilled(state: dict[str, Any], action: Action) -> None:
        state["status"] = FULFILLED
        state["loading"] = False
        state["error"] = None
        if on_fulfilled is not None:
            on_fulfilled(state, action)

    def rejected(state: dict[str, Any], action: Action) -> None:
        state["status"] = REJECTED
        state["loading"] = False
        state["error"] = action.payload
        if on_rejected is not None:
            on_rejected(state, action)

    return {thunk.pending: pending, thunk.fulfilled: fulfilled, thunk.rejected: rejected}
