"""Hook table - the host's filter and action dispatch engine.

The HookTable stores callbacks per hook name in priority buckets and runs
them on dispatch:
- Lower priority runs first; same priority runs in registration order
- Callbacks are keyed by identity, so re-adding one replaces it in place
- Callbacks removed while a hook is running are skipped
- Priorities added while a hook is running still run if not yet reached

Callback exceptions are not caught. They propagate to whoever called
apply_filters() or do_action().
"""

from collections.abc import Hashable
from typing import Any, Callable, Optional

from hookkit.core.logging import get_logger
from hookkit.domain.entities.hook_callback import (
    DEFAULT_ACCEPTED_ARGS,
    DEFAULT_PRIORITY,
    HookCallback,
    PreinitializedHooks,
)

logger = get_logger(__name__)


def build_callback_id(callback: Callable[..., Any]) -> Hashable:
    """Build the identity key a callback is stored under.

    Hashable callbacks are their own key. Bound methods, including those of
    builtins such as ``items.append``, are recreated on every attribute
    access but compare equal on instance identity and function, so
    ``remove_filter(name, obj.method)`` finds ``obj.method`` added earlier.
    Unhashable callables fall back to object identity.
    """
    try:
        hash(callback)
    except TypeError:
        return id(callback)
    return callback


class HookTable:
    """Registry and dispatcher for filters and actions.

    Example:
        table = HookTable()
        table.add_filter("the_title", str.upper)
        table.apply_filters("the_title", "hello")  # "HELLO"
    """

    def __init__(self) -> None:
        self._callbacks: dict[str, dict[int, dict[Hashable, HookCallback]]] = {}
        self._current: list[str] = []
        self._action_runs: dict[str, int] = {}

    @classmethod
    def from_preinitialized(cls, hooks: PreinitializedHooks) -> "HookTable":
        """Build a table from the pre-initialization storage structure.

        Args:
            hooks: Mapping of hook name to priority to ordered records
                   ``{"function": callable, "accepted_args": int}``.

        Returns:
            A table holding every record, in priority and registration order.
        """
        table = cls()
        for name, buckets in hooks.items():
            for priority in sorted(buckets):
                for record in buckets[priority]:
                    callback = HookCallback.from_record(record)
                    table.add_filter(name, callback.function, priority, callback.accepted_args)
        return table

    # =========================================================================
    # Registration
    # =========================================================================

    def add_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> bool:
        """Attach a callback to a hook.

        Args:
            name: Hook name.
            callback: Callable to run when the hook fires.
            priority: Ordering key. Lower runs first.
            accepted_args: Number of dispatch arguments passed to the callback.

        Returns:
            Always True.
        """
        bucket = self._callbacks.setdefault(name, {}).setdefault(priority, {})
        bucket[build_callback_id(callback)] = HookCallback(callback, accepted_args)
        return True

    add_action = add_filter

    def remove_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> bool:
        """Detach a callback registered at the given priority.

        Returns:
            True if the callback was found and removed, False otherwise.
        """
        buckets = self._callbacks.get(name)
        if not buckets or priority not in buckets:
            return False

        key = build_callback_id(callback)
        bucket = buckets[priority]
        if key not in bucket:
            return False

        del bucket[key]
        if not bucket:
            del buckets[priority]
        if not buckets:
            del self._callbacks[name]
        return True

    remove_action = remove_filter

    def remove_all_filters(self, name: str, priority: Optional[int] = None) -> bool:
        """Detach every callback from a hook, or only those at one priority."""
        buckets = self._callbacks.get(name)
        if buckets:
            if priority is None:
                del self._callbacks[name]
            else:
                buckets.pop(priority, None)
                if not buckets:
                    del self._callbacks[name]
        logger.debug("Hook callbacks cleared", hook_name=name, priority=priority)
        return True

    remove_all_actions = remove_all_filters

    # =========================================================================
    # Inspection
    # =========================================================================

    def has_filter(
        self,
        name: str,
        callback: Optional[Callable[..., Any]] = None,
    ) -> int | bool:
        """Check whether a hook has callbacks.

        Args:
            name: Hook name.
            callback: Optional callback to look for.

        Returns:
            Without a callback, whether the hook has any callbacks. With one,
            the priority it is registered at, or False. Note a priority of 0
            is falsy; compare with ``is False``.
        """
        buckets = self._callbacks.get(name, {})
        if callback is None:
            return bool(buckets)

        key = build_callback_id(callback)
        for priority in sorted(buckets):
            if key in buckets[priority]:
                return priority
        return False

    has_action = has_filter

    def get_callbacks(self, name: str) -> dict[int, list[HookCallback]]:
        """Get the callbacks of a hook grouped by priority, in run order."""
        buckets = self._callbacks.get(name, {})
        return {priority: list(buckets[priority].values()) for priority in sorted(buckets)}

    def current_filter(self) -> Optional[str]:
        """Name of the innermost hook currently running, if any."""
        return self._current[-1] if self._current else None

    current_action = current_filter

    def doing_filter(self, name: Optional[str] = None) -> bool:
        """Check whether a hook (or any hook) is currently running."""
        if name is None:
            return bool(self._current)
        return name in self._current

    doing_action = doing_filter

    def did_action(self, name: str) -> int:
        """Number of times an action has been fired."""
        return self._action_runs.get(name, 0)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Run a value through every callback on a hook.

        Each callback receives the current value followed by ``args``,
        truncated to its accepted_args, and its return value becomes the
        value passed to the next callback.

        Returns:
            The filtered value.
        """
        return self._run(name, (value, *args), returns_value=True)

    def do_action(self, name: str, *args: Any) -> None:
        """Run every callback on a hook for its side effects."""
        self._action_runs[name] = self._action_runs.get(name, 0) + 1
        self._run(name, args, returns_value=False)

    def _run(self, name: str, args: tuple[Any, ...], returns_value: bool) -> Any:
        value = args[0] if args else None
        self._current.append(name)
        try:
            priority: Optional[int] = None
            while True:
                buckets = self._callbacks.get(name)
                if not buckets:
                    break
                pending = [p for p in buckets if priority is None or p > priority]
                if not pending:
                    break
                priority = min(pending)

                for key, callback in list(buckets[priority].items()):
                    # Removed by an earlier callback in this run
                    if key not in self._callbacks.get(name, {}).get(priority, {}):
                        continue
                    if returns_value:
                        value = callback((value, *args[1:]))
                    else:
                        callback(args)
        finally:
            self._current.pop()
        return value
