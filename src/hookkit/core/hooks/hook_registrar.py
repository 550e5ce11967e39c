"""Hook registrar - register filters and actions before or after host boot.

The HookRegistrar is the public registration API. Every registration goes
one of two ways:
- direct: the host is live, so the callback is handed to its hook table
- deferred: the host has not booted, so the callback is appended to the
  runtime's pre-initialization structure, which the host consumes on boot

Once the host has been seen live, the registrar stops checking and always
takes the direct path.

IMPORTANT: This is a STABLE API. Plugins call these methods by name.
"""

from functools import lru_cache, wraps
from typing import Any, Callable, Iterable

from hookkit.core.hooks.hook_kinds import (
    DEFAULT_ACCEPTED_ARGS,
    DEFAULT_PRIORITY,
    HookKind,
    is_filter,
)
from hookkit.core.logging import get_logger
from hookkit.domain.entities.hook_callback import HookRegistration
from hookkit.host.runtime import HostRuntime, get_runtime

logger = get_logger(__name__)


class HookRegistrar:
    """Registers callbacks against named hooks, whether or not the host is live.

    Example:
        registrar = get_registrar()

        # Transform a value
        registrar.add_filter("the_title", lambda title: title.upper())

        # React to an event, once
        registrar.add_action_once("init", warm_cache)

        # Observe a value without changing it
        registrar.add_filter_side_effect("the_content", record_length)
    """

    def __init__(self, runtime: HostRuntime) -> None:
        """Initialize the registrar.

        Args:
            runtime: The host runtime to register into.
        """
        self._runtime = runtime
        self._host_loaded = False

    @property
    def runtime(self) -> HostRuntime:
        """Get the host runtime registrations go to."""
        return self._runtime

    @property
    def is_host_loaded(self) -> bool:
        """Whether the host has been seen live. Never goes back to False on its own."""
        return self._host_loaded

    def reset(self) -> None:
        """Forget that the host was seen live. For test harnesses."""
        self._host_loaded = False

    # =========================================================================
    # Filters
    # =========================================================================

    def add_filter(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> bool:
        """Add a filter, even before the host is loaded.

        Args:
            name: The name of the filter.
            callback: Callable receiving the value (and extra arguments up to
                      accepted_args) and returning the new value.
            priority: Priority. Lower runs first. Default 10.
            accepted_args: Number of accepted arguments. Default 1.

        Returns:
            The host's result on the direct path, True when deferred.
        """
        return self._add_hook(HookKind.FILTER, name, callback, priority, accepted_args)

    def add_filters(
        self,
        names: Iterable[str],
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> None:
        """Add the same callback to multiple filters."""
        for name in names:
            self.add_filter(name, callback, priority, accepted_args)

    def add_filter_once(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> bool:
        """Add a filter that runs exactly once.

        The registered wrapper removes itself from the host before calling
        the callback, so the callback sees only the first dispatch.
        """

        @wraps(callback)
        def wrapper(*args: Any) -> Any:
            self._remove_hook(HookKind.FILTER, name, wrapper, priority)
            return callback(*args)

        return self._add_hook(HookKind.FILTER, name, wrapper, priority, accepted_args)

    def add_filter_side_effect(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> bool:
        """Add a filter for side effects only.

        The callback's return value is ignored and the filtered value passes
        through unchanged. Useful to react to a filter's data without
        modifying it.
        """

        @wraps(callback)
        def wrapper(*args: Any) -> Any:
            callback(*args)
            return args[0] if args else None

        return self._add_hook(HookKind.FILTER, name, wrapper, priority, accepted_args)

    def add_filter_side_effect_once(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> bool:
        """Add a side-effect-only filter that runs exactly once."""

        @wraps(callback)
        def wrapper(*args: Any) -> Any:
            self._remove_hook(HookKind.FILTER, name, wrapper, priority)
            callback(*args)
            return args[0] if args else None

        return self._add_hook(HookKind.FILTER, name, wrapper, priority, accepted_args)

    # =========================================================================
    # Actions
    # =========================================================================

    def add_action(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> bool:
        """Add an action, even before the host is loaded.

        Args:
            name: The name of the action.
            callback: Callable to run. Its return value is ignored.
            priority: Priority. Lower runs first. Default 10.
            accepted_args: Number of accepted arguments. Default 1.

        Returns:
            The host's result on the direct path, True when deferred.
        """
        return self._add_hook(HookKind.ACTION, name, callback, priority, accepted_args)

    def add_actions(
        self,
        names: Iterable[str],
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> None:
        """Add the same callback to multiple actions."""
        for name in names:
            self.add_action(name, callback, priority, accepted_args)

    def add_action_once(
        self,
        name: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> bool:
        """Add an action that runs exactly once."""

        @wraps(callback)
        def wrapper(*args: Any) -> None:
            self._remove_hook(HookKind.ACTION, name, wrapper, priority)
            callback(*args)

        return self._add_hook(HookKind.ACTION, name, wrapper, priority, accepted_args)

    # =========================================================================
    # Internal Methods
    # =========================================================================

    def _add_hook(
        self,
        kind: str,
        name: str,
        callback: Callable[..., Any],
        priority: int,
        accepted_args: int,
    ) -> bool:
        registration = HookRegistration(
            name=name,
            callback=callback,
            priority=priority,
            accepted_args=accepted_args,
            kind=kind,
        )

        # Fast path: host is live (most common case)
        if self._host_loaded or self._ensure_host_loaded():
            host = self._runtime.host
            if is_filter(kind):
                result = host.add_filter(name, callback, priority, accepted_args)
            else:
                result = host.add_action(name, callback, priority, accepted_args)
            self._log_registration(registration, "direct")
            return result

        # Early registration: write the structure the host consumes on boot
        buckets = self._runtime.preinitialized.setdefault(name, {})
        buckets.setdefault(priority, []).append(registration.as_record())
        self._log_registration(registration, "deferred")
        return True

    def _ensure_host_loaded(self) -> bool:
        """Check whether the host is live, loading it if it is installed, and cache the result."""
        if self._runtime.host is not None:
            self._host_loaded = True
            return True

        if self._runtime.is_defined():
            self._runtime.load_host()
            self._host_loaded = True
            return True

        return False

    def _remove_hook(
        self,
        kind: str,
        name: str,
        callback: Callable[..., Any],
        priority: int,
    ) -> bool:
        host = self._runtime.host
        if host is None:
            return False

        if is_filter(kind):
            removed = host.remove_filter(name, callback, priority)
        else:
            removed = host.remove_action(name, callback, priority)
        logger.debug("One-shot hook removed", hook_name=name, priority=priority, removed=removed)
        return removed

    def _log_registration(self, registration: HookRegistration, path: str) -> None:
        logger.debug(
            "Hook registered",
            hook_name=registration.name,
            kind=registration.kind,
            priority=registration.priority,
            accepted_args=registration.accepted_args,
            path=path,
        )


@lru_cache
def get_registrar() -> HookRegistrar:
    """Get the process-wide registrar, bound to the process-wide runtime."""
    return HookRegistrar(get_runtime())
