"""Hook decorator API for plugin-friendly registration.

This module provides decorator syntax over the registrar, enabling:

    hooks = HookDecorator(get_registrar())

    @hooks.filter("the_title", priority=5)
    def shout(title):
        return title.upper()

Decorated functions are returned unchanged, so they can still be called
directly. One-shot and side-effect decorators register a wrapper, so the
decorated function itself is not what the host holds.
"""

from typing import Any, Callable, Iterable, TypeVar

from hookkit.core.hooks.hook_kinds import DEFAULT_ACCEPTED_ARGS, DEFAULT_PRIORITY
from hookkit.core.hooks.hook_registrar import HookRegistrar

F = TypeVar("F", bound=Callable[..., Any])


class HookDecorator:
    """Provides decorator syntax for hook registration.

    Attributes:
        _registrar: The underlying HookRegistrar.
    """

    def __init__(self, registrar: HookRegistrar) -> None:
        self._registrar = registrar

    @property
    def registrar(self) -> HookRegistrar:
        """Get the underlying registrar."""
        return self._registrar

    # =========================================================================
    # Filters
    # =========================================================================

    def filter(
        self,
        names: str | Iterable[str],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> Callable[[F], F]:
        """Register the decorated function as a filter on one or more hooks.

        Example:
            @hooks.filter(["the_title", "the_excerpt"])
            def strip_tags(text):
                return TAG_RE.sub("", text)
        """
        if isinstance(names, str):
            return self._create_decorator(self._registrar.add_filter, names, priority, accepted_args)
        return self._create_decorator(self._registrar.add_filters, list(names), priority, accepted_args)

    def filter_once(
        self,
        name: str,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> Callable[[F], F]:
        """Register the decorated function as a filter that runs once."""
        return self._create_decorator(self._registrar.add_filter_once, name, priority, accepted_args)

    def filter_side_effect(
        self,
        name: str,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> Callable[[F], F]:
        """Register the decorated function as a side-effect-only filter."""
        return self._create_decorator(
            self._registrar.add_filter_side_effect, name, priority, accepted_args
        )

    def filter_side_effect_once(
        self,
        name: str,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> Callable[[F], F]:
        """Register the decorated function as a side-effect-only filter that runs once."""
        return self._create_decorator(
            self._registrar.add_filter_side_effect_once, name, priority, accepted_args
        )

    # =========================================================================
    # Actions
    # =========================================================================

    def action(
        self,
        names: str | Iterable[str],
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> Callable[[F], F]:
        """Register the decorated function as an action on one or more hooks.

        Example:
            @hooks.action("save_post", accepted_args=2)
            def purge_cache(post_id, post):
                cache.delete(post_id)
        """
        if isinstance(names, str):
            return self._create_decorator(self._registrar.add_action, names, priority, accepted_args)
        return self._create_decorator(self._registrar.add_actions, list(names), priority, accepted_args)

    def action_once(
        self,
        name: str,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = DEFAULT_ACCEPTED_ARGS,
    ) -> Callable[[F], F]:
        """Register the decorated function as an action that runs once."""
        return self._create_decorator(self._registrar.add_action_once, name, priority, accepted_args)

    # =========================================================================
    # Internal Methods
    # =========================================================================

    def _create_decorator(
        self,
        register: Callable[..., Any],
        target: str | list[str],
        priority: int,
        accepted_args: int,
    ) -> Callable[[F], F]:
        def decorator(func: F) -> F:
            register(target, func, priority, accepted_args)
            return func

        return decorator
