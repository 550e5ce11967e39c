"""Hook registration core module.

This module provides the registration API plugins use to attach filters
and actions to the host, whether or not the host has booted yet.

IMPORTANT: This is a STABLE API CONTRACT. The public interfaces in
           this module should not have breaking changes.

Example usage:
    from hookkit.core.hooks import HookDecorator, get_registrar

    registrar = get_registrar()
    registrar.add_filter("the_title", lambda title: title.strip(), priority=5)

    hooks = HookDecorator(registrar)

    @hooks.action_once("init")
    def warm_cache():
        cache.load()
"""

from hookkit.core.hooks.hook_decorator import HookDecorator
from hookkit.core.hooks.hook_kinds import (
    DEFAULT_ACCEPTED_ARGS,
    DEFAULT_PRIORITY,
    HookKind,
    is_filter,
)
from hookkit.core.hooks.hook_registrar import HookRegistrar, get_registrar

__all__ = [
    # Registrar
    "HookRegistrar",
    "get_registrar",
    # Decorator
    "HookDecorator",
    # Kinds
    "HookKind",
    "DEFAULT_PRIORITY",
    "DEFAULT_ACCEPTED_ARGS",
    "is_filter",
]
