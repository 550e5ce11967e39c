"""Domain entities for hookkit.

Entities are plain dataclasses shared by the registrar and the host.
"""

from hookkit.domain.entities.hook_callback import (
    DEFAULT_ACCEPTED_ARGS,
    DEFAULT_PRIORITY,
    HookCallback,
    HookRegistration,
    PreinitializedHooks,
)

__all__ = [
    "DEFAULT_ACCEPTED_ARGS",
    "DEFAULT_PRIORITY",
    "HookCallback",
    "HookRegistration",
    "PreinitializedHooks",
]
