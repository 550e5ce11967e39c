"""Hook kinds and registration defaults.

A hook is either a filter (callbacks transform and return a value) or an
action (callbacks run for side effects). Both share the same registry.
"""

from hookkit.domain.entities.hook_callback import DEFAULT_ACCEPTED_ARGS, DEFAULT_PRIORITY


class HookKind:
    """Kinds of hook a callback can be registered as."""

    FILTER = "filter"
    ACTION = "action"


def is_filter(kind: str) -> bool:
    """Check whether a kind transforms values."""
    return kind == HookKind.FILTER


__all__ = [
    "DEFAULT_ACCEPTED_ARGS",
    "DEFAULT_PRIORITY",
    "HookKind",
    "is_filter",
]
