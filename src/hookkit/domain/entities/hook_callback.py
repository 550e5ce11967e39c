"""Hook callback records.

Contains the data structures shared by the registrar and the host:
- HookRegistration: a single request to attach a callback to a hook
- HookCallback: a callback as stored by the host, per priority bucket
- PreinitializedHooks: the shape of the host's pre-initialization storage
"""

from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_PRIORITY = 10
DEFAULT_ACCEPTED_ARGS = 1

# hook name -> priority -> ordered records {"function": ..., "accepted_args": ...}
PreinitializedHooks = dict[str, dict[int, list[dict[str, Any]]]]


@dataclass(frozen=True)
class HookRegistration:
    """A callback to register against a named hook.

    Attributes:
        name: Hook name.
        callback: Any callable: function, bound method, lambda or callable object.
        priority: Ordering key. Lower runs first.
        accepted_args: How many dispatch arguments the callback receives.
        kind: Either "filter" or "action".
    """

    name: str
    callback: Callable[..., Any]
    priority: int
    accepted_args: int
    kind: str

    def as_record(self) -> dict[str, Any]:
        """Return the pre-initialization record for this registration."""
        return {"function": self.callback, "accepted_args": self.accepted_args}


@dataclass
class HookCallback:
    """A callback held by the host in a priority bucket."""

    function: Callable[..., Any]
    accepted_args: int = 1

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "HookCallback":
        return cls(function=record["function"], accepted_args=int(record["accepted_args"]))

    def __call__(self, args: tuple[Any, ...]) -> Any:
        if self.accepted_args <= 0:
            return self.function()
        return self.function(*args[: self.accepted_args])
