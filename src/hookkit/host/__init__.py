"""Host hook system.

The host owns the hook table callbacks are dispatched from. Before it boots,
callbacks wait in the runtime's pre-initialization structure.
"""

from hookkit.host.hook_table import HookTable, build_callback_id
from hookkit.host.runtime import HostRuntime, get_runtime

__all__ = [
    "HookTable",
    "HostRuntime",
    "build_callback_id",
    "get_runtime",
]
