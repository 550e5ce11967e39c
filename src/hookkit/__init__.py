"""hookkit - register host filters and actions before the host boots.

Plugins register callbacks through a single registrar. While the host is
not loaded, registrations are written into its pre-initialization
structure and picked up when it boots.
"""

__version__ = "0.1.0"

from hookkit.core.hooks import HookDecorator, HookKind, HookRegistrar, get_registrar
from hookkit.host import HookTable, HostRuntime, get_runtime

__all__ = [
    "HookDecorator",
    "HookKind",
    "HookRegistrar",
    "HookTable",
    "HostRuntime",
    "__version__",
    "get_registrar",
    "get_runtime",
]
