"""Process-scoped host state.

The HostRuntime is what the registrar inspects to decide how to register a
callback. It holds:
- preinitialized: hooks registered before the host booted, in the exact
  shape the host consumes on bootstrap
- host: the live HookTable, or None while the host has not booted
- base_path: the host installation path. When defined, the host plugin
  module can be loaded on demand.
"""

from functools import lru_cache
from importlib import import_module
from pathlib import Path
from typing import Optional

from hookkit.core.config import get_settings
from hookkit.core.exceptions import HostLoadError
from hookkit.core.logging import get_logger
from hookkit.domain.entities.hook_callback import PreinitializedHooks
from hookkit.host.hook_table import HookTable

logger = get_logger(__name__)


class HostRuntime:
    """State of the host hook system for the current process."""

    def __init__(
        self,
        base_path: Optional[str] = None,
        plugin_module: str = "hookkit.host.plugin",
    ) -> None:
        self.preinitialized: PreinitializedHooks = {}
        self.host: Optional[HookTable] = None
        self.base_path = base_path
        self.plugin_module = plugin_module

    def define_base_path(self, path: str | Path) -> None:
        """Define the host installation path."""
        self.base_path = str(path)

    def is_defined(self) -> bool:
        """Check whether the host installation path is defined."""
        return self.base_path is not None

    def install(self, host: HookTable) -> None:
        """Make a hook table the live host."""
        self.host = host

    def load_host(self) -> HookTable:
        """Load the host plugin module and boot the host from it.

        The module must define ``bootstrap(runtime) -> HookTable``. The returned
        table is installed unless bootstrap() installed a host itself.

        Raises:
            HostLoadError: If the module cannot be imported, has no bootstrap(),
                or bootstrap() produced no hook table.
        """
        try:
            module = import_module(self.plugin_module)
        except ImportError as e:
            raise HostLoadError(self.plugin_module, str(e)) from e

        bootstrap = getattr(module, "bootstrap", None)
        if not callable(bootstrap):
            raise HostLoadError(self.plugin_module, "module defines no bootstrap()")

        host = bootstrap(self)
        if self.host is None:
            if not isinstance(host, HookTable):
                raise HostLoadError(self.plugin_module, "bootstrap() returned no hook table")
            self.install(host)

        logger.info(
            "Host loaded",
            base_path=self.base_path,
            plugin_module=self.plugin_module,
        )
        return self.host

    def reset(self) -> None:
        """Forget the live host and every deferred registration."""
        self.preinitialized = {}
        self.host = None


@lru_cache
def get_runtime() -> HostRuntime:
    """Get the process-wide host runtime, seeded from settings."""
    settings = get_settings()
    return HostRuntime(
        base_path=settings.host_base_path,
        plugin_module=settings.host_plugin_module,
    )
