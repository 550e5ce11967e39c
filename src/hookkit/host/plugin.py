"""Host registration functions.

This is the module the registrar loads on demand when the host base path is
defined but the host has not booted yet. Booting consumes the
pre-initialization structure, so hooks registered early become live
without being registered again.
"""

from typing import TYPE_CHECKING

from hookkit.core.logging import get_logger
from hookkit.host.hook_table import HookTable

if TYPE_CHECKING:
    from hookkit.host.runtime import HostRuntime

logger = get_logger(__name__)


def bootstrap(runtime: "HostRuntime") -> HookTable:
    """Boot the host hook system.

    Args:
        runtime: The runtime to install the host on.

    Returns:
        The live hook table. If a host is already installed it is returned
        unchanged.
    """
    if runtime.host is not None:
        return runtime.host

    deferred = runtime.preinitialized
    host = HookTable.from_preinitialized(deferred)
    runtime.install(host)
    runtime.preinitialized = {}

    logger.info(
        "Deferred hooks installed",
        hook_count=sum(len(records) for buckets in deferred.values() for records in buckets.values()),
        base_path=runtime.base_path,
    )
    return host
