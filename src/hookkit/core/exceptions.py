"""Exceptions raised by hookkit."""


class HookKitError(Exception):
    """Base class for all hookkit errors."""
    pass


class HostLoadError(HookKitError):
    """Raised when the host plugin module cannot be loaded on demand."""
    def __init__(self, module: str, reason: str):
        self.module = module
        super().__init__(f"Cannot load host plugin module {module!r}: {reason}")
