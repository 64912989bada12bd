# =============================================================================
# core/errors.py: Registry Exceptions
# =============================================================================
#
# Only misuse of the tool catalog raises.  Everything that can go wrong while
# a tool runs (bad input, network failure, upstream errors) is returned as an
# OutputRecord with is_error=True instead (see core/invoker.py).
# =============================================================================


class RegistryError(Exception):
    """Base class for capability registry errors."""


class UnknownToolError(RegistryError, LookupError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class DuplicateToolError(RegistryError, ValueError):
    """Raised when two tools are registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Tool already registered: {name}")


class RegistryFrozenError(RegistryError, RuntimeError):
    """Raised when registering after the registry has been frozen."""
