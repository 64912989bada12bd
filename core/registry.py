# =============================================================================
# core/registry.py: Capability Registry
# =============================================================================
#
# Name -> Tool lookup for the inbound protocol.  Populated once at startup,
# then frozen; from then on it is only read, so concurrent calls can share it
# without locking.  Iteration follows registration order.
# =============================================================================

from typing import Iterator, Optional

from core.catalog import Tool, build_catalog
from core.errors import DuplicateToolError, RegistryFrozenError, UnknownToolError
from core.invoker import ToolInvoker
from core.models import OutputRecord


class CapabilityRegistry:
    def __init__(self, invoker: ToolInvoker):
        self._invoker = invoker
        self._tools: dict[str, Tool] = {}
        self._frozen = False

    def register(self, tool: Tool) -> None:
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {tool.name}: registry is frozen")
        if tool.name in self._tools:
            raise DuplicateToolError(tool.name)
        self._tools[tool.name] = tool

    def freeze(self) -> "CapabilityRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def names(self) -> list[str]:
        return list(self._tools)

    def definitions(self) -> list[Tool]:
        return list(self._tools.values())

    def __iter__(self) -> Iterator[Tool]:
        return iter(self.definitions())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    async def invoke(self, name: str, raw_input: Optional[dict] = None) -> OutputRecord:
        """Look up a tool by name and run it.  Raises UnknownToolError."""
        return await self._invoker.invoke(self.get(name), raw_input)


def build_registry(invoker: ToolInvoker) -> CapabilityRegistry:
    """Register the full catalog and freeze the registry."""
    registry = CapabilityRegistry(invoker)
    for tool in build_catalog():
        registry.register(tool)
    return registry.freeze()
