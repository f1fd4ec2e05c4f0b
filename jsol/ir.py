"""Resolved program representation and the linker that produces it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List

from .parse import RawJsolModule, RawOperation


class Operation(enum.Enum):
    """A resolved operation."""

    NOP = "nop"

    @classmethod
    def resolve_operation(cls, ctx: "LinkContext", raw_op: RawOperation) -> "Operation":
        """Resolve a raw operation in the given link context."""
        if raw_op is RawOperation.NOP:
            return cls.NOP
        raise ValueError(f"cannot resolve operation {raw_op!r}")


@dataclass
class Module:
    """A module whose operations have been resolved."""

    operations: List[Operation] = field(default_factory=list)


@dataclass
class LinkContext:
    """Collects resolved modules in the order they are linked."""

    modules: List[Module] = field(default_factory=list)

    def resolve_module(self, module: RawJsolModule) -> None:
        """Resolve a raw module and add it to the context."""
        resolved = Module()
        if module.operations is not None:
            resolved.operations.extend(
                Operation.resolve_operation(self, op) for op in module.operations
            )
        self.modules.append(resolved)