"""Minimal dependency injection library.

This package provides a small registry that maps opaque, type-tagged identifiers
to values bound as constants, per-call factories, memoized factories or aliases,
with optional fallback to a parent container.

Exports:
- `Identifier`: Opaque registry key carrying a name and a static value type.
- `Container`: Registry supporting binding, aliasing and resolution through a
  parent chain.
- `InvalidOperationError`: Raised for self-linked parents and self-aliases.
- `AliasCycleError`: Raised when aliases loop back on themselves during resolution.
- `NotFoundError`: Raised when nothing is bound through the whole parent chain.
"""

from ._container import AliasCycleError, Container, InvalidOperationError, NotFoundError
from ._identifier import Identifier


__all__ = ["AliasCycleError", "Container", "Identifier", "InvalidOperationError", "NotFoundError"]
