from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TypeVar

    from ._identifier import Identifier

    T = TypeVar("T")

    Factory = Callable[["Container"], T]


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasBinding:
    resolve_to: Identifier[Any]


@dataclass(frozen=True)
class ConstantBinding:
    value: object


@dataclass(frozen=True)
class DynamicBinding:
    factory: Callable[[Container], object]


@dataclass(frozen=True)
class MemoizedBinding:
    factory: Callable[[Container], object]
    memoized: bool = False
    value: object = None  # set once `memoized` flips


Binding = AliasBinding | ConstantBinding | DynamicBinding | MemoizedBinding


class InvalidOperationError(ValueError):
    pass


class AliasCycleError(InvalidOperationError):
    def __init__(self, chain: tuple[Identifier[Any], ...]) -> None:
        self.chain = chain
        path = " -> ".join(repr(identifier.name) for identifier in chain)
        super().__init__(f"Alias cycle detected: {path}")


class NotFoundError(LookupError):
    def __init__(self, identifier: Identifier[Any]) -> None:
        self.identifier = identifier
        super().__init__(f"Dependency/alias {identifier.name!r} not found")


class Container:
    """Minimal DI container.

    - bind identifiers to constants, factories (per call or memoized) or aliases
    - resolve locally first, then through the parent chain
    - `is_bound` and `unbind` only ever look at the local registry.
    """

    def __init__(self, parent: Container | None = None) -> None:
        self._parent = parent
        self._registry: dict[Identifier[Any], Binding] = {}

    @property
    def parent(self) -> Container | None:
        return self._parent

    @parent.setter
    def parent(self, parent: Container | None) -> None:
        if parent is self:
            msg = "Could not self-link container"
            raise InvalidOperationError(msg)

        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                msg = "Could not link container: it is already an ancestor of the new parent"
                raise InvalidOperationError(msg)
            ancestor = ancestor._parent  # noqa: SLF001

        self._parent = parent

    def alias(self, identifier: Identifier[T], resolve_to: Identifier[T]) -> Container:
        """Resolve `identifier` as whatever `resolve_to` resolves to in this container."""
        if identifier is resolve_to:
            msg = f"Could not self-link dependency {identifier.name!r}"
            raise InvalidOperationError(msg)

        return self._bind(identifier, AliasBinding(resolve_to=resolve_to))

    def bind_constant(self, identifier: Identifier[T], value: T) -> Container:
        return self._bind(identifier, ConstantBinding(value=value))

    def bind_dynamic(self, identifier: Identifier[T], factory: Factory[T]) -> Container:
        """Register a factory called with this container on every `resolve`."""
        return self._bind(identifier, DynamicBinding(factory=factory))

    def bind_memoized(self, identifier: Identifier[T], factory: Factory[T]) -> Container:
        """Register a factory called on the first `resolve` only.

        Rebinding the identifier discards the cached value.
        """
        return self._bind(identifier, MemoizedBinding(factory=factory))

    def is_bound(self, identifier: Identifier[Any]) -> bool:
        return identifier in self._registry

    def resolve(self, identifier: Identifier[T]) -> T:
        """Resolve the identifier to a value.

        Resolution precedence:
        1. local binding (aliases are followed within this container)
        2. parent container, recursively
        3. `NotFoundError`.
        """
        return self._resolve(identifier, ())

    def unbind(self, identifier: Identifier[Any]) -> Container:
        if self._registry.pop(identifier, None) is not None:
            logger.debug("Unbound %r", identifier)
        return self

    def _bind(self, identifier: Identifier[Any], binding: Binding) -> Container:
        if identifier in self._registry:
            logger.debug("Overwriting binding for %r", identifier)
        self._registry[identifier] = binding
        logger.debug("Bound %r as %s", identifier, type(binding).__name__)
        return self

    def _resolve(self, identifier: Identifier[Any], aliasing: tuple[Identifier[Any], ...]) -> Any:
        binding = self._registry.get(identifier)

        if binding is None:
            if self._parent is not None:
                logger.debug("%r not bound locally, falling back to parent", identifier)
                return self._parent.resolve(identifier)
            raise NotFoundError(identifier)

        if isinstance(binding, AliasBinding):
            if identifier in aliasing:
                raise AliasCycleError((*aliasing[aliasing.index(identifier) :], identifier))
            return self._resolve(binding.resolve_to, (*aliasing, identifier))

        if isinstance(binding, ConstantBinding):
            return binding.value

        if isinstance(binding, DynamicBinding):
            return binding.factory(self)

        if binding.memoized:
            return binding.value

        value = binding.factory(self)
        self._registry[identifier] = dataclasses.replace(binding, memoized=True, value=value)
        logger.debug("Memoized %r", identifier)
        return value
