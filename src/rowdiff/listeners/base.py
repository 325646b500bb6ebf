"""
Observer contracts for diff events.

DiffListener is the raw contract: one callback receiving every result in
emission order. DiffHandler is the typed view with one callback per entity
kind. DiffListenerAdapter turns a handler into a listener.
"""

from abc import ABC, abstractmethod

from ..result import EntityType, MatchResult


class DiffListener(ABC):
    """Receives every MatchResult emitted by a diff, in emission order."""

    @abstractmethod
    def on_event(self, result: MatchResult) -> None:
        """
        Handle one emitted result.

        Args:
            result: Shared, immutable result; must not be mutated
        """
        pass


class DiffHandler(ABC):
    """Typed callbacks for cell-level and row-level completion."""

    @abstractmethod
    def end_cell(self, result: MatchResult) -> None:
        pass

    @abstractmethod
    def end_row(self, result: MatchResult) -> None:
        pass


class DiffListenerAdapter(DiffListener):
    """
    Routes raw events to a DiffHandler by entity type.

    Delivery is synchronous and 1:1: nothing is buffered, dropped or
    reordered.
    """

    def __init__(self, handler: DiffHandler):
        self.handler = handler

    def on_event(self, result: MatchResult) -> None:
        entity_type = result.entity_type
        if entity_type is EntityType.CELL:
            self.handler.end_cell(result)
        elif entity_type is EntityType.ROW:
            self.handler.end_row(result)
        else:
            raise TypeError(f"Unsupported entity type: {entity_type!r}")

    def __repr__(self) -> str:
        return f"DiffListenerAdapter({self.handler!r})"


def as_listener(target: DiffListener | DiffHandler) -> DiffListener:
    """
    Coerce a listener or handler into a DiffListener.

    Duck-typed objects are accepted: anything with on_event is used as is,
    anything with end_cell and end_row is wrapped in an adapter.

    Raises:
        TypeError: If the object offers neither capability
    """
    if callable(getattr(target, "on_event", None)):
        return target
    if callable(getattr(target, "end_cell", None)) and callable(getattr(target, "end_row", None)):
        return DiffListenerAdapter(target)
    raise TypeError(
        f"{type(target).__name__} is neither a DiffListener nor a DiffHandler"
    )
