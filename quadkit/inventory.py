"""Equipment slots filled from a bought-items inventory by drag-and-drop commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """An equipment slot that holds at most one item."""

    id: int
    label: str
    item: str | None = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from the target slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an item from the inventory into the target slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item of the origin slot into the target slot."""

    target_slot: int
    origin_slot: int


FittingCommand = Unfit | Fit | Refit


class Inventory:
    """Bought items plus a row of labelled slots they can be fitted into."""

    def __init__(self, labels: Iterable[str] = DEFAULT_SLOT_LABELS) -> None:
        self.items: list[str] = []
        self.slots: list[Slot] = [Slot(index, label) for index, label in enumerate(labels)]

    def buy(self, item: str) -> None:
        """Add a bought item to the inventory."""
        self.items.append(item)

    def _find(self, slot_id: int) -> Slot | None:
        return next((slot for slot in self.slots if slot.id == slot_id), None)

    def slot(self, slot_id: int) -> Slot:
        """The slot with the given id."""
        found = self._find(slot_id)
        if found is None:
            raise KeyError(slot_id)
        return found

    def set_item(self, slot_id: int, item: str | None) -> None:
        """Put item (or nothing) into the slot; unknown ids are ignored."""
        found = self._find(slot_id)
        if found is not None:
            found.item = item

    def apply(self, command: FittingCommand) -> None:
        """Carry out a fitting command."""
        match command:
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self._find(origin)
                origin_item = origin_slot.item if origin_slot is not None else None
                self.set_item(target, origin_item)
                self.set_item(origin, None)
            case _:
                raise TypeError(f"unknown fitting command: {command!r}")