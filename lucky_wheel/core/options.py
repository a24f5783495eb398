"""
Wheel Options
=============
The ordered list of choices on the wheel.
"""

import itertools
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from lucky_wheel.config import PALETTE, MIN_ITEMS, MAX_ITEMS, DEFAULT_LABELS


@dataclass(frozen=True)
class Option:
    """One slice of the wheel"""
    id: str
    label: str
    color: Tuple[int, int, int]


class OptionList:
    """
    Editable option list.

    Labels are trimmed, empty labels are rejected, the list never grows
    past MAX_ITEMS and never shrinks below MIN_ITEMS through remove().
    """

    def __init__(self, labels: Optional[List[str]] = None):
        self._items: List[Option] = []
        self._ids = itertools.count(1)
        for label in labels or []:
            self.add(label)

    @classmethod
    def with_defaults(cls) -> "OptionList":
        return cls(DEFAULT_LABELS)

    def add(self, label: str) -> Optional[Option]:
        """Append an option; returns None if the label or the list is not acceptable"""
        label = (label or "").strip()
        if not label or self.is_full:
            return None

        option = Option(
            id=str(next(self._ids)),
            label=label,
            color=PALETTE[len(self._items) % len(PALETTE)],
        )
        self._items.append(option)
        return option

    def remove(self, option_id: str) -> bool:
        if len(self._items) <= MIN_ITEMS:
            return False

        for index, option in enumerate(self._items):
            if option.id == option_id:
                del self._items[index]
                return True
        return False

    def replace_all(self, labels: List[str]) -> int:
        """Swap in a new set of labels (e.g. suggestions), return how many were kept"""
        cleaned = [label.strip() for label in labels if label and label.strip()]
        if len(cleaned) < MIN_ITEMS:
            return 0

        self._items.clear()
        for label in cleaned[:MAX_ITEMS]:
            self.add(label)
        return len(self._items)

    def snapshot(self) -> Tuple[Option, ...]:
        """Immutable view handed to a spin"""
        return tuple(self._items)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= MAX_ITEMS

    @property
    def can_spin(self) -> bool:
        return len(self._items) >= MIN_ITEMS

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Option:
        return self._items[index]
