"""Named child logger registry"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from dispatchlog.core.logger import Logger


class ChildRegistry:
    """
    Maps child names to loggers derived from one parent.

    Only one child is ever stored per name. Concurrent first requests
    may each build a candidate; the first insert wins and every caller
    gets the stored instance back.

    Thread Safety:
        Lookups and inserts are guarded by an internal lock.
    """

    def __init__(self):
        self._children: Dict[str, "Logger"] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional["Logger"]:
        """Get a child by name, or None."""
        with self._lock:
            return self._children.get(name)

    def get_or_add(self, name: str, parent: "Logger") -> "Logger":
        """
        Get the child called ``name``, creating it from ``parent`` on first use.

        The child's prefix is ``name + ": "``, or ``name`` unchanged when
        it already ends in whitespace.

        Raises:
            ValueError: If name is empty
        """
        if not name:
            raise ValueError("child name must not be empty")

        existing = self.get(name)
        if existing is not None:
            return existing

        child = parent.clone()
        child.set_prefix(child_prefix(name))

        with self._lock:
            # First writer wins, a losing clone is simply dropped
            return self._children.setdefault(name, child)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._children)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._children

    def __len__(self) -> int:
        with self._lock:
            return len(self._children)


def child_prefix(name: str) -> str:
    """Prefix used for a child called ``name``."""
    if name[-1].isspace():
        return name
    return name + ": "
