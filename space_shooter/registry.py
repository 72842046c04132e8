"""
Entity registry with two-phase removal
"""

from __future__ import annotations

import itertools
import logging
from typing import Dict, Iterator, List, Optional, Union

from .entities import Body, BodyKind

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Owns every live body, keyed by id.

    ``remove()`` only queues an id; the mapping is not mutated until
    ``flush()`` runs at the end of a tick, so update and collision passes never
    see a body disappear mid-scan. Iteration follows insertion order.
    """

    def __init__(self):
        self._bodies: Dict[int, Body] = {}
        self._pending_removal: List[int] = []
        self._ids = itertools.count()

    def next_id(self) -> int:
        return next(self._ids)

    def add(self, body: Body) -> Body:
        if body.id in self._bodies:
            raise ValueError(f"Body id {body.id} is already registered")
        self._bodies[body.id] = body
        return body

    def remove(self, body: Union[Body, int]) -> None:
        """Queue a body for deletion at the next flush. Repeats are harmless."""
        body_id = body.id if isinstance(body, Body) else body
        self._pending_removal.append(body_id)

    def is_pending_removal(self, body: Union[Body, int]) -> bool:
        body_id = body.id if isinstance(body, Body) else body
        return body_id in self._pending_removal

    def flush(self) -> int:
        """Delete all queued ids and clear the queue. Returns the number deleted."""
        removed = 0
        for body_id in self._pending_removal:
            if self._bodies.pop(body_id, None) is not None:
                removed += 1
        self._pending_removal.clear()
        if removed:
            logger.debug("Flushed %d bodies", removed)
        return removed

    def get(self, body_id: int) -> Optional[Body]:
        return self._bodies.get(body_id)

    def bodies(self) -> List[Body]:
        """Stable snapshot of the live bodies for one pass"""
        return list(self._bodies.values())

    def of_kind(self, *kinds: BodyKind) -> List[Body]:
        return [b for b in self._bodies.values() if b.kind in kinds]

    @property
    def pending_removal(self) -> List[int]:
        return list(self._pending_removal)

    def __contains__(self, body: Union[Body, int]) -> bool:
        body_id = body.id if isinstance(body, Body) else body
        return body_id in self._bodies

    def __iter__(self) -> Iterator[Body]:
        return iter(self.bodies())

    def __len__(self) -> int:
        return len(self._bodies)
