"""Entity bookkeeping, deferred commands and level-layout helpers."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from .rng import Rng

logger = logging.getLogger(__name__)

MAX_ENTITIES = 1024
TAG_NONE = 0

_MASK64 = (1 << 64) - 1

DeferredCommand = Callable[["EntityManager"], None]


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def collides(self, other: Rectangle) -> bool:
        """Whether the two rectangles overlap."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )


class EntityManager:
    """Hands out entity indices, tracks each entity's component tags and runs deferred commands.

    Deallocated indices are reused most-recent first. Commands given to
    :meth:`defer` run on :meth:`flush`, the most recently deferred first.
    """

    def __init__(self, max_entities: int = MAX_ENTITIES) -> None:
        if max_entities <= 0:
            raise ValueError("max_entities must be positive")
        self.max_entities = max_entities
        self.tags = [TAG_NONE] * max_entities
        self.next_fresh_index = 0
        self.recycled: deque[int] = deque()
        self.deferred: list[DeferredCommand] = []

    @property
    def total_allocated(self) -> int:
        """How many indices have ever been handed out since the last reset."""
        return self.next_fresh_index

    def _check(self, entity: int) -> None:
        if not 0 <= entity < self.max_entities:
            raise IndexError(f"entity {entity} out of range")

    def allocate(self) -> int:
        """Return a free entity index, preferring recently deallocated ones."""
        if self.recycled:
            return self.recycled.popleft()
        index = min(self.next_fresh_index, self.max_entities - 1)
        self.next_fresh_index = min(self.next_fresh_index + 1, self.max_entities)
        if self.next_fresh_index == self.max_entities:
            logger.warning("Maximum amount of entities reached.")
        return index

    def has_dependencies(self, entity: int, dependencies: int) -> bool:
        """Whether the entity carries every tag in ``dependencies``."""
        self._check(entity)
        return (self.tags[entity] & dependencies) == dependencies

    def defer(self, fn: DeferredCommand) -> None:
        """Queue ``fn(manager)`` to run on the next flush."""
        self.deferred.append(fn)

    def defer_deallocate(self, entity: int) -> None:
        """Queue the entity's removal; its index becomes reusable after the flush."""
        self._check(entity)

        def command(manager: EntityManager) -> None:
            manager.tags[entity] = TAG_NONE
            manager.recycled.appendleft(entity)

        self.defer(command)

    def defer_enable_tag(self, entity: int, tag: int) -> None:
        """Queue adding ``tag`` to the entity's tags."""
        self._check(entity)

        def command(manager: EntityManager) -> None:
            manager.tags[entity] = (manager.tags[entity] | tag) & _MASK64

        self.defer(command)

    def defer_disable_tag(self, entity: int, tag: int) -> None:
        """Queue removing ``tag`` from the entity's tags."""
        self._check(entity)

        def command(manager: EntityManager) -> None:
            manager.tags[entity] &= ~tag & _MASK64

        self.defer(command)

    def defer_set_tag(self, entity: int, tag: int) -> None:
        """Queue replacing the entity's tags with ``tag``."""
        self._check(entity)

        def command(manager: EntityManager) -> None:
            manager.tags[entity] = tag & _MASK64

        self.defer(command)

    def flush(self) -> None:
        """Run the queued commands, most recently deferred first.

        Commands deferred while flushing wait for the next flush.
        """
        pending, self.deferred = self.deferred, []
        for command in reversed(pending):
            command(self)

    def reset(self) -> None:
        """Forget every entity and drop all queued commands."""
        self.tags = [TAG_NONE] * self.max_entities
        self.deferred.clear()
        self.next_fresh_index = 0
        self.recycled.clear()


def shuffled_range(rng: Rng, length: int) -> list[int]:
    """Return ``0..length-1`` in an order drawn from ``rng``."""
    if length < 0:
        raise ValueError("length must not be negative")
    candidates = list(range(length))
    result = []
    for i in range(length):
        end = length - 1 - i
        index = rng.next_range(0, end + 1)
        result.append(candidates.pop(index))
    return result


def camera_bounds(
    position: tuple[float, float],
    bounds: Rectangle,
    viewport_width: float,
    viewport_height: float,
) -> Rectangle:
    """A viewport-sized rectangle centred on ``position`` and kept inside ``bounds``.

    Where ``bounds`` is smaller than the viewport, the view is pinned to the
    right or bottom edge.
    """
    half_width = viewport_width * 0.5
    half_height = viewport_height * 0.5
    x, y = position

    x = max(bounds.left + half_width, x)
    x = min(bounds.right - half_width, x)
    y = max(bounds.top + half_height, y)
    y = min(bounds.bottom - half_height, y)

    return Rectangle(x - half_width, y - half_height, viewport_width, viewport_height)