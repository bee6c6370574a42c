"""Swept AABB collision detection and a simple resolution framework.

Objects taking part expose ``x``, ``y``, ``vx``, ``vy``, ``is_deleted``,
``bounding_box()`` returning ``(left, top, right, bottom)`` and the
predicates and callbacks used by :meth:`Collision.process`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

BLOCK_PUSH_FACTOR = 0.01


@dataclass(eq=False)
class CollisionEvent:
    """A potential collision of src_obj with obj at time t in [0, 1] with normal (nx, ny)."""

    t: float
    nx: float
    ny: float
    dx: float = 0.0
    dy: float = 0.0
    obj: Any = None
    src_obj: Any = None
    is_deleted: bool = False

    def was_collided(self) -> bool:
        return 0.0 <= self.t <= 1.0 and self.obj.is_direction_collidable(self.nx, self.ny) == 1


def swept_aabb(ml: float, mt: float, mr: float, mb: float,
               dx: float, dy: float,
               sl: float, st: float, sr: float, sb: float) -> tuple[float, float, float]:
    """Sweep the moving box by (dx, dy) against the static box; return (t, nx, ny).

    t is -1 when there is no collision; overlapping boxes give (0, 0, 0).
    """
    if ml < sr and mr > sl and mt < sb and mb > st:
        return 0.0, 0.0, 0.0

    bl = ml if dx > 0 else ml + dx
    bt = mt if dy > 0 else mt + dy
    br = mr + dx if dx > 0 else mr
    bb = mb + dy if dy > 0 else mb
    if br < sl or bl > sr or bb < st or bt > sb:
        return -1.0, 0.0, 0.0

    if dx == 0 and dy == 0:
        return -1.0, 0.0, 0.0

    dx_entry = dx_exit = dy_entry = dy_exit = 0.0
    if dx > 0:
        dx_entry, dx_exit = sl - mr, sr - ml
    elif dx < 0:
        dx_entry, dx_exit = sr - ml, sl - mr
    if dy > 0:
        dy_entry, dy_exit = st - mb, sb - mt
    elif dy < 0:
        dy_entry, dy_exit = sb - mt, st - mb

    if dx == 0:
        tx_entry, tx_exit = -9999999.0, 99999999.0
    else:
        tx_entry, tx_exit = dx_entry / dx, dx_exit / dx
    if dy == 0:
        ty_entry, ty_exit = -99999999999.0, 99999999999.0
    else:
        ty_entry, ty_exit = dy_entry / dy, dy_exit / dy

    if (tx_entry < 0.0 and ty_entry < 0.0) or tx_entry > 1.0 or ty_entry > 1.0:
        return -1.0, 0.0, 0.0

    t_entry = max(tx_entry, ty_entry)
    t_exit = min(tx_exit, ty_exit)
    if t_entry > t_exit:
        return -1.0, 0.0, 0.0

    if tx_entry > ty_entry:
        return t_entry, (-1.0 if dx > 0 else 1.0), 0.0
    return t_entry, 0.0, (-1.0 if dy > 0 else 1.0)


class Collision:
    """Detects and resolves collisions of one moving object against others."""

    def sweep(self, src: Any, dt: float, dest: Any) -> CollisionEvent:
        """Sweep src against dest using their relative movement over dt."""
        dx = src.vx * dt - dest.vx * dt
        dy = src.vy * dt - dest.vy * dt
        ml, mt, mr, mb = src.bounding_box()
        sl, st, sr, sb = dest.bounding_box()
        t, nx, ny = swept_aabb(ml, mt, mr, mb, dx, dy, sl, st, sr, sb)
        return CollisionEvent(t, nx, ny, dx, dy, dest, src)

    def scan(self, src: Any, dt: float, dests: Iterable[Any]) -> list[CollisionEvent]:
        """Return the events of every object, other than src, that src hits."""
        events = []
        for dest in dests:
            if dest is src:
                continue
            event = self.sweep(src, dt, dest)
            if event.was_collided():
                events.append(event)
        return events

    def filter(self, events: Iterable[CollisionEvent], filter_block: bool = True,
               filter_x: bool = True, filter_y: bool = True
               ) -> tuple[Optional[CollisionEvent], Optional[CollisionEvent]]:
        """Return the earliest X-axis and Y-axis events (None where there is none).

        With filter_block only blocking objects count; filter_x and filter_y
        switch the search on each axis.
        """
        col_x: Optional[CollisionEvent] = None
        col_y: Optional[CollisionEvent] = None
        min_tx = min_ty = 1.0
        for event in events:
            if event.is_deleted or event.obj.is_deleted:
                continue
            if filter_block and not event.obj.is_blocking():
                continue
            if event.t < min_tx and event.nx != 0 and filter_x:
                min_tx, col_x = event.t, event
            if event.t < min_ty and event.ny != 0 and filter_y:
                min_ty, col_y = event.t, event
        return col_x, col_y

    def process(self, src: Any, dt: float, co_objects: Iterable[Any]) -> None:
        """Move src by its speed over dt, stopping at blocking objects and notifying it."""
        events = self.scan(src, dt, co_objects) if src.is_collidable() else []

        if not events:
            src.on_no_collision(dt)
        else:
            col_x, col_y = self.filter(events)
            x, y = src.x, src.y
            dx, dy = src.vx * dt, src.vy * dt

            if col_x is not None and col_y is not None and src.is_tangible():
                if col_y.t < col_x.t:
                    y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
                    src.x, src.y = x, y
                    src.on_collision_with(col_y)
                    col_x.is_deleted = True
                    events.append(self.sweep(src, dt, col_x.obj))
                    col_x_other, _ = self.filter(events, True, True, False)
                    if col_x_other is not None:
                        x += col_x_other.t * dx + col_x_other.nx * BLOCK_PUSH_FACTOR
                        src.on_collision_with(col_x_other)
                    else:
                        x += dx
                else:
                    x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
                    src.x, src.y = x, y
                    src.on_collision_with(col_x)
                    col_y.is_deleted = True
                    events.append(self.sweep(src, dt, col_y.obj))
                    _, col_y_other = self.filter(events, True, False, True)
                    if col_y_other is not None:
                        y += col_y_other.t * dy + col_y_other.ny * BLOCK_PUSH_FACTOR
                        src.on_collision_with(col_y_other)
                    else:
                        y += dy
            elif col_x is not None and src.is_tangible():
                x += col_x.t * dx + col_x.nx * BLOCK_PUSH_FACTOR
                y += dy
                src.on_collision_with(col_x)
            elif col_y is not None and src.is_tangible():
                x += dx
                y += col_y.t * dy + col_y.ny * BLOCK_PUSH_FACTOR
                src.on_collision_with(col_y)
            else:
                x += dx
                y += dy

            src.x, src.y = x, y

        for event in events:
            if event.is_deleted:
                continue
            if event.obj.is_blocking() and not src.is_tangible():
                continue
            src.on_collision_with(event)