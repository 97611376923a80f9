"""
Event scheduling - unordered emissions to a deterministic timeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from text2midi.compiler.events import Event


def order_events(events: Iterable[Event]) -> list[Event]:
    """
    Order events by (time, priority, source_index).

    At the same tick, tempo changes come first, then note-offs, then
    note-ons, so back-to-back notes on one pitch release before they
    retrigger. Remaining ties follow emission order, which makes the
    output independent of sort stability.
    """
    return sorted(events, key=lambda event: event.sort_key)
