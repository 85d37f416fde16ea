"""Fold decoded attribute records into style runs."""

from __future__ import annotations

import heapq
import logging
from collections.abc import Iterable
from dataclasses import dataclass, fields, replace
from typing import NamedTuple

from svg_markup2tspan.markup.attributes import AttributeRecord, AttrValue, StyleAttribute

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleState:
    """Formatting active at some offset. ``None`` means the dimension is not overridden."""

    rise: int | None = None
    scale: float | None = None
    style: int | None = None
    weight: int | None = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def updated(self, attribute: StyleAttribute, value: AttrValue) -> StyleState:
        """Return a copy with ``attribute`` set to ``value``."""
        if attribute in (StyleAttribute.RISE, StyleAttribute.STYLE, StyleAttribute.WEIGHT):
            value = int(value) if value is not None else None
        return replace(self, **{attribute.value: value})


class StyleRun(NamedTuple):
    """``state`` applies from byte ``start`` up to the next run (or end of text)."""

    start: int
    state: StyleState


def compact(records: Iterable[AttributeRecord]) -> list[StyleRun]:
    """Turn attribute records into an ordered list of style runs.

    Every offset where a modeled attribute starts or stops becomes one run
    whose state is built from the records covering it, applied in input
    order so that later records win. A run may be empty: that marks the
    point where formatting stops.

    Records for unmodeled kinds, records without a value and zero-length
    records do not contribute.
    """
    styled = [
        r for r in records
        if r.style_attribute is not None and r.value is not None and r.end > r.start
    ]
    if not styled:
        return []

    boundaries = sorted({r.start for r in styled} | {r.end for r in styled})
    by_start = sorted(range(len(styled)), key=lambda i: styled[i].start)
    by_end = sorted(range(len(styled)), key=lambda i: styled[i].end)

    # Per dimension, a max-heap of covering records by input position; the
    # top is the last write. Ended records are dropped lazily.
    active: dict[StyleAttribute, list[int]] = {}
    ended: set[int] = set()
    next_start = next_end = 0

    runs: list[StyleRun] = []
    for offset in boundaries:
        while next_start < len(by_start) and styled[by_start[next_start]].start <= offset:
            i = by_start[next_start]
            heapq.heappush(active.setdefault(styled[i].style_attribute, []), -i)
            next_start += 1
        while next_end < len(by_end) and styled[by_end[next_end]].end <= offset:
            ended.add(by_end[next_end])
            next_end += 1

        state = StyleState()
        for attribute, heap in active.items():
            while heap and -heap[0] in ended:
                heapq.heappop(heap)
            if heap:
                state = state.updated(attribute, styled[-heap[0]].value)
        runs.append(StyleRun(offset, state))

    logger.debug("Compacted %d records into %d runs", len(styled), len(runs))
    return runs
