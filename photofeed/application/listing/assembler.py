"""Listing assembler: enrich a raw page with per-viewer flags and counts."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

from photofeed.application.interfaces.repositories import IRelationshipResolver
from photofeed.application.listing.pagination import Page
from photofeed.domain.enums import CountKind, RelationKind
from photofeed.shared.telemetry import traced

R = TypeVar("R")
T = TypeVar("T")


@dataclass(frozen=True)
class Enrichment:
    """Resolved flags and counts for one subject."""

    flags: Mapping[RelationKind, bool] = field(default_factory=dict)
    counts: Mapping[CountKind, int] = field(default_factory=dict)

    def flag(self, kind: RelationKind) -> bool:
        return self.flags.get(kind, False)

    def count(self, kind: CountKind) -> int:
        return self.counts.get(kind, 0)


class ListingAssembler:
    """Attach relationship flags and counts to every item of a page.

    Each requested kind costs one batched query for the whole page. Any
    resolver failure propagates and no partial page is returned.
    """

    def __init__(self, resolver: IRelationshipResolver) -> None:
        self._resolver = resolver

    @traced("listing.assemble")
    async def assemble(
        self,
        *,
        viewer_id: str,
        page: Page[R],
        subject_id_of: Callable[[R], str],
        build: Callable[[R, Enrichment], T],
        relations: Sequence[RelationKind] = (),
        counts: Sequence[CountKind] = (),
    ) -> Page[T]:
        """Resolve enrichment for page.items and build the output items in order."""
        subject_ids = [subject_id_of(row) for row in page.items]
        flags = (
            await self._resolver.resolve(
                viewer_id=viewer_id, subject_ids=subject_ids, kinds=relations
            )
            if relations
            else {}
        )
        totals = (
            await self._resolver.count(subject_ids=subject_ids, kinds=counts)
            if counts
            else {}
        )
        items = [
            build(
                row,
                Enrichment(
                    flags=flags.get(subject_id, {}),
                    counts=totals.get(subject_id, {}),
                ),
            )
            for row, subject_id in zip(page.items, subject_ids, strict=True)
        ]
        return page.with_items(items)
