"""Read-only view of a search hit as seen by link generators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


DBTYPES = ("nucleotide", "protein")

Coordinates = Tuple[Tuple[int, int], Tuple[int, int]]


@dataclass(frozen=True)
class HitContext:
    """Identifier and title of a hit plus the search it came from.

    ``whichdb`` lists the databases the hit may have originated from and
    ``coordinates`` holds the min alignment start and max alignment end for
    the query and the hit, in that order.
    """

    id: str
    title: str
    dbtype: str
    whichdb: Tuple[str, ...] = field(default_factory=tuple)
    coordinates: Optional[Coordinates] = None

    def __post_init__(self) -> None:
        if self.dbtype not in DBTYPES:
            raise ValueError(f"dbtype must be one of {', '.join(DBTYPES)}; got {self.dbtype!r}")
        object.__setattr__(self, "id", self.id or "")
        object.__setattr__(self, "title", self.title or "")
        whichdb = (self.whichdb,) if isinstance(self.whichdb, str) else tuple(self.whichdb)
        object.__setattr__(self, "whichdb", whichdb)
