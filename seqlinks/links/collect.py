"""Run link generators over a hit."""

from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from seqlinks.links.descriptor import LinkDescriptor
from seqlinks.links.generators import LINK_GENERATORS, LinkGenerator
from seqlinks.links.hit import HitContext


LOGGER = logging.getLogger(__name__)


def resolve_generators(names: Optional[Iterable[str]] = None) -> Mapping[str, LinkGenerator]:
    if names is None:
        return LINK_GENERATORS

    if isinstance(names, str):
        names = (names,)

    selected = {}
    for name in names:
        key = name.strip().lower()
        if key not in LINK_GENERATORS:
            raise KeyError(f"Unknown link generator '{name}'; known: {', '.join(LINK_GENERATORS)}")
        selected[key] = LINK_GENERATORS[key]
    return selected


def links_for_hit(
    hit: HitContext, generators: Optional[Mapping[str, LinkGenerator]] = None
) -> List[LinkDescriptor]:
    """Return the links of every generator that recognised the hit, sorted by order."""
    generators = LINK_GENERATORS if generators is None else generators

    links: List[LinkDescriptor] = []
    for name, generator in generators.items():
        link = generator(hit)
        if link is None:
            LOGGER.debug("No %s link for hit %s", name, hit.id)
            continue
        links.append(link)

    return sort_links(links)


def sort_links(links: Iterable[LinkDescriptor]) -> List[LinkDescriptor]:
    # Unordered links go last; sorted() keeps insertion order within a tier.
    return sorted(links, key=lambda link: (link.order is None, link.order or 0))
