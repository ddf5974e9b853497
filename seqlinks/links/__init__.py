"""Link generation package exports."""

from .collect import links_for_hit, resolve_generators, sort_links
from .descriptor import LinkDescriptor
from .generators import LINK_GENERATORS, encode, ncbi, pfam, rfam, uniprot
from .hit import DBTYPES, HitContext

__all__ = [
    "DBTYPES",
    "HitContext",
    "LINK_GENERATORS",
    "LinkDescriptor",
    "encode",
    "links_for_hit",
    "ncbi",
    "pfam",
    "resolve_generators",
    "rfam",
    "sort_links",
    "uniprot",
]
