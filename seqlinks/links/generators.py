"""Link generators for external sequence databases.

Each generator takes a :class:`HitContext` and returns a
:class:`LinkDescriptor`, or ``None`` when neither the hit id nor its title
carries an identifier the database understands. Generators are pure: they
do not log, fetch or cache anything.

Use :func:`encode` on identifiers only, never on a whole URL.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional
from urllib.parse import quote

from seqlinks.links.descriptor import LinkDescriptor
from seqlinks.links.hit import HitContext
from seqlinks.utils.ids import (
    NCBI_ID_PATTERN,
    PFAM_ID_PATTERN,
    RFAM_ID_PATTERN,
    UNIPROT_ID_PATTERN,
    find_identifier,
)


EXTERNAL_LINK_ICON = "fa-external-link"
EXTERNAL_LINK_ORDER = 2

LinkGenerator = Callable[[HitContext], Optional[LinkDescriptor]]


def encode(value: str) -> str:
    """Percent-encode a query parameter; unreserved characters are kept."""
    return quote(value, safe="")


def ncbi(hit: HitContext) -> Optional[LinkDescriptor]:
    ncbi_id = find_identifier(NCBI_ID_PATTERN, hit.id, hit.title)
    if ncbi_id is None:
        return None
    url = f"https://www.ncbi.nlm.nih.gov/{hit.dbtype}/{encode(ncbi_id)}"
    return _external_link("NCBI", url)


def uniprot(hit: HitContext) -> Optional[LinkDescriptor]:
    uniprot_id = find_identifier(UNIPROT_ID_PATTERN, hit.id, hit.title)
    if uniprot_id is None:
        return None
    url = f"https://www.uniprot.org/uniprot/{encode(uniprot_id)}"
    return _external_link("UniProt", url)


def pfam(hit: HitContext) -> Optional[LinkDescriptor]:
    pfam_id = find_identifier(PFAM_ID_PATTERN, hit.id, hit.title)
    if pfam_id is None:
        return None
    url = f"https://pfam.xfam.org/family/{encode(pfam_id)}"
    return _external_link("Pfam", url)


def rfam(hit: HitContext) -> Optional[LinkDescriptor]:
    rfam_id = find_identifier(RFAM_ID_PATTERN, hit.id, hit.title)
    if rfam_id is None:
        return None
    url = f"https://rfam.xfam.org/family/{encode(rfam_id)}"
    return _external_link("Rfam", url)


def _external_link(title: str, url: str) -> LinkDescriptor:
    return LinkDescriptor(title=title, url=url, order=EXTERNAL_LINK_ORDER, icon=EXTERNAL_LINK_ICON)


LINK_GENERATORS: Mapping[str, LinkGenerator] = MappingProxyType(
    {
        "ncbi": ncbi,
        "uniprot": uniprot,
        "pfam": pfam,
        "rfam": rfam,
    }
)
