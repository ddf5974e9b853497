"""Sequence identifier patterns."""

from __future__ import annotations

import re
from typing import Optional, Pattern


NCBI_ID_PATTERN = re.compile(r"gi\|(\d+)\|", re.ASCII)
UNIPROT_ID_PATTERN = re.compile(r"sp\|(\w+)\|", re.ASCII)
PFAM_ID_PATTERN = re.compile(r"(PF\d{5}\.?\d*)", re.ASCII)
RFAM_ID_PATTERN = re.compile(r"(RF\d{5})", re.ASCII)


def find_identifier(pattern: Pattern[str], seq_id: str | None, title: str | None) -> Optional[str]:
    """Return the first capture group of ``pattern`` in ``seq_id``, else in ``title``.

    The title is only searched when the id does not match.
    """
    for text in (seq_id, title):
        if not text:
            continue
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None
