from __future__ import annotations

from typing import Dict, List, Optional

from seqlinks.links import HitContext, links_for_hit, resolve_generators
from seqlinks.utils.config import load_config


def generate_links(seq_id: str, title: str, dbtype: str, config_path: Optional[str] = None) -> List[Dict]:
    """Return link dicts for one hit, limited to ``links.enabled`` when a config is given."""
    enabled = load_config(config_path).get("links.enabled") if config_path else None
    hit = HitContext(id=seq_id, title=title, dbtype=dbtype)
    return [link.to_dict() for link in links_for_hit(hit, resolve_generators(enabled))]
