"""FastAPI service returning outbound links for a hit."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from seqlinks.links import HitContext, links_for_hit

app = FastAPI(title="Sequence hit links")
LOGGER = logging.getLogger(__name__)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/links")
def links_endpoint(payload: Dict[str, Any]) -> Dict[str, Any]:
    try:
        hit = HitContext(
            id=str(payload.get("id") or ""),
            title=str(payload.get("title") or ""),
            dbtype=payload.get("dbtype", "nucleotide"),
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    links = [link.to_dict() for link in links_for_hit(hit)]
    LOGGER.info("Generated %s links for hit %s", len(links), hit.id)
    return {"links": links}
