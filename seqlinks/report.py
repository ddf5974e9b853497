"""Decorate a table of search hits with outbound database links."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Mapping, Optional

import pandas as pd

from seqlinks.links import HitContext, resolve_generators, sort_links
from seqlinks.links.generators import LinkGenerator
from seqlinks.utils.config import load_config
from seqlinks.utils.io import read_hits, write_dataframe
from seqlinks.utils.logging import setup_logging


LOGGER = logging.getLogger(__name__)


def decorate_hits(
    df: pd.DataFrame, dbtype: str, generators: Optional[Mapping[str, LinkGenerator]] = None
) -> pd.DataFrame:
    missing = {"id", "title"} - set(df.columns)
    if missing:
        raise KeyError(f"Hits table missing columns: {', '.join(sorted(missing))}")

    generators = resolve_generators() if generators is None else generators
    df = df.copy()

    url_columns = {name: [] for name in generators}
    link_column = []
    for seq_id, title in zip(df["id"], df["title"]):
        hit = HitContext(id=_cell(seq_id), title=_cell(title), dbtype=dbtype)
        found = []
        for name, generator in generators.items():
            link = generator(hit)
            url_columns[name].append(link.url if link else "")
            if link is not None:
                found.append(link)
        link_column.append([link.to_dict() for link in sort_links(found)])

    for name, urls in url_columns.items():
        df[f"{name}_url"] = urls
    df["links"] = link_column
    return df


def _cell(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Add NCBI/UniProt/Pfam/Rfam links to a table of hits")
    parser.add_argument("--config", default="configs/default.yaml")
    parser.add_argument("--hits", required=True, help="CSV or TSV with 'id' and 'title' columns")
    parser.add_argument("--dbtype", choices=["nucleotide", "protein"])
    parser.add_argument("--output")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    cfg = load_config(args.config)
    setup_logging(cfg.get("paths.log_dir", "logs"), cfg.get("logging.level", logging.INFO))

    dbtype = args.dbtype or cfg.get("report.default_dbtype", "nucleotide")
    generators = resolve_generators(cfg.get("links.enabled"))
    output = Path(args.output or Path(cfg.get("paths.output_dir", "data/reports")) / "hits_with_links.csv")

    hits = read_hits(args.hits)
    LOGGER.info("Loaded %s hits from %s", len(hits), args.hits)

    decorated = decorate_hits(hits, dbtype, generators)
    linked = sum(1 for links in decorated["links"] if links)
    LOGGER.info("%s of %s hits received at least one link", linked, len(decorated))

    write_dataframe(decorated.assign(links=decorated["links"].map(json.dumps)), output, index=False)
    LOGGER.info("Wrote decorated hits to %s", output)


if __name__ == "__main__":  # pragma: no cover
    main()
