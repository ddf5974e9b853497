from __future__ import annotations

import pytest

from seqlinks.links import (
    HitContext,
    LinkDescriptor,
    links_for_hit,
    resolve_generators,
    sort_links,
)


def test_links_for_hit_collects_every_match() -> None:
    hit = HitContext(id="gi|99|sp|P12345|", title="PF00001 RF00005", dbtype="protein")
    titles = [link.title for link in links_for_hit(hit)]
    assert titles == ["NCBI", "UniProt", "Pfam", "Rfam"]


def test_links_for_hit_skips_absent_links() -> None:
    hit = HitContext(id="contig_1", title="similar to PF00001", dbtype="nucleotide")
    assert [link.title for link in links_for_hit(hit)] == ["Pfam"]


def test_links_for_hit_with_selected_generators() -> None:
    hit = HitContext(id="gi|99|", title="PF00001", dbtype="nucleotide")
    links = links_for_hit(hit, resolve_generators(["pfam"]))
    assert [link.title for link in links] == ["Pfam"]


def test_resolve_generators_rejects_unknown_name() -> None:
    with pytest.raises(KeyError, match="genbank"):
        resolve_generators(["ncbi", "genbank"])


def test_resolve_generators_is_case_insensitive() -> None:
    assert list(resolve_generators([" NCBI", "Rfam"])) == ["ncbi", "rfam"]


def test_sort_links_orders_by_priority_and_puts_unordered_last() -> None:
    links = [
        LinkDescriptor(title="loose", url="https://example.org/a"),
        LinkDescriptor(title="second", url="https://example.org/b", order=2),
        LinkDescriptor(title="first", url="https://example.org/c", order=1),
        LinkDescriptor(title="second-too", url="https://example.org/d", order=2),
    ]
    assert [link.title for link in sort_links(links)] == ["first", "second", "second-too", "loose"]


def test_descriptor_dict_omits_unset_fields() -> None:
    link = LinkDescriptor(title="Local", url="https://example.org/x", css_class="btn btn-link")
    assert link.to_dict() == {"title": "Local", "url": "https://example.org/x", "class": "btn btn-link"}


def test_hit_rejects_unknown_dbtype() -> None:
    with pytest.raises(ValueError, match="dbtype"):
        HitContext(id="gi|1|", title="", dbtype="rna")


def test_hit_normalises_missing_text() -> None:
    hit = HitContext(id=None, title=None, dbtype="protein", whichdb=["swissprot.fa"])  # type: ignore[arg-type]
    assert hit.id == ""
    assert hit.title == ""
    assert hit.whichdb == ("swissprot.fa",)
    assert hit.coordinates is None


def test_resolve_generators_accepts_single_name() -> None:
    assert list(resolve_generators("pfam")) == ["pfam"]


def test_hit_keeps_single_database_name_whole() -> None:
    hit = HitContext(id="gi|1|", title="", dbtype="nucleotide", whichdb="swissprot.fa")  # type: ignore[arg-type]
    assert hit.whichdb == ("swissprot.fa",)
