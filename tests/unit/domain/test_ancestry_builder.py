from __future__ import annotations

from datetime import date

import pytest

from pedigree_engine.domain.models.ancestry import NodeFlag
from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.domain.models.snapshot import PedigreeSnapshot
from pedigree_engine.domain.services.ancestry_builder import build_ancestry
from pedigree_engine.domain.value_objects.ancestry_role import AncestryRole
from pedigree_engine.domain.value_objects.link_status import LinkStatus
from pedigree_engine.domain.value_objects.sex import Sex


def test_parent_born_after_child_is_flagged(make_individual):
    snapshot = PedigreeSnapshot.of(
        [
            make_individual("child", Sex.FEMALE, born=date(2024, 1, 1)),
            make_individual("sire", Sex.MALE, born=date(2024, 6, 1)),
            make_individual("dam", Sex.FEMALE, born=date(2020, 6, 1)),
        ],
        [ParentLink(child_id="child", sire_id="sire", dam_id="dam")],
    )

    result = build_ancestry(snapshot, "child", 3)

    assert result.root.sire.individual_id == "sire"
    assert NodeFlag.BIRTH_DATE_INCONSISTENT in result.root.sire.flags
    assert NodeFlag.BIRTH_DATE_INCONSISTENT not in result.root.dam.flags
    assert result.root.has_flag(NodeFlag.BIRTH_DATE_INCONSISTENT)


def test_same_birth_date_is_inconsistent(make_individual):
    snapshot = PedigreeSnapshot.of(
        [
            make_individual("child", Sex.FEMALE, born=date(2024, 1, 1)),
            make_individual("sire", Sex.MALE, born=date(2024, 1, 1)),
        ],
        [ParentLink(child_id="child", sire_id="sire")],
    )

    result = build_ancestry(snapshot, "child", 1)

    assert result.root.sire.flags == [NodeFlag.BIRTH_DATE_INCONSISTENT]


def test_own_grandparent_cycle_is_truncated(make_individual):
    snapshot = PedigreeSnapshot.of(
        [
            make_individual("a", Sex.MALE),
            make_individual("b", Sex.MALE, born=None),
        ],
        [
            ParentLink(child_id="a", sire_id="b"),
            ParentLink(child_id="b", sire_id="a"),
        ],
    )

    result = build_ancestry(snapshot, "a", 5)

    sire = result.root.sire
    assert sire.individual_id == "b"
    marker = sire.sire
    assert marker.individual_id == "a"
    assert marker.is_cycle_marker
    assert marker.sire is None and marker.dam is None
    assert [(d.code, d.individual_id) for d in result.diagnostics] == [
        (NodeFlag.ANCESTOR_CYCLE, "a")
    ]
    assert result.diagnostics[0].kind == "structural_anomaly"
    # the cycle marker is not treated as a real ancestor
    assert result.root.ancestor_ids() == {"b"}


def test_self_parent_is_reported_as_cycle(make_individual):
    snapshot = PedigreeSnapshot.of(
        [make_individual("a", Sex.MALE)],
        [ParentLink(child_id="a", sire_id="a")],
    )

    result = build_ancestry(snapshot, "a", 3)

    assert result.root.sire.is_cycle_marker
    assert len(result.diagnostics) == 1


def test_missing_parents_become_unknown_leaves(make_individual):
    snapshot = PedigreeSnapshot.of(
        [make_individual("solo", Sex.FEMALE)],
        [ParentLink(child_id="solo", sire_id="ghost")],
    )

    result = build_ancestry(snapshot, "solo", 3)

    sire, dam = result.root.sire, result.root.dam
    assert sire.individual_id == "ghost"
    assert sire.is_unknown
    assert sire.flags == [NodeFlag.UNKNOWN_ANCESTOR]
    assert sire.sire is None and sire.dam is None
    assert dam.individual_id is None
    assert dam.is_unknown
    assert dam.role is AncestryRole.DAM
    assert dam.depth == 1


def test_founder_without_link_has_two_unknown_parents(make_individual):
    snapshot = PedigreeSnapshot.of([make_individual("founder", Sex.MALE)])

    result = build_ancestry(snapshot, "founder", 2)

    assert [child.is_unknown for child in result.root.children()] == [True, True]
    assert result.diagnostics == []


def test_rejected_links_are_not_followed_and_pending_are_flagged(make_individual):
    snapshot = PedigreeSnapshot.of(
        [
            make_individual("pup", Sex.FEMALE, born=date(2023, 1, 1)),
            make_individual("claimed", Sex.MALE, born=date(2019, 1, 1)),
            make_individual("mum", Sex.FEMALE, born=date(2019, 1, 1)),
        ],
        [
            ParentLink(
                child_id="pup",
                sire_id="claimed",
                dam_id="mum",
                sire_status=LinkStatus.REJECTED,
                dam_status=LinkStatus.PENDING,
            )
        ],
    )

    result = build_ancestry(snapshot, "pup", 2)

    assert result.root.sire.individual_id is None
    assert result.root.sire.is_unknown
    assert result.root.dam.individual_id == "mum"
    assert result.root.dam.flags == [NodeFlag.LINK_PENDING]
    assert result.root.ancestor_ids() == {"mum"}


def test_tree_stops_at_max_depth(make_individual):
    ids = ["g0", "g1", "g2", "g3", "g4"]
    individuals = [
        make_individual(ident, Sex.MALE, born=date(2020 - 3 * n, 1, 1))
        for n, ident in enumerate(ids)
    ]
    links = [ParentLink(child_id=child, sire_id=parent) for child, parent in zip(ids, ids[1:])]
    snapshot = PedigreeSnapshot.of(individuals, links)

    result = build_ancestry(snapshot, "g0", 2)

    depths = {node.individual_id: node.depth for node in result.root.iter_nodes() if node.individual_id}
    assert depths == {"g0": 0, "g1": 1, "g2": 2}
    deepest = result.root.find("g2")
    assert deepest.sire is None and deepest.dam is None
    assert max(node.depth for node in result.root.iter_nodes()) == 2


def test_depth_and_focal_are_validated(make_individual):
    snapshot = PedigreeSnapshot.of([make_individual("a", Sex.MALE)])

    with pytest.raises(ValueError):
        build_ancestry(snapshot, "a", 0)
    with pytest.raises(LookupError):
        build_ancestry(snapshot, "missing", 3)
