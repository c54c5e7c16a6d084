from __future__ import annotations

import pytest

from pedigree_engine.domain.models.parent_link import ParentLink
from pedigree_engine.domain.models.snapshot import PedigreeSnapshot
from pedigree_engine.domain.services.ancestry_builder import build_ancestry
from pedigree_engine.domain.services.relatedness import (
    classify_relationship,
    coefficient_of_inbreeding,
    path_contributions,
    shared_ancestors,
)
from pedigree_engine.domain.value_objects.relationship import Relationship
from pedigree_engine.domain.value_objects.sex import Sex


@pytest.fixture()
def snapshot(store) -> PedigreeSnapshot:
    return PedigreeSnapshot.of(store.all_individuals(), store.all_parent_links())


def trees(snapshot: PedigreeSnapshot, a: str, b: str, depth: int = 3):
    return build_ancestry(snapshot, a, depth).root, build_ancestry(snapshot, b, depth).root


@pytest.mark.parametrize(
    ("a", "b", "expected", "relationship"),
    [
        ("rex", "bella", 0.25, Relationship.FULL_SIBLINGS),
        ("bella", "max", 0.125, Relationship.HALF_SIBLINGS),
        ("pup", "rex", 0.25, Relationship.PARENT_OFFSPRING),
        ("pup", "sire1", 0.125, Relationship.ANCESTOR_DESCENDANT),
        ("luna", "duke", 0.0, Relationship.UNRELATED),
    ],
)
def test_reference_coefficients(snapshot, a, b, expected, relationship):
    tree_a, tree_b = trees(snapshot, a, b)

    assert coefficient_of_inbreeding(tree_a, tree_b) == expected
    assert classify_relationship(tree_a, tree_b) is relationship


def test_half_sibling_and_half_uncle_paths_add_up(snapshot):
    # pup and max share dam2 as a parent and sire1 is max's sire and pup's grandsire
    tree_a, tree_b = trees(snapshot, "pup", "max")

    contributions = path_contributions(tree_a, tree_b)

    assert sorted((c.ancestor_id, c.value) for c in contributions) == [
        ("dam2", 0.125),
        ("sire1", 0.0625),
    ]
    assert coefficient_of_inbreeding(tree_a, tree_b) == 0.1875


def test_paths_through_the_parent_are_not_double_counted(snapshot):
    tree_a, tree_b = trees(snapshot, "pup", "rex")

    contributions = path_contributions(tree_a, tree_b)

    assert [c.ancestor_id for c in contributions] == ["rex"]
    assert shared_ancestors(tree_a, tree_b) == ["dam1", "rex", "sire1"]


def test_coefficient_is_symmetric(snapshot):
    for a, b in [("pup", "max"), ("rex", "bella"), ("bella", "max"), ("luna", "rex")]:
        forward = coefficient_of_inbreeding(*trees(snapshot, a, b))
        backward = coefficient_of_inbreeding(*trees(snapshot, b, a))
        assert forward == backward


def test_coefficient_does_not_depend_on_insertion_order(store):
    individuals = store.all_individuals()
    links = store.all_parent_links()
    forward = PedigreeSnapshot.of(individuals, links)
    backward = PedigreeSnapshot.of(list(reversed(individuals)), list(reversed(links)))

    values = {
        coefficient_of_inbreeding(*trees(snap, "pup", "max", depth=4))
        for snap in (forward, backward, forward)
    }

    assert values == {0.1875}


def test_deeper_trees_never_lower_the_coefficient(snapshot):
    shallow = coefficient_of_inbreeding(*trees(snapshot, "pup", "max", depth=1))
    deep = coefficient_of_inbreeding(*trees(snapshot, "pup", "max", depth=4))

    assert shallow == 0.125
    assert deep == 0.1875


def test_missing_common_parent_record_still_counts(make_individual):
    # the shared sire has no record of its own, only an id on both links
    snapshot = PedigreeSnapshot.of(
        [make_individual("a", Sex.MALE), make_individual("b", Sex.FEMALE)],
        [
            ParentLink(child_id="a", sire_id="unknown-sire"),
            ParentLink(child_id="b", sire_id="unknown-sire"),
        ],
    )

    tree_a, tree_b = trees(snapshot, "a", "b")

    assert coefficient_of_inbreeding(tree_a, tree_b) == 0.125
    assert classify_relationship(tree_a, tree_b) is Relationship.HALF_SIBLINGS


def test_cycle_markers_do_not_contribute(make_individual):
    snapshot = PedigreeSnapshot.of(
        [make_individual("a", Sex.MALE), make_individual("b", Sex.FEMALE)],
        [ParentLink(child_id="a", sire_id="a")],
    )

    assert coefficient_of_inbreeding(*trees(snapshot, "a", "b")) == 0.0
