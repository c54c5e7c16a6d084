from __future__ import annotations

from enum import Enum


class Relationship(str, Enum):
    SELF = "self"
    PARENT_OFFSPRING = "parent_offspring"
    ANCESTOR_DESCENDANT = "ancestor_descendant"
    FULL_SIBLINGS = "full_siblings"
    HALF_SIBLINGS = "half_siblings"
    RELATED = "related"
    UNRELATED = "unrelated"

    def is_lineal(self) -> bool:
        return self in {
            Relationship.SELF,
            Relationship.PARENT_OFFSPRING,
            Relationship.ANCESTOR_DESCENDANT,
        }

    def is_sibling(self) -> bool:
        return self in {Relationship.FULL_SIBLINGS, Relationship.HALF_SIBLINGS}
