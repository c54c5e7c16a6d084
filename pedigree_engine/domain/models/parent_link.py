from __future__ import annotations

from dataclasses import dataclass

from pedigree_engine.domain.value_objects.ancestry_role import AncestryRole
from pedigree_engine.domain.value_objects.link_status import LinkStatus


@dataclass(frozen=True, slots=True)
class ParentLink:
    child_id: str
    sire_id: str | None = None
    dam_id: str | None = None
    sire_status: LinkStatus = LinkStatus.VERIFIED
    dam_status: LinkStatus = LinkStatus.VERIFIED

    def parent(self, role: AncestryRole) -> tuple[str | None, LinkStatus]:
        if role is AncestryRole.SIRE:
            return self.sire_id, self.sire_status
        if role is AncestryRole.DAM:
            return self.dam_id, self.dam_status
        raise ValueError(f"Unsupported parent role: {role}")

    def followed_parent_ids(self) -> list[str]:
        """Parent ids that ancestry traversal should resolve (rejected links are skipped)."""
        ids: list[str] = []
        if self.sire_id and self.sire_status.is_followed():
            ids.append(self.sire_id)
        if self.dam_id and self.dam_status.is_followed():
            ids.append(self.dam_id)
        return ids
