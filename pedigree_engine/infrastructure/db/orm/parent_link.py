from __future__ import annotations

from sqlalchemy import CheckConstraint, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from pedigree_engine.infrastructure.db.base import Base


class ParentLinkORM(Base):
    __tablename__ = "parent_links"
    __table_args__ = (
        CheckConstraint("sire_id IS NULL OR sire_id <> child_id", name="ck_parent_links_sire"),
        CheckConstraint("dam_id IS NULL OR dam_id <> child_id", name="ck_parent_links_dam"),
    )

    # Parent ids are not foreign keys: links may reference animals that are not on file
    child_id: Mapped[str] = mapped_column(
        String(64), ForeignKey("individuals.id", ondelete="CASCADE"), primary_key=True
    )
    sire_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    dam_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    sire_status: Mapped[str] = mapped_column(String(16), nullable=False, server_default="verified")
    dam_status: Mapped[str] = mapped_column(String(16), nullable=False, server_default="verified")
