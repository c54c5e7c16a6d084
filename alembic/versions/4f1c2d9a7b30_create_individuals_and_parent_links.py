"""create individuals and parent_links tables

Revision ID: 4f1c2d9a7b30
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1c2d9a7b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'individuals',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('sex', sa.String(length=6), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('color', sa.String(length=64), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('verification_status', sa.String(length=16), nullable=False, server_default='unverified'),
        sa.Column('ownership_status', sa.String(length=16), nullable=False, server_default='verified'),
        sa.Column('available_for_breeding', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_individuals_breed'), 'individuals', ['breed'], unique=False)

    op.create_table(
        'parent_links',
        sa.Column('child_id', sa.String(length=64), nullable=False),
        sa.Column('sire_id', sa.String(length=64), nullable=True),
        sa.Column('dam_id', sa.String(length=64), nullable=True),
        sa.Column('sire_status', sa.String(length=16), nullable=False, server_default='verified'),
        sa.Column('dam_status', sa.String(length=16), nullable=False, server_default='verified'),
        sa.ForeignKeyConstraint(['child_id'], ['individuals.id'], ondelete='CASCADE'),
        sa.CheckConstraint('sire_id IS NULL OR sire_id <> child_id', name='ck_parent_links_sire'),
        sa.CheckConstraint('dam_id IS NULL OR dam_id <> child_id', name='ck_parent_links_dam'),
        sa.PrimaryKeyConstraint('child_id')
    )
    op.create_index(op.f('ix_parent_links_sire_id'), 'parent_links', ['sire_id'], unique=False)
    op.create_index(op.f('ix_parent_links_dam_id'), 'parent_links', ['dam_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_parent_links_dam_id'), table_name='parent_links')
    op.drop_index(op.f('ix_parent_links_sire_id'), table_name='parent_links')
    op.drop_table('parent_links')
    op.drop_index(op.f('ix_individuals_breed'), table_name='individuals')
    op.drop_table('individuals')
