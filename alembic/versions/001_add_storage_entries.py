"""add storage entries

Revision ID: 001_add_storage_entries
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


revision = '001_add_storage_entries'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Per-visitor key-value storage (purchase history lives here)
    op.create_table(
        'storage_entries',
        sa.Column('namespace', sa.String(64), nullable=False),
        sa.Column('key', sa.String(128), nullable=False),
        sa.Column('value', sa.LargeBinary(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True),
                  server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('namespace', 'key'),
    )


def downgrade() -> None:
    op.drop_table('storage_entries')
