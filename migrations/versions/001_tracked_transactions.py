"""Tracked transactions table.

Revision ID: 001
Revises: 
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'tracked_transactions',
        sa.Column('tx_hash', sa.String(64), primary_key=True),
        sa.Column('status', sa.Enum('PENDING', 'CONFIRMED', name='txstatus'), nullable=False),
        sa.Column('block_hash', sa.String(64), nullable=True),
        sa.Column('block_height', sa.BigInteger(), nullable=True),
        sa.Column('block_slot', sa.BigInteger(), nullable=True),
        sa.Column('created_at', sa.DateTime(), default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), default=sa.func.now(), onupdate=sa.func.now()),
    )
    op.create_index('ix_tracked_transactions_status', 'tracked_transactions', ['status'])


def downgrade() -> None:
    op.drop_index('ix_tracked_transactions_status', table_name='tracked_transactions')
    op.drop_table('tracked_transactions')

    # Drop enums
    op.execute("DROP TYPE IF EXISTS txstatus")
