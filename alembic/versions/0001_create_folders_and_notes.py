"""Create folders and notes tables

Revision ID: 0001
Revises:
Create Date: 2025-10-02 18:04:11.318425

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'noteful_folders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('folder_name', sa.Text(), nullable=False),
    )
    op.create_table(
        'noteful_notes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('note_name', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('modified', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            'folder_id',
            sa.Integer(),
            sa.ForeignKey('noteful_folders.id', ondelete='CASCADE'),
            nullable=False,
        ),
    )
    op.create_index('idx_noteful_notes_folder_id', 'noteful_notes', ['folder_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_noteful_notes_folder_id', table_name='noteful_notes')
    op.drop_table('noteful_notes')
    op.drop_table('noteful_folders')
