"""Create todos and users tables

Revision ID: 20261019_todos_users
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '20261019_todos_users'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create todos and users tables with their lookup indexes."""
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'todos' not in existing_tables:
        op.create_table('todos',
            sa.Column('id', sa.String(), nullable=False),
            sa.Column('owner_id', sa.String(), nullable=True),
            sa.Column('task', sa.Text(), nullable=False),
            sa.Column('creation_date', sa.BigInteger(), nullable=False),
            sa.Column('due_date', sa.Date(), nullable=True),
            sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(
            'ix_todos_owner_id_creation_date', 'todos', ['owner_id', 'creation_date']
        )

    if 'users' not in existing_tables:
        op.create_table('users',
            sa.Column('id', sa.String(), nullable=False),
            sa.Column('github_id', sa.String(), nullable=False),
            sa.Column('username', sa.String(), nullable=True),
            sa.Column('display_name', sa.String(), nullable=True),
            sa.Column('avatar_url', sa.String(), nullable=True),
            sa.Column('created_at', sa.BigInteger(), nullable=False),
            sa.Column('updated_at', sa.BigInteger(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_users_github_id', 'users', ['github_id'], unique=True)


def downgrade() -> None:
    """Drop todos and users tables."""
    op.drop_index('ix_users_github_id', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_todos_owner_id_creation_date', table_name='todos')
    op.drop_table('todos')
