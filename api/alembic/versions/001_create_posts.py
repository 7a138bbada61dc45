"""create_posts

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Crea la tabla posts con indice unico sobre external_id."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('posts'):
        op.create_table('posts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('external_id', sa.BigInteger(), nullable=False),
        sa.Column('author_id', sa.BigInteger(), nullable=True),
        sa.Column('title', sa.String(length=200), nullable=True),
        sa.Column('body', sa.String(length=4000), nullable=True),
        sa.Column('imported_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_posts_external_id'), 'posts', ['external_id'], unique=True)


def downgrade() -> None:
    """Elimina la tabla posts."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if inspector.has_table('posts'):
        indexes = [idx['name'] for idx in inspector.get_indexes('posts')]
        if 'ix_posts_external_id' in indexes:
            op.drop_index(op.f('ix_posts_external_id'), table_name='posts')
        op.drop_table('posts')
