"""create posts table

Revision ID: 7a1e2c9d4b30
Revises:
Create Date: 2026-01-12 21:40:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision = '7a1e2c9d4b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    inspector = inspect(bind)
    existing_tables = inspector.get_table_names()

    if 'posts' not in existing_tables:
        op.create_table('posts',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.Text(), nullable=False),
            sa.Column('date', sa.String(length=32), nullable=False),
            sa.Column('area', sa.Text(), nullable=False),
            sa.Column('comment', sa.Text(), nullable=True),
            sa.Column('contact_handle', sa.String(length=128), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.Column('delete_token_hash', sa.String(length=64), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )
        # listing is ordered by created_at desc
        op.create_index('ix_posts_created_at', 'posts', ['created_at'], unique=False)


def downgrade():
    bind = op.get_bind()
    inspector = inspect(bind)
    existing_tables = inspector.get_table_names()

    if 'posts' in existing_tables:
        op.drop_index('ix_posts_created_at', table_name='posts')
        op.drop_table('posts')
