"""users, memes, tags, meme_tags, favorites

Revision ID: 4b1e0c2a9f10
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4b1e0c2a9f10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

media_type = sa.Enum('image', 'gif', 'video', name='media_type')
meme_status = sa.Enum('pending', 'approved', 'rejected', name='meme_status')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
        sa.UniqueConstraint('username', name=op.f('uq_users_username')),
        sa.UniqueConstraint('email', name=op.f('uq_users_email')),
    )
    op.create_table(
        'memes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('media_url', sa.Text(), nullable=False),
        sa.Column('media_type', media_type, nullable=False),
        sa.Column('status', meme_status, server_default='approved', nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'],
                                name=op.f('fk_memes_user_id_users'), ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_memes')),
    )
    op.create_index('ix_memes_date_created', 'memes', ['date_created'], unique=False)
    op.create_index('ix_memes_status', 'memes', ['status'], unique=False)

    op.create_table(
        'tags',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_tags')),
        sa.UniqueConstraint('name', name=op.f('uq_tags_name')),
    )
    op.create_index('ix_tags_name', 'tags', ['name'], unique=False)

    op.create_table(
        'meme_tags',
        sa.Column('meme_id', sa.Integer(), nullable=False),
        sa.Column('tag_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['meme_id'], ['memes.id'],
                                name=op.f('fk_meme_tags_meme_id_memes'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['tag_id'], ['tags.id'],
                                name=op.f('fk_meme_tags_tag_id_tags'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('meme_id', 'tag_id', name=op.f('pk_meme_tags')),
    )
    op.create_index('ix_meme_tags_tag_id', 'meme_tags', ['tag_id'], unique=False)

    op.create_table(
        'favorites',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('meme_id', sa.Integer(), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'],
                                name=op.f('fk_favorites_user_id_users'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['meme_id'], ['memes.id'],
                                name=op.f('fk_favorites_meme_id_memes'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('user_id', 'meme_id', name=op.f('pk_favorites')),
    )
    op.create_index('ix_favorites_meme_id', 'favorites', ['meme_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_favorites_meme_id', table_name='favorites')
    op.drop_table('favorites')
    op.drop_index('ix_meme_tags_tag_id', table_name='meme_tags')
    op.drop_table('meme_tags')
    op.drop_index('ix_tags_name', table_name='tags')
    op.drop_table('tags')
    op.drop_index('ix_memes_status', table_name='memes')
    op.drop_index('ix_memes_date_created', table_name='memes')
    op.drop_table('memes')
    op.drop_table('users')
    meme_status.drop(op.get_bind(), checkfirst=True)
    media_type.drop(op.get_bind(), checkfirst=True)
