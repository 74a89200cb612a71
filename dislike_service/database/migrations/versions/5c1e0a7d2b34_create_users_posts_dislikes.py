from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = '5c1e0a7d2b34'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('first_name', sa.String(length=255), nullable=True),
        sa.Column('last_name', sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table(
        'posts',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('tuit', sa.Text(), nullable=False),
        sa.Column('posted_by_id', sa.String(length=36), nullable=False),
        sa.Column('posted_on', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('replies', sa.Integer(), nullable=False),
        sa.Column('retuits', sa.Integer(), nullable=False),
        sa.Column('likes', sa.Integer(), nullable=False),
        sa.Column('dislikes', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['posted_by_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'dislikes',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('post_id', sa.String(length=36), nullable=False),
        sa.Column('disliked_by', sa.String(length=36), nullable=False),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['disliked_by'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('post_id', 'disliked_by', name='uq_dislikes_post_user'),
    )
    op.create_index(op.f('ix_dislikes_post_id'), 'dislikes', ['post_id'], unique=False)
    op.create_index(op.f('ix_dislikes_disliked_by'), 'dislikes', ['disliked_by'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_dislikes_disliked_by'), table_name='dislikes')
    op.drop_index(op.f('ix_dislikes_post_id'), table_name='dislikes')
    op.drop_table('dislikes')
    op.drop_table('posts')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_table('users')
