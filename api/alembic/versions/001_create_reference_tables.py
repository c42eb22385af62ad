"""Create reference data tables: languages, vocabulary_words, learning_tips

Revision ID: 001_create_reference_tables
Revises: 
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001_create_reference_tables'
down_revision = None
branch_labels = None
depends_on = None

difficulty_level = postgresql.ENUM(
    'beginner', 'intermediate', 'advanced',
    name='difficulty_level',
    create_type=False,
)


def upgrade() -> None:
    difficulty_level.create(op.get_bind(), checkfirst=True)

    # Create languages table
    op.create_table(
        'languages',
        sa.Column('id', sa.Uuid(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('code', sa.String(length=8), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('native_name', sa.String(), nullable=False),
        sa.Column('flag_emoji', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('difficulty_level', difficulty_level, nullable=False),
        sa.Column('is_popular', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )

    # Create vocabulary_words table
    op.create_table(
        'vocabulary_words',
        sa.Column('id', sa.Uuid(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('english_word', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('difficulty_level', difficulty_level, nullable=False),
        sa.Column('part_of_speech', sa.String(), nullable=False),
        sa.Column('frequency_rank', sa.Integer(), nullable=False),
        sa.Column('is_common', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        op.f('ix_vocabulary_words_frequency_rank'), 'vocabulary_words', ['frequency_rank'], unique=False
    )

    # Create learning_tips table
    op.create_table(
        'learning_tips',
        sa.Column('id', sa.Uuid(), server_default=sa.text('gen_random_uuid()'), nullable=False),
        sa.Column('language_code', sa.String(length=8), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('content', sa.String(), nullable=False),
        sa.Column('tip_type', sa.String(length=32), nullable=False),
        sa.Column('difficulty_level', difficulty_level, nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    op.drop_table('learning_tips')
    op.drop_index(op.f('ix_vocabulary_words_frequency_rank'), table_name='vocabulary_words')
    op.drop_table('vocabulary_words')
    op.drop_table('languages')
    difficulty_level.drop(op.get_bind(), checkfirst=True)
