"""Initial schema: user_account, destination, place, review, review_history, photo, trip, trip_place

Revision ID: 001
Revises:
Create Date: 2025-11-13

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
    """Create all tables with indexes and check constraints."""

    op.create_table(
        'user_account',
        sa.Column('user_id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(50), nullable=False),
        sa.Column('email', sa.String(100), nullable=False),
        sa.Column('country', sa.String(50), nullable=True),
        sa.Column('join_date', sa.Date(), nullable=False),
        sa.Column('display_name', sa.String(100), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default='0'),
        sa.UniqueConstraint('username', name='uq_user_account_username'),
    )

    op.create_table(
        'destination',
        sa.Column('destination_id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('country', sa.String(50), nullable=False),
        sa.Column('region', sa.String(50), nullable=False),
        sa.Column('description', sa.String(255), nullable=True),
    )

    op.create_table(
        'place',
        sa.Column('place_id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('destination_id', sa.Integer(), nullable=False),
        sa.Column('price_level', sa.Integer(), nullable=True),
        sa.Column('address', sa.String(150), nullable=True),
        sa.Column('phone', sa.String(30), nullable=True),
        sa.Column('website', sa.String(200), nullable=True),
        sa.Column('average_rating', sa.Numeric(4, 2), nullable=True),
        sa.ForeignKeyConstraint(['destination_id'], ['destination.destination_id']),
        sa.CheckConstraint(
            "category IN ('hotel', 'restaurant', 'attraction')",
            name='ck_place_category',
        ),
    )
    op.create_index('idx_place_destination', 'place', ['destination_id'])

    op.create_table(
        'review',
        sa.Column('review_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('place_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(120), nullable=True),
        sa.Column('review_text', sa.String(255), nullable=True),
        sa.Column('review_date', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user_account.user_id']),
        sa.ForeignKeyConstraint(['place_id'], ['place.place_id']),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name='ck_review_rating'),
    )
    op.create_index('idx_review_place', 'review', ['place_id'])

    # Audit trail: plain ids, no foreign keys, rows outlive their reviews
    op.create_table(
        'review_history',
        sa.Column('change_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('review_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('place_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(120), nullable=True),
        sa.Column('review_text', sa.String(255), nullable=True),
        sa.Column('review_date', sa.Date(), nullable=False),
        sa.Column('changed_on', sa.DateTime(timezone=True), nullable=False),
        sa.Column('operation', sa.String(3), nullable=False),
        sa.CheckConstraint(
            "operation IN ('INS', 'DEL')", name='ck_review_history_operation'
        ),
    )
    op.create_index(
        'idx_review_history_review', 'review_history', ['review_id', 'change_id']
    )
    op.create_index(
        'idx_review_history_place', 'review_history', ['place_id', 'change_id']
    )

    op.create_table(
        'photo',
        sa.Column('photo_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('place_id', sa.Integer(), nullable=False),
        sa.Column('uploaded_at', sa.Date(), nullable=False),
        sa.Column('url', sa.String(255), nullable=True),
        sa.Column('caption', sa.String(255), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['user_account.user_id']),
        sa.ForeignKeyConstraint(['place_id'], ['place.place_id']),
    )
    op.create_index('idx_photo_place', 'photo', ['place_id'])

    op.create_table(
        'trip',
        sa.Column('trip_id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user_account.user_id']),
        sa.CheckConstraint('end_date >= start_date', name='ck_trip_dates'),
    )

    op.create_table(
        'trip_place',
        sa.Column('trip_id', sa.Integer(), nullable=False),
        sa.Column('place_id', sa.Integer(), nullable=False),
        sa.Column('day_number', sa.Integer(), nullable=True),
        sa.Column('notes', sa.String(255), nullable=True),
        sa.PrimaryKeyConstraint('trip_id', 'place_id'),
        sa.ForeignKeyConstraint(['trip_id'], ['trip.trip_id']),
        sa.ForeignKeyConstraint(['place_id'], ['place.place_id']),
    )


def downgrade() -> None:
    """Drop all tables in reverse order."""
    op.drop_table('trip_place')
    op.drop_table('trip')

    op.drop_index('idx_photo_place', table_name='photo')
    op.drop_table('photo')

    op.drop_index('idx_review_history_place', table_name='review_history')
    op.drop_index('idx_review_history_review', table_name='review_history')
    op.drop_table('review_history')

    op.drop_index('idx_review_place', table_name='review')
    op.drop_table('review')

    op.drop_index('idx_place_destination', table_name='place')
    op.drop_table('place')

    op.drop_table('destination')
    op.drop_table('user_account')
