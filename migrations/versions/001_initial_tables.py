"""Create SnapThePlant tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, plants, care actions and community shares"""

    # 1. Users
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='user'),
        sa.Column('subscription_type', sa.String(30), nullable=False, server_default='free',
                  comment='free, trial, premium or premium-lifetime'),
        sa.Column('identifications_remaining', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('trial_end_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('stripe_customer_id', sa.String(255), nullable=True),
        sa.Column('stripe_subscription_id', sa.String(255), nullable=True),
        sa.Column('is_beta_tester', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email'),
        sa.CheckConstraint("role IN ('user', 'admin')", name='ck_users_role'),
        sa.CheckConstraint(
            "subscription_type IN ('free', 'trial', 'premium', 'premium-lifetime')",
            name='ck_users_subscription_type',
        ),
        sa.CheckConstraint('identifications_remaining >= 0', name='ck_users_identifications_remaining'),
    )

    op.create_index('ix_users_username', 'users', ['username'])
    op.create_index('ix_users_email', 'users', ['email'])
    op.create_index('ix_users_subscription_type', 'users', ['subscription_type'])
    op.create_index('ix_users_stripe_customer_id', 'users', ['stripe_customer_id'])

    # 2. Plants
    op.create_table('plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('scientific_name', sa.String(200), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('date_added', sa.DateTime(timezone=True), nullable=False),
        sa.Column('water_frequency', sa.Integer(), nullable=True, comment='Days between waterings'),
        sa.Column('fertilize_frequency', sa.Integer(), nullable=True, comment='Days between feedings'),
        sa.Column('last_watered', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_fertilized', sa.DateTime(timezone=True), nullable=True),
        sa.Column('light_needs', sa.String(100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('care_health', sa.Float(), nullable=False, server_default='100'),
        sa.Column('is_public', sa.Boolean(), nullable=False, server_default=sa.false()),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )

    op.create_index('ix_plants_user_id', 'plants', ['user_id'])
    op.create_index('ix_plants_is_public', 'plants', ['is_public'])

    # 3. Care actions
    op.create_table('care_actions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('action_type', sa.String(20), nullable=False),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.CheckConstraint(
            "action_type IN ('water', 'fertilize', 'repot', 'prune', 'mist', 'other')",
            name='ck_care_actions_action_type',
        ),
    )

    op.create_index('ix_care_actions_plant_id', 'care_actions', ['plant_id'])
    op.create_index('ix_care_actions_user_id', 'care_actions', ['user_id'])
    op.create_index('ix_care_actions_due_date', 'care_actions', ['due_date'])

    # 4. Community shares
    op.create_table('community_shares',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('date_posted', sa.DateTime(timezone=True), nullable=False),
        sa.Column('likes', sa.Integer(), nullable=False, server_default='0'),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], ondelete='CASCADE'),
    )

    op.create_index('ix_community_shares_user_id', 'community_shares', ['user_id'])
    op.create_index('ix_community_shares_plant_id', 'community_shares', ['plant_id'])
    op.create_index('ix_community_shares_date_posted', 'community_shares', ['date_posted'])


def downgrade() -> None:
    """Drop all SnapThePlant tables"""
    op.drop_table('community_shares')
    op.drop_table('care_actions')
    op.drop_table('plants')
    op.drop_table('users')
