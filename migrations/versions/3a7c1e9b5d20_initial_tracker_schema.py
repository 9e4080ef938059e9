"""initial tracker schema

Revision ID: 3a7c1e9b5d20
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e9b5d20'
down_revision = None
branch_labels = None
depends_on = None


def _nutrient_columns():
    return [
        sa.Column('food_name', sa.String(length=255), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=50), nullable=False),
        sa.Column('calories', sa.Integer(), nullable=False),
        sa.Column('protein', sa.Float(), nullable=False),
        sa.Column('carbs', sa.Float(), nullable=False),
        sa.Column('fat', sa.Float(), nullable=False),
        sa.Column('cholesterol', sa.Float(), nullable=True),
        sa.Column('sodium', sa.Float(), nullable=True),
        sa.Column('sugar', sa.Float(), nullable=True),
        sa.Column('vitamin_a', sa.Float(), nullable=True),
        sa.Column('vitamin_c', sa.Float(), nullable=True),
        sa.Column('vitamin_d', sa.Float(), nullable=True),
        sa.Column('calcium', sa.Float(), nullable=True),
        sa.Column('iron', sa.Float(), nullable=True),
        sa.Column('meal_type', sa.String(length=20), nullable=True),
    ]


def upgrade():
    op.create_table(
        'accounts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_accounts_username', 'accounts', ['username'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('account_id', sa.Integer(), sa.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_users_account_id', 'users', ['account_id'])

    op.create_table(
        'nutrition_goals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('calorie_goal', sa.Integer(), nullable=False),
        sa.Column('protein_goal', sa.Float(), nullable=False),
        sa.Column('carbs_goal', sa.Float(), nullable=False),
        sa.Column('fat_goal', sa.Float(), nullable=False),
        sa.Column('cholesterol_goal', sa.Float(), nullable=True),
        sa.Column('sodium_goal', sa.Float(), nullable=True),
        sa.Column('sugar_goal', sa.Float(), nullable=True),
        sa.Column('vitamin_a_goal', sa.Float(), nullable=True),
        sa.Column('vitamin_c_goal', sa.Float(), nullable=True),
        sa.Column('vitamin_d_goal', sa.Float(), nullable=True),
        sa.Column('calcium_goal', sa.Float(), nullable=True),
        sa.Column('iron_goal', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'food_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'date', name='uq_food_logs_user_date'),
    )
    op.create_index('ix_food_logs_user_id', 'food_logs', ['user_id'])

    op.create_table(
        'food_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('food_log_id', sa.Integer(), sa.ForeignKey('food_logs.id', ondelete='CASCADE'), nullable=False),
        *_nutrient_columns(),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_food_entries_food_log_id', 'food_entries', ['food_log_id'])

    op.create_table(
        'favorite_foods',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        *_nutrient_columns(),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_favorite_foods_user_id', 'favorite_foods', ['user_id'])


def downgrade():
    # Drop in reverse dependency order
    op.drop_index('ix_favorite_foods_user_id', table_name='favorite_foods')
    op.drop_table('favorite_foods')
    op.drop_index('ix_food_entries_food_log_id', table_name='food_entries')
    op.drop_table('food_entries')
    op.drop_index('ix_food_logs_user_id', table_name='food_logs')
    op.drop_table('food_logs')
    op.drop_table('nutrition_goals')
    op.drop_index('ix_users_account_id', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_accounts_username', table_name='accounts')
    op.drop_table('accounts')
