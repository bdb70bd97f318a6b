"""Initial schema with all tables.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(updated: bool = True) -> list:
    columns = [sa.Column('created_at', sa.DateTime(), nullable=True)]
    if updated:
        columns.append(sa.Column('updated_at', sa.DateTime(), nullable=True))
    return columns


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('password', sa.Text(), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
    )

    # Create deals table
    op.create_table(
        'deals',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('source', sa.String(100), nullable=True),
        sa.Column('posted_time', sa.String(100), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('condition', sa.String(50), nullable=True),
        sa.Column('original_price', sa.Float(), nullable=True),
        sa.Column('current_price', sa.Float(), nullable=True),
        sa.Column('estimated_profit', sa.Float(), nullable=True),
        sa.Column('avg_resell_low', sa.Float(), nullable=True),
        sa.Column('avg_resell_high', sa.Float(), nullable=True),
        sa.Column('sell_time_estimate', sa.String(100), nullable=True),
        sa.Column('demand', sa.String(50), nullable=True),
        sa.Column('match_score', sa.Integer(), nullable=True),
        sa.Column('is_hot_deal', sa.Boolean(), nullable=True),
        sa.Column('status', sa.String(20), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create inventory_items table
    op.create_table(
        'inventory_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('deal_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('condition', sa.String(50), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('purchase_price', sa.Float(), nullable=False),
        sa.Column('purchase_date', sa.String(30), nullable=False),
        sa.Column('estimated_value', sa.Float(), nullable=True),
        sa.Column('status', sa.String(20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['deal_id'], ['deals.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create sales_records table
    op.create_table(
        'sales_records',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('inventory_item_id', sa.Integer(), nullable=False),
        sa.Column('sale_price', sa.Float(), nullable=False),
        sa.Column('sale_date', sa.String(30), nullable=False),
        sa.Column('platform_sold', sa.String(100), nullable=True),
        sa.Column('fees', sa.Float(), nullable=True),
        sa.Column('shipping_cost', sa.Float(), nullable=True),
        sa.Column('profit', sa.Float(), nullable=False),
        sa.Column('buyer_info', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['inventory_item_id'], ['inventory_items.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create notifications table
    op.create_table(
        'notifications',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('type', sa.String(30), nullable=False),
        sa.Column('read', sa.Boolean(), nullable=False),
        sa.Column('data', sa.JSON(), nullable=True),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create deal_alerts table
    op.create_table(
        'deal_alerts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('keywords', sa.JSON(), nullable=False),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('min_price', sa.Float(), nullable=True),
        sa.Column('max_price', sa.Float(), nullable=True),
        sa.Column('condition', sa.String(50), nullable=True),
        sa.Column('sources', sa.JSON(), nullable=False),
        sa.Column('enabled', sa.Boolean(), nullable=True),
        sa.Column('instant_notification', sa.Boolean(), nullable=True),
        sa.Column('email_notification', sa.Boolean(), nullable=True),
        sa.Column('last_run_at', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create competitor_prices table
    op.create_table(
        'competitor_prices',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('deal_id', sa.Integer(), nullable=True),
        sa.Column('platform', sa.String(100), nullable=False),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('url', sa.Text(), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('condition', sa.String(50), nullable=True),
        sa.Column('shipping', sa.Float(), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('seller_name', sa.String(255), nullable=True),
        sa.Column('availability', sa.String(100), nullable=True),
        sa.Column('last_checked', sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['deal_id'], ['deals.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create listing_templates table
    op.create_table(
        'listing_templates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('template', sa.Text(), nullable=False),
        sa.Column('default_platform', sa.String(100), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create generated_listings table
    op.create_table(
        'generated_listings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('inventory_item_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(500), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('platform', sa.String(100), nullable=False),
        sa.Column('suggested_price', sa.Float(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('published', sa.Boolean(), nullable=True),
        sa.Column('published_url', sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['inventory_item_id'], ['inventory_items.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create sourcing_settings table
    op.create_table(
        'sourcing_settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('platforms', sa.JSON(), nullable=True),
        sa.Column('categories', sa.JSON(), nullable=True),
        sa.Column('max_price', sa.Float(), nullable=True),
        sa.Column('min_profit', sa.Float(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('radius_miles', sa.Integer(), nullable=True),
        sa.Column('scan_interval_minutes', sa.Integer(), nullable=True),
        sa.Column('enabled', sa.Boolean(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create reporting tables
    op.create_table(
        'stats',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('value', sa.Float(), nullable=False),
        sa.Column('change', sa.Float(), nullable=True),
        sa.Column('change_type', sa.String(20), nullable=True),
        sa.Column('icon', sa.String(50), nullable=True),
        *_timestamps(updated=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'market_insights',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('change_percentage', sa.Float(), nullable=True),
        sa.Column('icon_type', sa.String(50), nullable=False),
        sa.Column('color_type', sa.String(50), nullable=False),
        sa.Column('source', sa.String(255), nullable=True),
        sa.Column('period', sa.String(50), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'price_history',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.String(255), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('source', sa.String(100), nullable=True),
        *_timestamps(updated=False),
        sa.PrimaryKeyConstraint('id'),
    )

    # Create indexes for per-user lookups
    for table in (
        'deals',
        'inventory_items',
        'sales_records',
        'notifications',
        'deal_alerts',
        'competitor_prices',
        'listing_templates',
        'generated_listings',
        'sourcing_settings',
        'stats',
    ):
        op.create_index(f'ix_{table}_user_id', table, ['user_id'])
    op.create_index('ix_sales_records_inventory_item_id', 'sales_records', ['inventory_item_id'])
    op.create_index('ix_price_history_product_id', 'price_history', ['product_id'])


def downgrade() -> None:
    op.drop_table('price_history')
    op.drop_table('market_insights')
    op.drop_table('stats')
    op.drop_table('sourcing_settings')
    op.drop_table('generated_listings')
    op.drop_table('listing_templates')
    op.drop_table('competitor_prices')
    op.drop_table('deal_alerts')
    op.drop_table('notifications')
    op.drop_table('sales_records')
    op.drop_table('inventory_items')
    op.drop_table('deals')
    op.drop_table('users')
