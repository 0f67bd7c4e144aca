"""Restaurants, menu items and orders

Revision ID: 001_dish_search_schema
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001_dish_search_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create restaurants table
    op.create_table(
        'restaurants',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('city', sa.String(100), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
    )

    # Create menu_items table
    op.create_table(
        'menu_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('restaurant_id', sa.Integer(), sa.ForeignKey('restaurants.id', ondelete='CASCADE'), nullable=False),
        sa.Column('dish_name', sa.String(255), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint('price >= 0', name='ck_menu_items_price_non_negative'),
    )
    op.create_index('idx_restaurant_id', 'menu_items', ['restaurant_id'])
    op.create_index('idx_dish_name', 'menu_items', ['dish_name'])

    # Create orders table
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('menu_item_id', sa.Integer(), sa.ForeignKey('menu_items.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
    )
    op.create_index('idx_menu_item_id', 'orders', ['menu_item_id'])


def downgrade() -> None:
    op.drop_index('idx_menu_item_id', table_name='orders')
    op.drop_table('orders')
    op.drop_index('idx_dish_name', table_name='menu_items')
    op.drop_index('idx_restaurant_id', table_name='menu_items')
    op.drop_table('menu_items')
    op.drop_table('restaurants')
