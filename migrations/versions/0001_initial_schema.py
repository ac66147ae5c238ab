"""Create marketplace tables

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('user_account',
        sa.Column('user_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('role', sa.String(length=20), server_default=sa.text("'customer'"), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.CheckConstraint("role IN ('farmer', 'customer', 'admin', 'driver')", name='user_account_role_check'),
        sa.PrimaryKeyConstraint('user_id'),
        sa.UniqueConstraint('email', name='user_account_email_key')
    )

    op.create_table('market',
        sa.Column('market_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('market_name', sa.String(length=150), nullable=False),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint('market_id')
    )

    op.create_table('farmers',
        sa.Column('farmer_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('full_name', sa.String(length=150), nullable=False),
        sa.Column('phone_number', sa.String(length=30), nullable=True),
        sa.Column('location', sa.String(length=200), nullable=True),
        sa.Column('farm_name', sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint('farmer_id')
    )

    op.create_table('product',
        sa.Column('product_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('farmer_id', sa.Integer(), nullable=False),
        sa.Column('product_name', sa.String(length=200), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=True),
        sa.Column('stock_quantity', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['farmer_id'], ['user_account.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('product_id')
    )
    op.create_index('idx_product_farmer_id', 'product', ['farmer_id'])

    op.create_table('order_table',
        sa.Column('order_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('market_id', sa.Integer(), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('total_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('order_date', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('status', sa.String(length=50), server_default=sa.text("'pending'"), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user_account.user_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['product.product_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['market_id'], ['market.market_id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('order_id')
    )
    op.create_index('idx_order_table_user_id', 'order_table', ['user_id'])
    op.create_index('idx_order_table_status', 'order_table', ['status'])

    op.create_table('payment',
        sa.Column('payment_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('payment_method', sa.String(length=50), nullable=True),
        sa.Column('reference', sa.String(length=100), nullable=True),
        sa.Column('payment_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('payment_status', sa.String(length=50), server_default=sa.text("'pending'"), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['order_table.order_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('payment_id')
    )

    op.create_table('logistics',
        sa.Column('logistics_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.Integer(), nullable=False),
        sa.Column('vehicle_number_plate', sa.String(length=20), nullable=False),
        sa.Column('transport_mode', sa.String(length=50), nullable=False),
        sa.Column('pickup_location', sa.String(length=200), nullable=False),
        sa.Column('dropoff_location', sa.String(length=200), nullable=False),
        sa.Column('delivered', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.ForeignKeyConstraint(['order_id'], ['order_table.order_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('logistics_id')
    )


def downgrade():
    op.drop_table('logistics')
    op.drop_table('payment')
    op.drop_index('idx_order_table_status', table_name='order_table')
    op.drop_index('idx_order_table_user_id', table_name='order_table')
    op.drop_table('order_table')
    op.drop_index('idx_product_farmer_id', table_name='product')
    op.drop_table('product')
    op.drop_table('farmers')
    op.drop_table('market')
    op.drop_table('user_account')
