"""Create stores table for Shopify store connections.

Revision ID: 0001
Revises: 
Create Date: 2025-07-22 12:02:30.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# Revision identifiers
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the stores table with row level security enabled."""
    op.create_table(
        "stores",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("store_name", sa.Text, nullable=False),
        sa.Column("shopify_domain", sa.Text, nullable=False, unique=True),
        sa.Column("api_access_token", sa.Text, nullable=False),
    )

    # Permissive for now; restrict per user once auth exists
    op.execute("ALTER TABLE stores ENABLE ROW LEVEL SECURITY")
    op.execute(
        'CREATE POLICY "Allow all operations on stores" ON stores '
        "FOR ALL USING (true) WITH CHECK (true)"
    )


def downgrade() -> None:
    """Drop the stores table."""
    op.execute('DROP POLICY IF EXISTS "Allow all operations on stores" ON stores')
    op.drop_table("stores")
