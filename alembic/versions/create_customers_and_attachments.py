"""
Alembic migration: create customers and customer_attachments tables

Attachment content is stored in-row. Deleting a customer removes its
attachments through the ON DELETE CASCADE foreign key.
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_customers_and_attachments'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'customers',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
    )
    op.create_table(
        'customer_attachments',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('customer_id', sa.String(length=36), nullable=False),
        sa.Column('file_name', sa.Text(), nullable=False),
        sa.Column('image_data', sa.LargeBinary(), nullable=False),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], ondelete='CASCADE'),
    )


def downgrade() -> None:
    op.drop_table('customer_attachments')
    op.drop_table('customers')
