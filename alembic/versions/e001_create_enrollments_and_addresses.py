"""create enrollments and addresses tables

Revision ID: e001_create_enrollments
Revises:
Create Date: 2026-10-19 10:12:41.503218

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'e001_create_enrollments'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create enrollments and addresses.

    One enrollment per user (unique user_id) and at most one address per
    enrollment (unique enrollment_id).
    """
    op.create_table(
        'enrollments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('cpf', sa.String(11), nullable=False),
        sa.Column('birthday', sa.DateTime(timezone=True), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_enrollments_id', 'enrollments', ['id'])
    op.create_index('ix_enrollments_user_id', 'enrollments', ['user_id'], unique=True)

    op.create_table(
        'addresses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('cep', sa.String(9), nullable=False),
        sa.Column('street', sa.String(255), nullable=False),
        sa.Column('city', sa.String(255), nullable=False),
        sa.Column('state', sa.String(2), nullable=False),
        sa.Column('number', sa.String(20), nullable=False),
        sa.Column('neighborhood', sa.String(255), nullable=False),
        sa.Column('complement', sa.String(255), nullable=True),
        sa.Column('address_detail', sa.String(255), nullable=True),
        sa.Column(
            'enrollment_id',
            sa.Integer(),
            sa.ForeignKey('enrollments.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_addresses_id', 'addresses', ['id'])
    op.create_index('ix_addresses_enrollment_id', 'addresses', ['enrollment_id'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_addresses_enrollment_id', table_name='addresses')
    op.drop_index('ix_addresses_id', table_name='addresses')
    op.drop_table('addresses')
    op.drop_index('ix_enrollments_user_id', table_name='enrollments')
    op.drop_index('ix_enrollments_id', table_name='enrollments')
    op.drop_table('enrollments')
