"""create ledger tables

Revision ID: 3f1a9c2e7b10
Revises:
Create Date: 2026-10-19 10:12:41.530214

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1a9c2e7b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

split_method = sa.Enum('equal', 'exact', 'percentage', name='split_method')


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('mobile', sa.String(), nullable=False),
        sa.Column('serial_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),

        sa.UniqueConstraint('serial_id'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'counters',
        sa.Column('model', sa.String(), primary_key=True),
        sa.Column('count', sa.Integer(), nullable=False),
    )

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('total_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('created_by', sa.Integer(), nullable=False),
        sa.Column('split_method', split_method, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),

        sa.ForeignKeyConstraint(['created_by'], ['users.id']),
    )
    op.create_index('ix_expenses_id', 'expenses', ['id'])
    op.create_index('ix_expenses_created_by', 'expenses', ['created_by'])

    op.create_table(
        'expense_participants',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('expense_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('amount_owed', sa.Numeric(12, 2), nullable=False),
        sa.Column('percentage_owed', sa.Numeric(7, 4), nullable=True),

        sa.ForeignKeyConstraint(
            ['expense_id'],
            ['expenses.id'],
            ondelete='CASCADE',
        ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),

        sa.UniqueConstraint('expense_id', 'user_id', name='uq_expense_participant_user'),
    )
    op.create_index('ix_expense_participants_user_id', 'expense_participants', ['user_id'])


def downgrade() -> None:
    op.drop_table('expense_participants')
    op.drop_table('expenses')
    op.drop_table('counters')
    op.drop_table('users')
    split_method.drop(op.get_bind(), checkfirst=True)
