"""create members, admins and admin_login_logs tables

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-09-28 10:12:40.118204

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('members',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_members_id'), 'members', ['id'], unique=False)

    op.create_table('admins',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('login_id', sa.String(length=64), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('admin_type', sa.String(length=16), nullable=False, server_default='NORMAL'),
        sa.Column('member_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['member_id'], ['members.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_admins_id'), 'admins', ['id'], unique=False)
    op.create_index(op.f('ix_admins_login_id'), 'admins', ['login_id'], unique=True)
    op.create_index(op.f('ix_admins_deleted_at'), 'admins', ['deleted_at'], unique=False)

    # admin_id 为 0 表示账号不存在，因此不建外键
    op.create_table('admin_login_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('admin_id', sa.Integer(), nullable=False),
        sa.Column('success', sa.Boolean(), nullable=False),
        sa.Column('ip_address', sa.String(length=64), nullable=True),
        sa.Column('user_agent', sa.String(length=512), nullable=True),
        sa.Column('login_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_admin_login_logs_id'), 'admin_login_logs', ['id'], unique=False)
    op.create_index(op.f('ix_admin_login_logs_admin_id'), 'admin_login_logs', ['admin_id'], unique=False)
    op.create_index(op.f('ix_admin_login_logs_login_at'), 'admin_login_logs', ['login_at'], unique=False)


def downgrade():
    op.drop_table('admin_login_logs')
    op.drop_table('admins')
    op.drop_table('members')
