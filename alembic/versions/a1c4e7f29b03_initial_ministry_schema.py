"""Create members, ministries, zones, sale groups and member ministries tables

Revision ID: a1c4e7f29b03
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c4e7f29b03'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

member_status = sa.Enum('ACTIVE', 'INACTIVE', 'TRANSFERRED', 'DECEASED', name='member_status')
membership_type = sa.Enum('REGULAR', 'TRANSFER', 'VISITOR', name='membership_type')


def upgrade() -> None:
    """Create the core tables."""
    op.create_table(
        'zones',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('leaderName', sa.String(), nullable=True),
        sa.Column('isActive', sa.Boolean(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_zones_id', 'zones', ['id'])

    op.create_table(
        'salegroups',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('leaderName', sa.String(), nullable=True),
        sa.Column('zoneId', sa.String(), sa.ForeignKey('zones.id'), nullable=False),
        sa.Column('isActive', sa.Boolean(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_salegroups_id', 'salegroups', ['id'])
    op.create_index('ix_salegroups_zoneId', 'salegroups', ['zoneId'])

    op.create_table(
        'ministries',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('meetingDay', sa.String(), nullable=True),
        sa.Column('meetingTime', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('capacity', sa.Integer(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('isActive', sa.Boolean(), nullable=False),
        sa.Column('createdAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_ministries_id', 'ministries', ['id'])
    op.create_index('ix_ministries_isActive', 'ministries', ['isActive'])

    op.create_table(
        'members',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('firstName', sa.String(), nullable=False),
        sa.Column('lastName', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('status', member_status, nullable=False),
        sa.Column('membershipType', membership_type, nullable=False),
        sa.Column('profileImageUrl', sa.String(), nullable=True),
        sa.Column('saleGroupId', sa.String(), sa.ForeignKey('salegroups.id'), nullable=True),
        sa.Column('createdAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updatedAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_members_id', 'members', ['id'])
    op.create_index('ix_members_email', 'members', ['email'])
    op.create_index('ix_members_status', 'members', ['status'])
    op.create_index('ix_members_saleGroupId', 'members', ['saleGroupId'])
    op.create_index('ix_members_createdAt', 'members', ['createdAt'])

    op.create_table(
        'member_ministries',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('memberId', sa.String(), sa.ForeignKey('members.id'), nullable=False),
        sa.Column('ministryId', sa.String(), sa.ForeignKey('ministries.id'), nullable=False),
        sa.Column('role', sa.String(), nullable=True),
        sa.Column('isActive', sa.Boolean(), nullable=False),
        sa.Column('joinedAt', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_member_ministries_id', 'member_ministries', ['id'])
    op.create_index('ix_member_ministries_memberId', 'member_ministries', ['memberId'])
    op.create_index('ix_member_ministries_ministryId', 'member_ministries', ['ministryId'])


def downgrade() -> None:
    """Drop the core tables."""
    op.drop_table('member_ministries')
    op.drop_table('members')
    op.drop_table('ministries')
    op.drop_table('salegroups')
    op.drop_table('zones')
    member_status.drop(op.get_bind(), checkfirst=True)
    membership_type.drop(op.get_bind(), checkfirst=True)
