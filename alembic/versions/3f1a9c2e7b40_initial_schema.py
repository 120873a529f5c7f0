"""initial_schema

Revision ID: 3f1a9c2e7b40
Revises:
Create Date: 2026-10-19 10:12:44.381920

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1a9c2e7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'user',
        sa.Column('username', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('id_user', sa.Integer(), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('date_creation', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id_user')
    )
    op.create_index(op.f('ix_user_email'), 'user', ['email'], unique=True)
    op.create_index(op.f('ix_user_username'), 'user', ['username'], unique=True)

    op.create_table(
        'admin',
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('username', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('id_admin', sa.Integer(), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.PrimaryKeyConstraint('id_admin')
    )
    op.create_index(op.f('ix_admin_email'), 'admin', ['email'], unique=False)
    op.create_index(op.f('ix_admin_username'), 'admin', ['username'], unique=True)

    op.create_table(
        'category',
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column('id_categ', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.PrimaryKeyConstraint('id_categ')
    )
    op.create_index(op.f('ix_category_name'), 'category', ['name'], unique=True)

    op.create_table(
        'volunteer',
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('surname', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('contact', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('interests', sa.JSON(), nullable=False),
        sa.Column('id_volunteer', sa.Integer(), nullable=False),
        sa.Column('id_user', sa.Integer(), nullable=False),
        sa.Column('reputation', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_user'], ['user.id_user'], ),
        sa.PrimaryKeyConstraint('id_volunteer'),
        sa.UniqueConstraint('id_user')
    )

    op.create_table(
        'project',
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=3000), nullable=False),
        sa.Column('id_project', sa.Integer(), nullable=False),
        sa.Column('id_owner', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_owner'], ['volunteer.id_volunteer'], ),
        sa.PrimaryKeyConstraint('id_project')
    )
    op.create_index(op.f('ix_project_id_owner'), 'project', ['id_owner'], unique=False)

    op.create_table(
        'projectcategory',
        sa.Column('id_project', sa.Integer(), nullable=False),
        sa.Column('id_categ', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['id_categ'], ['category.id_categ'], ),
        sa.ForeignKeyConstraint(['id_project'], ['project.id_project'], ),
        sa.PrimaryKeyConstraint('id_project', 'id_categ')
    )

    op.create_table(
        'projectmember',
        sa.Column('id_volunteer', sa.Integer(), nullable=False),
        sa.Column('id_project', sa.Integer(), nullable=False),
        sa.Column('joined_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['id_project'], ['project.id_project'], ),
        sa.ForeignKeyConstraint(['id_volunteer'], ['volunteer.id_volunteer'], ),
        sa.PrimaryKeyConstraint('id_volunteer', 'id_project')
    )

    op.create_table(
        'volunteerrequest',
        sa.Column('id_sender', sa.Integer(), nullable=False),
        sa.Column('id_receiver', sa.Integer(), nullable=False),
        sa.Column('id_project', sa.Integer(), nullable=False),
        sa.Column(
            'status',
            sa.Enum('PENDING', 'ACCEPTED', 'DECLINED', name='requeststatus'),
            nullable=False,
        ),
        sa.Column('id_request', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('decided_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['id_project'], ['project.id_project'], ),
        sa.ForeignKeyConstraint(['id_receiver'], ['volunteer.id_volunteer'], ),
        sa.ForeignKeyConstraint(['id_sender'], ['volunteer.id_volunteer'], ),
        sa.PrimaryKeyConstraint('id_request')
    )
    op.create_index(op.f('ix_volunteerrequest_id_project'), 'volunteerrequest', ['id_project'], unique=False)
    op.create_index(op.f('ix_volunteerrequest_id_receiver'), 'volunteerrequest', ['id_receiver'], unique=False)
    op.create_index(op.f('ix_volunteerrequest_id_sender'), 'volunteerrequest', ['id_sender'], unique=False)
    op.create_index(op.f('ix_volunteerrequest_status'), 'volunteerrequest', ['status'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_volunteerrequest_status'), table_name='volunteerrequest')
    op.drop_index(op.f('ix_volunteerrequest_id_sender'), table_name='volunteerrequest')
    op.drop_index(op.f('ix_volunteerrequest_id_receiver'), table_name='volunteerrequest')
    op.drop_index(op.f('ix_volunteerrequest_id_project'), table_name='volunteerrequest')
    op.drop_table('volunteerrequest')
    sa.Enum(name='requeststatus').drop(op.get_bind(), checkfirst=True)
    op.drop_table('projectmember')
    op.drop_table('projectcategory')
    op.drop_index(op.f('ix_project_id_owner'), table_name='project')
    op.drop_table('project')
    op.drop_table('volunteer')
    op.drop_index(op.f('ix_category_name'), table_name='category')
    op.drop_table('category')
    op.drop_index(op.f('ix_admin_username'), table_name='admin')
    op.drop_index(op.f('ix_admin_email'), table_name='admin')
    op.drop_table('admin')
    op.drop_index(op.f('ix_user_username'), table_name='user')
    op.drop_index(op.f('ix_user_email'), table_name='user')
    op.drop_table('user')
