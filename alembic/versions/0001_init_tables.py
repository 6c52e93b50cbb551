from alembic import op
import sqlalchemy as sa

revision = "0001_init_tables"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('email', sa.String(254), nullable=False, unique=True),
        sa.Column('department', sa.String(120), nullable=False),
        sa.Column('role', sa.String(120), nullable=False),
        sa.Column('joining_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'attendance',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('employee_id', sa.Integer, sa.ForeignKey('employees.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(16), nullable=False),
        sa.UniqueConstraint('employee_id', 'date', name='uq_attendance_employee_date'),
        sa.CheckConstraint("status IN ('Present', 'Absent', 'Leave')", name='ck_attendance_status'),
    )
    op.create_index('ix_attendance_employee_id', 'attendance', ['employee_id'])


def downgrade():
    op.drop_index('ix_attendance_employee_id', table_name='attendance')
    op.drop_table('attendance')
    op.drop_table('employees')
