import logging
from datetime import date
from typing import Optional, Protocol, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import ConflictError
from .models import AttendanceRecord, Employee

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """
    Persistence seam for the domain service.
    Writes are staged until commit(); SqlRecordStore is the production
    implementation, tests substitute an in-memory one.
    """

    def list_employees(self) -> Sequence[Employee]: ...

    def get_employee(self, employee_id: int) -> Optional[Employee]: ...

    def get_employee_by_email(self, email: str) -> Optional[Employee]: ...

    def insert_employee(self, values: dict) -> Employee: ...

    def update_employee(self, employee_id: int, changes: dict) -> Optional[Employee]: ...

    def delete_employee(self, employee_id: int) -> None: ...

    def delete_attendance_for_employee(self, employee_id: int) -> int: ...

    def upsert_attendance(self, employee_id: int, on: date, status: str) -> AttendanceRecord: ...

    def list_attendance_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]: ...

    def count_employees(self) -> int: ...

    def count_attendance(self, on: date, status: str) -> int: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class SqlRecordStore:
    def __init__(self, db: Session):
        self.db = db

    # ----------------------------
    # Employees
    # ----------------------------
    def list_employees(self) -> Sequence[Employee]:
        return self.db.scalars(select(Employee).order_by(Employee.name.asc(), Employee.id.asc())).all()

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def get_employee_by_email(self, email: str) -> Optional[Employee]:
        return self.db.scalars(select(Employee).where(Employee.email == email)).first()

    def insert_employee(self, values: dict) -> Employee:
        employee = Employee(**values)
        self.db.add(employee)
        self._flush_or_conflict()
        return employee

    def update_employee(self, employee_id: int, changes: dict) -> Optional[Employee]:
        employee = self.get_employee(employee_id)
        if employee is None:
            return None
        for key, value in changes.items():
            setattr(employee, key, value)
        self._flush_or_conflict()
        return employee

    def delete_employee(self, employee_id: int) -> None:
        self.db.execute(delete(Employee).where(Employee.id == employee_id))

    def _flush_or_conflict(self) -> None:
        # The only unique column on employees is email
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Employee write rejected by unique constraint: %s", e.orig)
            raise ConflictError("Email already exists") from e

    # ----------------------------
    # Attendance
    # ----------------------------
    def delete_attendance_for_employee(self, employee_id: int) -> int:
        result = self.db.execute(delete(AttendanceRecord).where(AttendanceRecord.employee_id == employee_id))
        return result.rowcount or 0

    def upsert_attendance(self, employee_id: int, on: date, status: str) -> AttendanceRecord:
        """
        Insert-or-update keyed on (employee_id, date) as a single
        INSERT ... ON CONFLICT DO UPDATE ... RETURNING (PostgreSQL, SQLite).
        The composite unique constraint is the conflict target, so concurrent
        marks for the same pair collapse into one row.
        """
        dialect = self.db.get_bind().dialect.name
        values = {"employee_id": employee_id, "date": on, "status": status}

        if dialect.startswith("postgresql"):
            insert = pg_insert
        elif dialect.startswith("sqlite"):
            insert = sqlite_insert
        else:
            raise ValueError(f"Unsupported dialect for attendance upsert: {dialect}")

        stmt = insert(AttendanceRecord).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[AttendanceRecord.employee_id, AttendanceRecord.date],
            set_={"status": stmt.excluded.status},
        ).returning(AttendanceRecord)
        return self.db.scalars(stmt, execution_options={"populate_existing": True}).one()

    def list_attendance_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        return self.db.scalars(
            select(AttendanceRecord)
            .where(AttendanceRecord.employee_id == employee_id)
            .order_by(AttendanceRecord.date.desc())
        ).all()

    # ----------------------------
    # Aggregates
    # ----------------------------
    def count_employees(self) -> int:
        return self.db.scalar(select(func.count()).select_from(Employee)) or 0

    def count_attendance(self, on: date, status: str) -> int:
        return self.db.scalar(
            select(func.count())
            .select_from(AttendanceRecord)
            .where(AttendanceRecord.date == on, AttendanceRecord.status == status)
        ) or 0

    # ----------------------------
    # Transaction control
    # ----------------------------
    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
