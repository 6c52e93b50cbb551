import logging
from datetime import date, datetime, tzinfo
from typing import Callable, Optional, Sequence

from .errors import ConflictError, NotFoundError
from .models import AttendanceRecord, Employee
from .store import RecordStore
from .utils.types import EMPLOYEE_FIELDS

logger = logging.getLogger(__name__)


class HRService:
    """
    Business rules over a RecordStore: email uniqueness, attendance upsert,
    cascading cleanup on delete and dashboard counts.
    Each mutating call ends with exactly one commit on the store.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        tz: Optional[tzinfo] = None,
        clock: Optional[Callable[[tzinfo], datetime]] = None,
    ):
        self._store = store
        self._tz = tz
        self._clock = clock or datetime.now

    def today(self) -> date:
        return self._clock(self._tz).date()

    # ----------------------------
    # Employees
    # ----------------------------
    def list_employees(self) -> Sequence[Employee]:
        return self._store.list_employees()

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._store.get_employee(employee_id)

    def get_employee_by_email(self, email: str) -> Optional[Employee]:
        return self._store.get_employee_by_email(email)

    def require_employee(self, employee_id: int) -> Employee:
        employee = self._store.get_employee(employee_id)
        if employee is None:
            logger.warning("Employee %s not found", employee_id)
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(self, data: dict) -> Employee:
        values = {k: data[k] for k in EMPLOYEE_FIELDS}
        if self._store.get_employee_by_email(values["email"]) is not None:
            logger.warning("Rejected employee create, email %s already exists", values["email"])
            raise ConflictError("Email already exists")

        employee = self._store.insert_employee(values)
        self._store.commit()
        logger.info("Created employee %s (%s)", employee.id, employee.email)
        return employee

    def update_employee(self, employee_id: int, changes: dict) -> Employee:
        changes = {k: v for k, v in changes.items() if k in EMPLOYEE_FIELDS}
        employee = self.require_employee(employee_id)
        if not changes:
            return employee

        email = changes.get("email")
        if email is not None:
            holder = self._store.get_employee_by_email(email)
            if holder is not None and holder.id != employee_id:
                logger.warning("Rejected update of employee %s, email %s is taken", employee_id, email)
                raise ConflictError("Email already exists")

        updated = self._store.update_employee(employee_id, changes)
        if updated is None:
            # Deleted between the existence check and the write
            self._store.rollback()
            raise NotFoundError("Employee not found")
        self._store.commit()
        logger.info("Updated employee %s fields=%s", employee_id, sorted(changes))
        return updated

    def delete_employee(self, employee_id: int) -> None:
        removed = self._store.delete_attendance_for_employee(employee_id)
        self._store.delete_employee(employee_id)
        self._store.commit()
        logger.info("Deleted employee %s and %d attendance record(s)", employee_id, removed)

    # ----------------------------
    # Attendance
    # ----------------------------
    def mark_attendance(self, data: dict) -> AttendanceRecord:
        record = self._store.upsert_attendance(data["employee_id"], data["date"], data["status"])
        self._store.commit()
        logger.info(
            "Marked employee %s %s on %s", record.employee_id, record.status, record.date.isoformat()
        )
        return record

    def get_attendance_by_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        return self._store.list_attendance_for_employee(employee_id)

    # ----------------------------
    # Dashboard
    # ----------------------------
    def get_dashboard_stats(self) -> dict:
        today = self.today()
        return {
            "total_employees": self._store.count_employees(),
            "present_today": self._store.count_attendance(today, "Present"),
        }
