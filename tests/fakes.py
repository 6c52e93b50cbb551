import itertools
import threading
from datetime import datetime

from hr_records.errors import ConflictError
from hr_records.models import AttendanceRecord, Employee


class InMemoryRecordStore:
    """RecordStore kept in dicts. Writes apply immediately; commit() counts calls."""

    def __init__(self):
        self.employees = {}
        self.attendance = {}
        self.commits = 0
        self._ids = itertools.count(1)
        self._attendance_ids = itertools.count(1)
        self._lock = threading.Lock()

    def list_employees(self):
        return sorted(self.employees.values(), key=lambda e: (e.name, e.id))

    def get_employee(self, employee_id):
        return self.employees.get(employee_id)

    def get_employee_by_email(self, email):
        return next((e for e in self.employees.values() if e.email == email), None)

    def insert_employee(self, values):
        if self.get_employee_by_email(values["email"]) is not None:
            raise ConflictError("Email already exists")
        employee = Employee(id=next(self._ids), created_at=datetime(2024, 1, 1, 8, 0), **values)
        self.employees[employee.id] = employee
        return employee

    def update_employee(self, employee_id, changes):
        employee = self.employees.get(employee_id)
        if employee is None:
            return None
        for key, value in changes.items():
            setattr(employee, key, value)
        return employee

    def delete_employee(self, employee_id):
        self.employees.pop(employee_id, None)

    def delete_attendance_for_employee(self, employee_id):
        doomed = [k for k, r in self.attendance.items() if r.employee_id == employee_id]
        for key in doomed:
            del self.attendance[key]
        return len(doomed)

    def upsert_attendance(self, employee_id, on, status):
        with self._lock:
            key = (employee_id, on)
            record = self.attendance.get(key)
            if record is None:
                record = AttendanceRecord(id=next(self._attendance_ids), employee_id=employee_id, date=on, status=status)
                self.attendance[key] = record
            else:
                record.status = status
            return record

    def list_attendance_for_employee(self, employee_id):
        rows = [r for r in self.attendance.values() if r.employee_id == employee_id]
        return sorted(rows, key=lambda r: r.date, reverse=True)

    def count_employees(self):
        return len(self.employees)

    def count_attendance(self, on, status):
        return sum(1 for r in self.attendance.values() if r.date == on and r.status == status)

    def commit(self):
        self.commits += 1

    def rollback(self):
        pass
