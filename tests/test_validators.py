from datetime import date

import pytest
from pydantic import ValidationError

from hr_records.schemas import AttendanceIn, EmployeeIn, EmployeeUpdate
from hr_records.utils.validators import parse_iso_date, require_text


@pytest.mark.parametrize("value", ["2024-02-30", "2024-13-01", "20240101", "2024-1-1", "", "  ", None, 20240101])
def test_parse_iso_date_rejects(value):
    with pytest.raises(ValueError):
        parse_iso_date(value)


def test_parse_iso_date_accepts():
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)
    assert parse_iso_date(date(2024, 1, 1)) == date(2024, 1, 1)


def test_require_text_strips():
    assert require_text("  Eng ") == "Eng"
    with pytest.raises(ValueError):
        require_text(" ")


def test_employee_in_from_camel_case():
    item = EmployeeIn.model_validate(
        {"name": " A ", "email": "a@x.com", "department": "Eng", "role": "Dev", "joiningDate": "2024-01-01"}
    )
    assert item.name == "A"
    assert item.joining_date == date(2024, 1, 1)


def test_employee_update_keeps_only_sent_fields():
    item = EmployeeUpdate.model_validate({"role": "Lead"})
    assert item.model_dump(exclude_unset=True) == {"role": "Lead"}


def test_employee_update_rejects_null_email():
    with pytest.raises(ValidationError):
        EmployeeUpdate.model_validate({"email": None})


def test_attendance_in_status_is_closed_set():
    with pytest.raises(ValidationError):
        AttendanceIn.model_validate({"employeeId": 1, "date": "2024-01-02", "status": "Sick"})
    item = AttendanceIn.model_validate({"employeeId": 1, "date": "2024-01-02", "status": "Leave"})
    assert item.model_dump() == {"employee_id": 1, "date": date(2024, 1, 2), "status": "Leave"}
