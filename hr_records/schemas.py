import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel
from .utils.types import AttendanceStatus
from .utils.validators import parse_iso_date, require_text

# camelCase on the wire, snake_case in Python
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

# Shared field rules for create and partial update
class _EmployeeFields(CamelModel):
    @field_validator("name", "department", "role", check_fields=False)
    @classmethod
    def check_text(cls, v):
        if v is None:
            raise ValueError("Must not be null")
        return require_text(v)

    @field_validator("email", check_fields=False)
    @classmethod
    def check_email(cls, v):
        if v is None:
            raise ValueError("Must not be null")
        return v

    @field_validator("joining_date", mode="before", check_fields=False)
    @classmethod
    def parse_joining_date(cls, v):
        return parse_iso_date(v)

# Input schema for Employee
class EmployeeIn(_EmployeeFields):
    name: str
    email: EmailStr
    department: str
    role: str
    joining_date: dt.date

# Partial update: omitted fields are left alone, explicit nulls are rejected
class EmployeeUpdate(_EmployeeFields):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    department: Optional[str] = None
    role: Optional[str] = None
    joining_date: Optional[dt.date] = None

class EmployeeOut(CamelModel):
    id: int
    name: str
    email: str
    department: str
    role: str
    joining_date: dt.date
    created_at: Optional[dt.datetime] = None

# Input schema for marking attendance
class AttendanceIn(CamelModel):
    employee_id: int
    date: dt.date
    status: AttendanceStatus

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v):
        return parse_iso_date(v)

class AttendanceOut(CamelModel):
    id: int
    employee_id: int
    date: dt.date
    status: AttendanceStatus

class DashboardStats(CamelModel):
    total_employees: int
    present_today: int

# Error payloads
class ErrorOut(BaseModel):
    message: str

class ValidationErrorOut(ErrorOut):
    field: Optional[str] = None
