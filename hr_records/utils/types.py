from typing import Literal, get_args

# Literal restricts the accepted values
AttendanceStatus = Literal["Present", "Absent", "Leave"]

ATTENDANCE_STATUSES = get_args(AttendanceStatus)

# Editable employee columns, in wire order
EMPLOYEE_FIELDS = [
    "name",
    "email",
    "department",
    "role",
    "joining_date",
]
