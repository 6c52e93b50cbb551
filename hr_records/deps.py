from fastapi import Depends
from sqlalchemy.orm import Session
from .config import TIMEZONE
from .db import get_db
from .errors import NotFoundError
from .service import HRService
from .store import SqlRecordStore

# Largest value an integer primary key column can hold
MAX_ID = 2**63 - 1

# One service per request, bound to that request's session
def get_service(db: Session = Depends(get_db)) -> HRService:
    return HRService(SqlRecordStore(db), tz=TIMEZONE)

# Path ids that cannot name a row are reported as missing, not malformed
def employee_id_path(employee_id: str) -> int:
    try:
        value = int(employee_id)
    except ValueError:
        raise NotFoundError("Employee not found")
    if not -MAX_ID <= value <= MAX_ID:
        raise NotFoundError("Employee not found")
    return value
