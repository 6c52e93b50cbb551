import re
from datetime import date

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def parse_iso_date(s) -> date:
    """
    Accepts a calendar date in the form 'YYYY-MM-DD' only.
    Rejects impossible dates such as '2024-02-30'.
    """
    if isinstance(s, date):
        return s
    if not isinstance(s, str) or not s.strip():
        raise ValueError("Date is required")

    txt = s.strip()
    if not _ISO_DATE.match(txt):
        raise ValueError(f"Invalid date: {s} (expected YYYY-MM-DD)")
    try:
        return date.fromisoformat(txt)
    except ValueError as e:
        raise ValueError(f"Invalid date: {s}") from e

def require_text(s: str) -> str:
    """
    Strips surrounding whitespace and rejects empty strings.
    """
    txt = s.strip()
    if not txt:
        raise ValueError("Must not be empty")
    return txt
