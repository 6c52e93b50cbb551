import logging
from datetime import date
from .service import HRService

logger = logging.getLogger(__name__)

SAMPLE_EMPLOYEES = [
    {"name": "John Doe", "email": "john.doe@example.com", "department": "Engineering",
     "role": "Software Engineer", "joining_date": date(2023, 1, 15)},
    {"name": "Jane Smith", "email": "jane.smith@example.com", "department": "HR",
     "role": "HR Manager", "joining_date": date(2023, 3, 10)},
    {"name": "Alice Johnson", "email": "alice.j@example.com", "department": "Marketing",
     "role": "Marketing Specialist", "joining_date": date(2023, 6, 1)},
]

def seed_sample_data(service: HRService) -> bool:
    """
    Inserts a few employees and attendance rows when the employee table is empty.
    Returns True if anything was written.
    """
    if service.list_employees():
        return False

    logger.info("Seeding database...")
    john, jane, _ = [service.create_employee(e) for e in SAMPLE_EMPLOYEES]
    today = service.today()

    service.mark_attendance({"employee_id": john.id, "date": today, "status": "Present"})
    service.mark_attendance({"employee_id": jane.id, "date": today, "status": "Absent"})
    service.mark_attendance({"employee_id": john.id, "date": date(2023, 10, 1), "status": "Present"})
    logger.info("Database seeded successfully")
    return True
