from typing import List
from fastapi import APIRouter, Depends, Response, status
from ..deps import employee_id_path, get_service
from ..errors import NotFoundError
from ..schemas import AttendanceOut, EmployeeIn, EmployeeOut, EmployeeUpdate, ErrorOut, ValidationErrorOut
from ..service import HRService

router = APIRouter(prefix="/api/employees", tags=["employees"])

@router.get("", response_model=List[EmployeeOut])
def list_employees(service: HRService = Depends(get_service)):
    return service.list_employees()

@router.get("/{employee_id}", response_model=EmployeeOut, responses={404: {"model": ErrorOut}})
def get_employee(employee_id: int = Depends(employee_id_path), service: HRService = Depends(get_service)):
    employee = service.get_employee(employee_id)
    if employee is None:
        raise NotFoundError("Employee not found")
    return employee

@router.post(
    "",
    response_model=EmployeeOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorOut}, 409: {"model": ErrorOut}},
)
def create_employee(item: EmployeeIn, service: HRService = Depends(get_service)):
    return service.create_employee(item.model_dump())

@router.put(
    "/{employee_id}",
    response_model=EmployeeOut,
    responses={400: {"model": ValidationErrorOut}, 404: {"model": ErrorOut}, 409: {"model": ErrorOut}},
)
def update_employee(
    item: EmployeeUpdate,
    employee_id: int = Depends(employee_id_path),
    service: HRService = Depends(get_service),
):
    # Only fields present in the request body are applied
    return service.update_employee(employee_id, item.model_dump(exclude_unset=True))

@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"model": ErrorOut}})
def delete_employee(employee_id: int = Depends(employee_id_path), service: HRService = Depends(get_service)):
    service.require_employee(employee_id)
    service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{employee_id}/attendance", response_model=List[AttendanceOut], responses={404: {"model": ErrorOut}})
def get_employee_attendance(employee_id: int = Depends(employee_id_path), service: HRService = Depends(get_service)):
    service.require_employee(employee_id)
    return service.get_attendance_by_employee(employee_id)
