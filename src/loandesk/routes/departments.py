# This project was developed with assistance from AI tools.
"""Department directory routes (administrator only)."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.auth import Capability
from ..deps import get_directory
from ..middleware.auth import require_capability
from ..schemas.directory import (
    DepartmentCreate,
    DepartmentListResponse,
    DepartmentResponse,
    PasswordSuggestion,
    PasswordUpdate,
)
from ..services.credentials import generate_department_password
from ..services.directory import DirectoryService

router = APIRouter(dependencies=[Depends(require_capability(Capability.MANAGE_DEPARTMENTS))])


@router.get("/", response_model=DepartmentListResponse)
async def list_departments(
    q: str = Query(default=""),
    directory: DirectoryService = Depends(get_directory),
) -> DepartmentListResponse:
    """List departments, filtered by name or username when ``q`` is given."""
    items = [DepartmentResponse.from_record(d) for d in directory.search_departments(q)]
    return DepartmentListResponse(data=items, total=len(items))


@router.post("/", response_model=DepartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_department(
    body: DepartmentCreate,
    directory: DirectoryService = Depends(get_directory),
) -> DepartmentResponse:
    department = directory.add_department(
        name=body.name,
        username=body.username,
        password=body.password,
        code=body.code,
        description=body.description,
    )
    return DepartmentResponse.from_record(department)


@router.get("/password-suggestion", response_model=PasswordSuggestion)
async def suggest_password() -> PasswordSuggestion:
    return PasswordSuggestion(password=generate_department_password())


@router.get("/{department_id}", response_model=DepartmentResponse)
async def get_department(
    department_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> DepartmentResponse:
    department = directory.get_department(department_id)
    if department is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Department not found",
        )
    return DepartmentResponse.from_record(department)


@router.put("/{department_id}/password", response_model=DepartmentResponse)
async def update_password(
    department_id: str,
    body: PasswordUpdate,
    directory: DirectoryService = Depends(get_directory),
) -> DepartmentResponse:
    department = directory.update_department_password(department_id, body.new_password)
    return DepartmentResponse.from_record(department)


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_department(
    department_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> None:
    directory.delete_department(department_id)
