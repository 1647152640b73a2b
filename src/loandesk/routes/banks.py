# This project was developed with assistance from AI tools.
"""Bank and branch directory routes.

Departments may read the bank list (the application form needs it);
everything else is administrator only.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.auth import Capability
from ..db.models import BranchCredential
from ..deps import get_directory
from ..middleware.auth import require_capability
from ..schemas.directory import (
    BankCreate,
    BankListResponse,
    BankResponse,
    BranchCreate,
    CredentialListResponse,
)
from ..services.directory import DirectoryService

router = APIRouter()

_can_view = [Depends(require_capability(Capability.VIEW_BANKS))]
_can_manage = [Depends(require_capability(Capability.MANAGE_BANKS))]


@router.get("/", response_model=BankListResponse, dependencies=_can_view)
async def list_banks(
    q: str = Query(default=""),
    directory: DirectoryService = Depends(get_directory),
) -> BankListResponse:
    """List banks whose name or any branch name contains ``q``."""
    items = [BankResponse.from_record(b) for b in directory.search_banks(q)]
    return BankListResponse(data=items, total=len(items))


@router.post(
    "/",
    response_model=BankResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=_can_manage,
)
async def create_bank(
    body: BankCreate,
    directory: DirectoryService = Depends(get_directory),
) -> BankResponse:
    return BankResponse.from_record(directory.add_bank(body.name))


@router.get("/credentials", response_model=CredentialListResponse, dependencies=_can_manage)
async def list_credentials(
    q: str = Query(default=""),
    directory: DirectoryService = Depends(get_directory),
) -> CredentialListResponse:
    """Every branch login, filtered by bank or branch name."""
    items = directory.search_credentials(q)
    return CredentialListResponse(data=items, total=len(items))


@router.get("/{bank_id}", response_model=BankResponse, dependencies=_can_view)
async def get_bank(
    bank_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> BankResponse:
    bank = directory.get_bank(bank_id)
    if bank is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Bank not found",
        )
    return BankResponse.from_record(bank)


@router.delete("/{bank_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=_can_manage)
async def delete_bank(
    bank_id: str,
    directory: DirectoryService = Depends(get_directory),
) -> None:
    directory.delete_bank(bank_id)


@router.post(
    "/{bank_id}/branches",
    response_model=BranchCredential,
    status_code=status.HTTP_201_CREATED,
    dependencies=_can_manage,
)
async def add_branch(
    bank_id: str,
    body: BranchCreate,
    directory: DirectoryService = Depends(get_directory),
) -> BranchCredential:
    """Add a branch and return its newly issued login."""
    return directory.add_branch(bank_id, body.branch_name)


@router.delete(
    "/{bank_id}/branches/{index}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=_can_manage,
)
async def delete_branch(
    bank_id: str,
    index: int,
    directory: DirectoryService = Depends(get_directory),
) -> None:
    directory.delete_branch(bank_id, index)


@router.post(
    "/{bank_id}/branches/{index}/password",
    response_model=BranchCredential,
    dependencies=_can_manage,
)
async def reset_branch_password(
    bank_id: str,
    index: int,
    directory: DirectoryService = Depends(get_directory),
) -> BranchCredential:
    return directory.reset_branch_password(bank_id, index)
