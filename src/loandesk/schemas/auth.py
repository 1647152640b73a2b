# This project was developed with assistance from AI tools.
"""Authentication and authorization schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..db.enums import UserRole
from ..db.models import CamelModel


class DataScope(BaseModel):
    """Application visibility rules derived from the actor's role."""

    full_pipeline: bool = False
    department: str | None = None
    department_id: str | None = None
    bank_branch: str | None = None


class UserContext(BaseModel):
    """The authenticated actor, rebuilt from the stored session record."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    role: UserRole
    name: str
    login_time: datetime
    data_scope: DataScope = Field(default_factory=DataScope)


class LoginRequest(BaseModel):
    username: str
    password: str


class MeResponse(CamelModel):
    user_id: str
    role: UserRole
    name: str
    login_time: datetime
    capabilities: list[str]
