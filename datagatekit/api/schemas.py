# datagatekit/api/schemas.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, field_validator
from datagatekit.validators import validate_email, validate_password


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: str
    group_id: Optional[int] = None
    password: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        return validate_email(value)

    @field_validator("password")
    @classmethod
    def check_password(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return validate_password(value)


class UserOut(BaseModel):
    id: int
    email: str
    is_active: bool
    group_id: Optional[int] = None
    group_name: Optional[str] = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut


class GroupOut(BaseModel):
    id: int
    name: str
    description: str


class TableInfoOut(BaseModel):
    schema_name: str
    table_name: str
    full_name: str
    row_count: int
    column_count: int
    can_write: bool


class QueryResultOut(BaseModel):
    rows: List[Dict[str, Any]]
    row_count: int
    total_rows: int
    page: int
    page_size: int
    total_pages: int
