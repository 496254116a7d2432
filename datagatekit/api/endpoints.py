# datagatekit/api/endpoints.py
from dataclasses import asdict
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query
from datagatekit.api.auth import create_access_token, get_current_user
from datagatekit.api.schemas import (
    GroupOut, LoginRequest, QueryResultOut, RegisterRequest, TableInfoOut, TokenResponse, UserOut,
)
from datagatekit.enums import CredentialMode
from datagatekit.exceptions import (
    DatastoreOperationError, DuplicateEmailError, FilterRejectedError, ForbiddenError, InvalidCredentialsError,
)
from datagatekit.models.identity import User
from datagatekit.orchestrator import GateOrchestrator
import logging

logger = logging.getLogger(__name__)


class DataGateAPI:
    """HTTP routes over the identity directory and the access gate."""

    def __init__(self, orchestrator: GateOrchestrator):
        self.router = APIRouter()
        self.orchestrator = orchestrator
        self._register_routes()

    def _register_routes(self):
        self.router.post("/auth/token", response_model=TokenResponse)(self.login)
        self.router.post("/auth/register", response_model=UserOut, status_code=201)(self.register)
        self.router.get("/groups", response_model=List[GroupOut])(self.list_groups)
        self.router.get("/schemas", response_model=List[str])(self.list_schemas)
        self.router.get("/schemas/{schema_name}/tables", response_model=List[str])(self.list_tables)
        self.router.get("/schemas/{schema_name}/tables/{table_name}", response_model=TableInfoOut)(self.table_info)
        self.router.get("/schemas/{schema_name}/tables/{table_name}/rows", response_model=QueryResultOut)(self.read_rows)
        self.router.put("/schemas/{schema_name}/tables/{table_name}/rows")(self.replace_rows)

    def login(self, credentials: LoginRequest):
        try:
            user = self.orchestrator.directory.login(credentials.email, credentials.password)
        except InvalidCredentialsError as e:
            raise HTTPException(status_code=401, detail=str(e))
        access_token = create_access_token(
            {"sub": user.email, "uid": user.id},
            self.orchestrator.settings,
        )
        return TokenResponse(access_token=access_token, user=UserOut(**asdict(user)))

    def register(self, payload: RegisterRequest):
        if payload.password is None and self.orchestrator.settings.credential_mode == CredentialMode.BCRYPT:
            raise HTTPException(status_code=422, detail="Password is required.")
        try:
            user = self.orchestrator.directory.register(payload.email, payload.group_id, payload.password)
        except DuplicateEmailError as e:
            raise HTTPException(status_code=409, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        return UserOut(**asdict(user))

    def list_groups(self):
        return [GroupOut(**asdict(group)) for group in self.orchestrator.directory.groups()]

    def list_schemas(self, user: User = Depends(get_current_user)):
        return self.orchestrator.gate.list_accessible_schemas(user)

    def list_tables(self, schema_name: str, user: User = Depends(get_current_user)):
        try:
            return self.orchestrator.gate.list_tables(user, schema_name)
        except ForbiddenError as e:
            raise HTTPException(status_code=403, detail=str(e))
        except DatastoreOperationError as e:
            logger.error(f"Server error listing tables in `{schema_name}`: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")

    def table_info(self, schema_name: str, table_name: str, user: User = Depends(get_current_user)):
        gate = self.orchestrator.gate
        try:
            info = gate.get_table_info(user, schema_name, table_name)
        except ForbiddenError as e:
            raise HTTPException(status_code=403, detail=str(e))
        except DatastoreOperationError as e:
            logger.error(f"Server error reading info for `{schema_name}.{table_name}`: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")
        return TableInfoOut(**asdict(info), can_write=gate.can_write(user, schema_name))

    def read_rows(
        self,
        schema_name: str,
        table_name: str,
        page: int = Query(1, ge=1),
        filter_text: Optional[str] = Query(None, alias="filter"),
        user: User = Depends(get_current_user),
    ):
        try:
            result = self.orchestrator.gate.query(user, schema_name, table_name, page, filter_text)
        except ForbiddenError as e:
            raise HTTPException(status_code=403, detail=str(e))
        except FilterRejectedError as e:
            raise HTTPException(status_code=400, detail={"reason": e.reason.value, "message": str(e)})
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except DatastoreOperationError as e:
            logger.error(f"Server error reading `{schema_name}.{table_name}`: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")
        return QueryResultOut(**asdict(result))

    def replace_rows(
        self,
        schema_name: str,
        table_name: str,
        rows: List[Dict[str, Any]] = Body(...),
        user: User = Depends(get_current_user),
    ):
        try:
            self.orchestrator.gate.replace(user, schema_name, table_name, rows)
        except ForbiddenError as e:
            raise HTTPException(status_code=403, detail=str(e))
        except DatastoreOperationError as e:
            logger.error(f"Server error replacing `{schema_name}.{table_name}`: {e}")
            raise HTTPException(status_code=500, detail="Internal server error")
        return {"message": f"Replaced `{schema_name}.{table_name}` with {len(rows)} rows by `{user.email}`"}
