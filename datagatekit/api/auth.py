# datagatekit/api/auth.py
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from datagatekit.config import GateSettings
from datagatekit.models.identity import User
from datagatekit.orchestrator import GateOrchestrator

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def create_access_token(data: dict, settings: GateSettings, expires_delta: Optional[timedelta] = None) -> str:
    """Generate a JWT token for authentication."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def get_orchestrator(request: Request) -> GateOrchestrator:
    return request.app.state.orchestrator


def get_current_user(
    token: str = Depends(oauth2_scheme),
    orchestrator: GateOrchestrator = Depends(get_orchestrator),
) -> User:
    """Validate the JWT token and resolve the caller through the directory."""
    credentials_error = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    settings = orchestrator.settings
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise credentials_error
    email = payload.get("sub")
    if email is None:
        raise credentials_error
    user = orchestrator.directory.find_by_email(email)
    if user is None:
        raise credentials_error
    return user
