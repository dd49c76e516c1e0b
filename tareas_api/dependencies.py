"""FastAPI dependency injection: database handle, current user."""

from typing import Annotated, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pymongo.database import Database

from tareas_api.config import get_settings
from tareas_api.core.exceptions import TokenError, to_http_exception
from tareas_api.db.models.user import User
from tareas_api.services.auth_service import get_user_by_token

security = HTTPBearer(auto_error=False)


def get_db(request: Request) -> Database:
    """Database handle on the client opened at startup."""
    return request.app.state.mongo_client[get_settings().mongodb_db]


def get_current_user(
    db: Annotated[Database, Depends(get_db)],
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> User:
    """Require a valid bearer token; raise 401 otherwise."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return get_user_by_token(db, credentials.credentials)
    except TokenError as e:
        raise to_http_exception(e)


DbSession = Annotated[Database, Depends(get_db)]
CurrentUser = Annotated[User, Depends(get_current_user)]
