# auth.py
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordRequestForm

from . import crud, schemas
from .config import Settings
from .database import InMemoryDatabase
from .security import create_access_token

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"]
)


def get_database(request: Request) -> InMemoryDatabase:
    """FastAPI dependency returning the app's in-memory database."""
    return request.app.state.db


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post("/token", response_model=schemas.Token)
async def login_for_access_token(
        form_data: OAuth2PasswordRequestForm = Depends(),
        db: InMemoryDatabase = Depends(get_database),
        settings: Settings = Depends(get_app_settings)
):
    """Issues the same bearer token as the GraphQL login mutation."""
    user = await crud.authenticate_user(db, form_data.username, form_data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"id": user.id, "role": user.role.value},
        settings=settings,
    )
    return {"access_token": access_token, "token_type": "bearer"}
