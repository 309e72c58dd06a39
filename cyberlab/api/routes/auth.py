"""Authentication API endpoints."""

from fastapi import APIRouter, HTTPException, status

from cyberlab.core.deps import AppSettings, Store, TokenPayload
from cyberlab.core.exceptions import EmailAlreadyExistsError
from cyberlab.schemas.auth import AuthResponse, UserDTO, UserLogin, UserRegister
from cyberlab.services.auth_service import AuthService
from cyberlab.services.user_service import UserService

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    store: Store,
    settings: AppSettings,
) -> AuthResponse:
    """
    Login and get JWT access token.

    - **email**: User email
    - **password**: User password
    """
    result = AuthService(store, settings).login(credentials.email, credentials.password)

    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return result


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: UserRegister,
    store: Store,
    settings: AppSettings,
) -> AuthResponse:
    """
    Register a new user and get JWT access token.

    - **email**: User email
    - **password**: Password, at least 6 characters
    - **firstName** / **lastName**: User name
    """
    try:
        return AuthService(store, settings).register(data)
    except EmailAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e


@router.get("/me", response_model=UserDTO)
async def get_me(
    payload: TokenPayload,
    store: Store,
    settings: AppSettings,
) -> UserDTO:
    """Get the user the bearer token was issued to."""
    user_service = UserService(store, settings)
    user = user_service.get_by_id(payload["sub"])

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )

    return user_service.to_dto(user)
