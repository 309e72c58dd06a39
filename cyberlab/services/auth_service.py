"""Auth service for authentication."""

from loguru import logger

from cyberlab.core.config import Settings
from cyberlab.core.exceptions import EmailAlreadyExistsError
from cyberlab.core.security import create_access_token
from cyberlab.db.store import DataStore
from cyberlab.schemas.auth import AuthResponse, UserRecord, UserRegister
from cyberlab.services.user_service import UserService


class AuthService:
    """Authentication service."""

    def __init__(self, store: DataStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings
        self.user_service = UserService(store, settings)

    def login(self, email: str, password: str) -> AuthResponse | None:
        """Authenticate user and return a token plus the user."""
        user = self.user_service.authenticate(email, password)
        if not user:
            logger.warning(f"Failed login attempt for {email}")
            return None
        return self._issue(user)

    def register(self, data: UserRegister) -> AuthResponse:
        """Register a new user and log them in."""
        if self.user_service.get_by_email(data.email):
            raise EmailAlreadyExistsError(data.email)

        user = self.user_service.create_user(
            email=data.email,
            password=data.password,
            first_name=data.first_name,
            last_name=data.last_name,
        )
        logger.info(f"Registered user {user.id}")
        return self._issue(user)

    def _issue(self, user: UserRecord) -> AuthResponse:
        token = create_access_token(
            data={
                "sub": user.id,
                "email": user.email,
                "role": user.role.value,
            },
            settings=self.settings,
        )
        return AuthResponse(token=token, user=self.user_service.to_dto(user))
