"""User service for user management."""

from cyberlab.core.config import Settings
from cyberlab.core.security import get_password_hash, verify_password
from cyberlab.db.store import DataStore
from cyberlab.schemas.auth import UserDTO, UserRecord, UserRole
from cyberlab.services.base_service import BaseService


class UserService(BaseService[UserRecord]):
    """User service for authentication and management."""

    def __init__(self, store: DataStore, settings: Settings | None = None):
        super().__init__(store.users)
        self.settings = settings

    def get_by_email(self, email: str) -> UserRecord | None:
        """Get user by email."""
        matches = self.records.filter(lambda u: u.email == email)
        return matches[0] if matches else None

    def authenticate(self, email: str, password: str) -> UserRecord | None:
        """Authenticate user by email and password."""
        user = self.get_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    def create_user(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        role: UserRole = UserRole.USER,
    ) -> UserRecord:
        """Create new user."""
        return self.records.create({
            "email": email,
            "hashed_password": get_password_hash(password, self.settings),
            "first_name": first_name,
            "last_name": last_name,
            "role": role,
        })

    @staticmethod
    def to_dto(user: UserRecord) -> UserDTO:
        """Convert a stored user to the response schema."""
        return UserDTO.model_validate(user.model_dump())
