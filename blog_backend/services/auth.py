"""Authentication service: registration and credential checks."""

from blog_backend.errors.auth import InvalidCredentialsError
from blog_backend.managers.password_manager import hash_password, verify_password
from blog_backend.managers.token_manager import create_access_token
from blog_backend.models import UserDB
from blog_backend.repositories import UserRepository
from blog_backend.schemas.auth import Credentials, TokenResponse
from blog_backend.schemas.user import UserCreate


class AuthService:
    """Service for handling user registration and login."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def register_user(self, user: UserCreate, role: str = "reader") -> UserDB:
        """
        Register a new user.

        The password is hashed here, once, before the row is built.

        Args:
            user: Validated registration data
            role: Role of the new account; the public route always uses ``reader``

        Returns:
            UserDB: Created user

        Raises:
            DuplicateEntryError: If username or email already exists
        """
        password_hash = await hash_password(user.password)
        db_user = UserDB(
            username=user.username,
            email=user.email,
            password=password_hash,
            role=role,
        )
        return await self.user_repo.create(db_user)

    async def authenticate_user(self, credentials: Credentials) -> UserDB:
        """
        Authenticate a user by exact username and password.

        Args:
            credentials: Username and plaintext password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is
                wrong; both cases look the same to the caller
        """
        user = await self.user_repo.get_by_username(credentials.username)
        if not user:
            raise InvalidCredentialsError

        if not await verify_password(credentials.password, user.password):
            raise InvalidCredentialsError

        return user

    def create_token_for_user(self, user: UserDB) -> TokenResponse:
        """
        Issue an access token for an authenticated user.

        Args:
            user: Authenticated user

        Returns:
            TokenResponse: Signed token carrying the user's id and role
        """
        return TokenResponse(token=create_access_token(user.id, user.role))
