"""User repository for database operations."""

from sqlalchemy import select

from blog_backend.models import UserDB
from blog_backend.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """
    Repository for User database operations.

    Hashing is not done here: callers hand over a ``UserDB`` whose password
    is already a hash.
    """

    model = UserDB

    async def create(self, user: UserDB) -> UserDB:
        """
        Insert a new user.

        Args:
            user: User row with a hashed password

        Returns:
            UserDB: Created user

        Raises:
            DuplicateEntryError: If username or email already exists
        """
        return await self._save(user)

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get a user by exact username.

        Args:
            username: Username to look up

        Returns:
            UserDB | None: User if found, None otherwise
        """
        statement = select(UserDB).where(UserDB.username == username)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update_role(self, user: UserDB, role: str) -> UserDB:
        """
        Change the role of an existing user.

        Args:
            user: User to update
            role: New role

        Returns:
            UserDB: Updated user
        """
        user.role = role
        return await self._save(user)
