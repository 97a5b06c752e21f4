"""
Password hashing module using bcrypt with passlib's CryptContext.

Hashes are salted per password and computed with a cost factor of
``settings.BCRYPT_ROUNDS``. The module-level coroutines run the hasher in a
thread pool so the event loop is never blocked by a hash.
"""

from asyncio import get_event_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext

from blog_backend.configs import settings
from blog_backend.errors import PasswordHashingError
from blog_backend.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using bcrypt.

    Args:
        rounds: bcrypt cost factor.
    """

    def __init__(self, rounds: int = settings.BCRYPT_ROUNDS) -> None:
        self.rounds = rounds
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password with a fresh salt.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hash in modular crypt format (``$2b$10$...``)

        Raises:
            PasswordHashingError: If the password is empty or hashing fails
        """
        if not password:
            mssg = "Password cannot be empty"
            raise PasswordHashingError(mssg)

        try:
            return self.pwd_context.hash(password)
        except Exception as e:
            logger.exception("Error hashing password")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a stored hash.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_password")
            >>> hasher.verify("my_password", hashed)
            True
            >>> hasher.verify("wrong_password", hashed)
            False
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False


_default_hasher = PasswordHasher()


def get_password_hasher() -> PasswordHasher:
    """
    Get the default password hasher instance.

    Returns:
        PasswordHasher: The process-wide password hasher
    """
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password in the thread pool using the default hasher.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password in the thread pool using the default hasher.

    Args:
        password: The plaintext password to verify
        hashed_password: The hashed password to verify against

    Returns:
        bool: True if password matches, False otherwise
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )
