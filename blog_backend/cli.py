"""
Account administration command.

Registration over HTTP always yields a reader, so this is the way to get
admins and authors.

Usage:
    blog-admin create -u alice -e alice@example.com -r admin
    blog-admin create -u bob -e bob@example.com -p Secret123 -r author
    blog-admin promote -u carol -r author
"""

from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter
from asyncio import run as asyncio_run
from collections.abc import Sequence
from dataclasses import dataclass
from getpass import getpass
from secrets import token_urlsafe

from blog_backend.configs import ROLES
from blog_backend.db import Database
from blog_backend.errors import DuplicateEntryError, NotFoundError
from blog_backend.models import UserDB
from blog_backend.repositories import UserRepository
from blog_backend.schemas.user import UserCreate
from blog_backend.services import AuthService


@dataclass(frozen=True)
class AccountData:
    """
    Account creation data.

    Attributes
    ----------
    username : str
        Unique username.
    email : str
        Unique email address.
    password : str
        Plaintext password (will be hashed).
    role : str
        One of admin, author, reader.
    """

    username: str
    email: str
    password: str
    role: str = "admin"


def generate_secure_password(length: int = 16) -> str:
    """
    Generate a random password.

    Parameters
    ----------
    length : int
        Number of random bytes (default: 16).

    Returns
    -------
    str
        URL-safe random password.
    """
    return token_urlsafe(length)


async def create_account(database: Database, data: AccountData) -> UserDB:
    """
    Create a user with the requested role.

    Parameters
    ----------
    database : Database
        Target database.
    data : AccountData
        Account data.

    Returns
    -------
    UserDB
        Created user.

    Raises
    ------
    DuplicateEntryError
        If the username or email is taken.
    """
    async with database.transaction() as session:
        service = AuthService(UserRepository(session))
        user = UserCreate(username=data.username, email=data.email, password=data.password)
        return await service.register_user(user, role=data.role)


async def promote_account(database: Database, username: str, role: str) -> UserDB:
    """
    Change the role of an existing user.

    Parameters
    ----------
    database : Database
        Target database.
    username : str
        Exact username.
    role : str
        New role.

    Returns
    -------
    UserDB
        Updated user.

    Raises
    ------
    NotFoundError
        If no user has that username.
    """
    async with database.transaction() as session:
        repo = UserRepository(session)
        user = await repo.get_by_username(username)
        if user is None:
            mssg = f"User '{username}' not found"
            raise NotFoundError(mssg)
        return await repo.update_role(user, role)


def parse_args(argv: Sequence[str] | None = None) -> Namespace:
    """
    Parse command line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = ArgumentParser(
        prog="blog-admin",
        description="Create privileged accounts or change the role of existing ones.",
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (default: DATABASE_URL setting)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create a new account")
    create.add_argument("-u", "--username", required=True, help="Username")
    create.add_argument("-e", "--email", required=True, help="Email address")
    create.add_argument(
        "-p",
        "--password",
        default=None,
        help="Password (prompted for when omitted; empty input auto-generates one)",
    )
    create.add_argument("-r", "--role", choices=ROLES, default="admin", help="Role (default: admin)")

    promote = commands.add_parser("promote", help="Change the role of an existing account")
    promote.add_argument("-u", "--username", required=True, help="Username")
    promote.add_argument(
        "-r",
        "--role",
        choices=("admin", "author"),
        default="admin",
        help="New role (default: admin)",
    )

    return parser.parse_args(argv)


async def run_command(args: Namespace, database: Database) -> UserDB:
    """Dispatch the parsed command against the database."""
    if args.command == "promote":
        return await promote_account(database, args.username, args.role)

    password = args.password
    if password is None:
        password = getpass("Password (leave empty to generate): ") or generate_secure_password()
        print(f"Password: {password}")

    data = AccountData(
        username=args.username,
        email=args.email,
        password=password,
        role=args.role,
    )
    await database.create_all()
    return await create_account(database, data)


async def _main(args: Namespace) -> UserDB:
    database = Database(args.database_url)
    try:
        return await run_command(args, database)
    finally:
        await database.dispose()


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point of the ``blog-admin`` command.

    Returns
    -------
    int
        Process exit code.
    """
    args = parse_args(argv)
    try:
        user = asyncio_run(_main(args))
    except (DuplicateEntryError, NotFoundError) as e:
        print(f"❌ {e.detail}")
        return 1

    print(f"✅ {user.username} ({user.id}) is now {user.role}")
    return 0
