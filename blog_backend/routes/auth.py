"""Authentication routes for handling user registration and login."""

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from blog_backend.dependencies import AuthServiceDep
from blog_backend.errors import failure_boundary
from blog_backend.schemas.auth import Credentials, TokenResponse
from blog_backend.schemas.common import MessageResponse
from blog_backend.schemas.user import UserCreate
from blog_backend.utils import json_body

router = APIRouter(prefix="/api/auth", tags=["🔐 Auth"])


@router.post(
    "/register",
    response_class=ORJSONResponse,
    response_model=MessageResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a reader account. The role is never taken from the request.",
    responses={
        201: {
            "content": {
                "application/json": {"example": {"message": "User registered successfully"}},
            },
        },
        500: {
            "description": "Registration failed (missing body or field, duplicate username or email)",
            "content": {"application/json": {"example": {"error": "User registration failed"}}},
        },
    },
    operation_id="auth_register",
    openapi_extra=json_body(UserCreate),
)
async def register(request: Request, auth_service: AuthServiceDep) -> MessageResponse:
    """
    Register a new user.

    Parameters
    ----------
    request : Request
        Incoming request; its JSON body holds username, email and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    MessageResponse
        Confirmation message.

    Raises
    ------
    RequestFailedError
        On any failure, duplicates included.
    """
    with failure_boundary("User registration failed"):
        user = UserCreate.model_validate(await request.json())
        await auth_service.register_user(user)
    return MessageResponse(message="User registered successfully")


@router.post(
    "/login",
    response_class=ORJSONResponse,
    response_model=TokenResponse,
    summary="Login for access token",
    description="Authenticate with username and password to obtain a token valid for one hour.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."},
                },
            },
        },
        400: {
            "description": "Unknown user or wrong password",
            "content": {"application/json": {"example": {"error": "Invalid credentials"}}},
        },
        500: {
            "description": "Login failed",
            "content": {"application/json": {"example": {"error": "Login failed"}}},
        },
    },
    operation_id="auth_login",
    openapi_extra=json_body(Credentials),
)
async def login(request: Request, auth_service: AuthServiceDep) -> TokenResponse:
    """
    Login with username and password.

    Parameters
    ----------
    request : Request
        Incoming request; its JSON body holds username and password.
    auth_service : AuthService
        Authentication service dependency.

    Returns
    -------
    TokenResponse
        Signed access token.

    Raises
    ------
    InvalidCredentialsError
        If the user is unknown or the password is wrong.
    RequestFailedError
        On any other failure.
    """
    with failure_boundary("Login failed"):
        credentials = Credentials.model_validate(await request.json())
        user = await auth_service.authenticate_user(credentials)
        return auth_service.create_token_for_user(user)
