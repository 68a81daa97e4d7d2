from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from ttms.core.modules.user.models import UserView
from ttms.web.cookies import deliver_session
from ttms.web.deps import AppDep
from ttms.web.openapi import ErrorResponse

router = APIRouter(prefix="/auth", tags=["auth"])


class SignupRequest(BaseModel):
    """Registration request. Missing fields are reported as 400 by the handler."""

    username: str | None = Field(None, description="Unique username")
    email: str | None = Field(None, description="Unique email, used to log in")
    password: str | None = Field(None, description="Plaintext password")


class LoginRequest(BaseModel):
    """Authentication request."""

    email: str | None = Field(None, description="Email of the account")
    password: str | None = Field(None, description="Password for authentication")


class AuthResponse(BaseModel):
    """Successful signup or login."""

    success: bool = Field(True, description="Always true on success")
    message: str = Field(..., description="Human-readable result")
    user: UserView = Field(..., description="Account without credentials")


@router.post(
    "/signup",
    summary="Register user",
    description="Create an account and log in immediately. The session token is set as an HTTP-only cookie.",
    operation_id="signup",
    status_code=201,
    responses={
        201: {"description": "User created and logged in"},
        400: {"model": ErrorResponse, "description": "Missing fields"},
        409: {"model": ErrorResponse, "description": "User already exists"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def signup(signup_data: SignupRequest, app: AppDep, response: Response) -> AuthResponse:
    token, user = await app.signup(signup_data.username, signup_data.email, signup_data.password)
    deliver_session(response, token, app.config)
    return AuthResponse(message="User Created and Logged In Successfully", user=user)


@router.post(
    "/login",
    summary="Authenticate user",
    description="Authenticate with email and password. The session token is set as an HTTP-only cookie.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": ErrorResponse, "description": "Missing fields"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
        404: {"model": ErrorResponse, "description": "User not found"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
)
async def login(login_data: LoginRequest, app: AppDep, response: Response) -> AuthResponse:
    token, user = await app.login(login_data.email, login_data.password)
    deliver_session(response, token, app.config)
    return AuthResponse(message="Login Success", user=user)
