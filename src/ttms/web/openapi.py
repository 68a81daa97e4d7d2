from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

from ttms.web.cookies import SESSION_COOKIE_NAME


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="TTMS Auth API",
            version="0.1.0",
            summary="User registration and login with cookie-delivered session tokens",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "AccessTokenCookie": {
                "type": "apiKey",
                "in": "cookie",
                "name": SESSION_COOKIE_NAME,
                "description": "Signed session token set by signup and login",
            },
        }

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = Field(False, description="Always false for errors")
    statusCode: int = Field(..., description="HTTP status code")  # noqa: N815
    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"success": False, "statusCode": 401, "message": "Invalid credentials", "type": "authentication_error"},
                {"success": False, "statusCode": 404, "message": "User not found!", "type": "not_found"},
                {
                    "success": False,
                    "statusCode": 409,
                    "message": "User already exists, please login",
                    "type": "conflict",
                },
            ]
        }
    }
