"""Auth API Routes"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from config import ApplicationConfig
from src.app.services.identity_provider import IdentityProvider
from src.app.use_cases.auth.authenticate import Authenticate
from src.depends import get_identity_provider

router = APIRouter(tags=["Auth"])


@router.post(
    "/login",
    status_code=status.HTTP_303_SEE_OTHER,
    responses={
        401: {
            "description": "Sign-in rejected",
            "content": {
                "application/json": {
                    "example": {"message": "Invalid credentials."}
                }
            }
        }
    }
)
async def login(
    request: Request,
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    """
    Sign in with the login form.

    **Form fields:**
    - `email` (required)
    - `password` (required, at least 6 characters)

    **Returns:**
    - 303: Signed in, redirect to the dashboard
    - 401: Message to show on the login form
    """
    form_data = await request.form()

    message = await Authenticate(identity_provider).execute(form_data)
    if message:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": message},
        )

    return RedirectResponse(
        ApplicationConfig.LOGIN_REDIRECT_PATH, status_code=status.HTTP_303_SEE_OTHER
    )
