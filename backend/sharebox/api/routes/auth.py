"""Auth routes: signup and login against the credential store."""

import logging

from fastapi import APIRouter, Depends

from sharebox.api.deps import get_sharing_service
from sharebox.schemas.auth import AuthResponse, Credentials, UserInfo
from sharebox.services.sharing import SharingService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/signup", response_model=AuthResponse)
async def signup(body: Credentials, sharing: SharingService = Depends(get_sharing_service)):
    """Register a new user. Fails with 400 if the email is taken."""
    user = sharing.signup(body.email, body.password)
    return AuthResponse(message="Signup successful", user=UserInfo.from_user(user))


@router.post("/login", response_model=AuthResponse)
async def login(body: Credentials, sharing: SharingService = Depends(get_sharing_service)):
    """
    Check email and password.

    No session is created; the client keeps the email and sends it as the
    acting identity on later requests.
    """
    user = sharing.login(body.email, body.password)
    return AuthResponse(message="Login successful", user=UserInfo.from_user(user))
