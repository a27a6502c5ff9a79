"""
User endpoints: humanID log-in, session refresh and log-out, profile.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from shared.models import UserAccess
from modules.sessions.interfaces import ISessionService
from modules.sessions.models import LogInRequest, SessionToken
from modules.users.interfaces import IUserService
from modules.users.models import UpdateProfileRequest, UserProfile

from ..dependencies import get_session_service, get_user_service
from ..middleware.auth import get_user_access, get_user_access_token, require_client_app
from ..models.envelope import DataResponse, OkResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/log-in",
    response_model=DataResponse[SessionToken],
    dependencies=[Depends(require_client_app)],
)
async def log_in(
    request: LogInRequest,
    sessions: ISessionService = Depends(get_session_service),
) -> DataResponse[SessionToken]:
    """
    Log in to the app with a humanID exchange token.

    Requires the ``clientSecret`` header. Returns the session token and its
    expiry in Unix epoch; any earlier session of the user stops working.
    """
    session = await sessions.login(request.exchange_token)
    return DataResponse[SessionToken](data=session)


@router.get("/profile", response_model=DataResponse[UserProfile])
async def get_profile(
    user: UserAccess = Depends(get_user_access),
    users: IUserService = Depends(get_user_service),
) -> DataResponse[UserProfile]:
    """
    Get the profile of the user behind ``userAccessToken``.
    """
    profile = await users.get_profile(user.id)
    return DataResponse[UserProfile](data=profile)


@router.put("/profile", response_model=OkResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user: UserAccess = Depends(get_user_access),
    users: IUserService = Depends(get_user_service),
) -> OkResponse:
    """
    Update the full name of the user behind ``userAccessToken``.
    """
    await users.update_profile(user.id, request.full_name)
    return OkResponse()


@router.put("/refresh-session", response_model=DataResponse[SessionToken])
async def refresh_session(
    user: UserAccess = Depends(get_user_access),
    sessions: ISessionService = Depends(get_session_service),
) -> DataResponse[SessionToken]:
    """
    Exchange a live session token for a new one.

    The presented token is invalidated.
    """
    session = await sessions.refresh(user)
    return DataResponse[SessionToken](data=session)


@router.put("/log-out", response_model=OkResponse)
async def log_out(
    user_access_token: Optional[str] = Depends(get_user_access_token),
    sessions: ISessionService = Depends(get_session_service),
) -> OkResponse:
    """
    Log out of the app.

    Always succeeds; logging out with an already invalid token is a no-op.
    """
    result = await sessions.logout(user_access_token)
    logger.debug(f"Log out result={result.value}")
    return OkResponse()
