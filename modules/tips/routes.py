"""
Daily tip endpoints.

The user id in the path must be the signed-in user's id; the acting
identity always comes from the session cookie.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service, get_tips_service
from api.middleware.auth import get_acting_user
from modules.auth.interfaces import IAuthService
from shared.models import AuthenticatedUser

from .interfaces import ITipsService
from .models import Progress, TipsResponse

router = APIRouter()


@router.get("/tips/{user_id}", response_model=TipsResponse)
async def get_tips(
    user: AuthenticatedUser = Depends(get_acting_user),
    auth: IAuthService = Depends(get_auth_service),
    service: ITipsService = Depends(get_tips_service),
) -> TipsResponse:
    """
    Get the tip for the user's current day.

    Users without a progress document see day 1.
    """
    record = await auth.get_user(user.id)
    return await service.get_tip_of_the_day(user.id, record.display_name)


@router.get("/complete_tip/{user_id}", response_model=Progress)
async def complete_tip(
    user: AuthenticatedUser = Depends(get_acting_user),
    service: ITipsService = Depends(get_tips_service),
) -> Progress:
    """Mark the current tip as done and advance to the next day."""
    return await service.complete_tip(user.id)
