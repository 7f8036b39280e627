"""External automation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Request, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from onboard.application.usecase.invite import (
    MapInviteRequest,
    MapInviteUseCase,
    PostInviteButtonRequest,
    PostInviteButtonStatus,
    PostInviteButtonUseCase,
)
from onboard.domain.error import ValidationError

router = APIRouter(tags=["invites"], route_class=DishkaRoute)

MAP_INVITE_REJECTED = "inviteCode and firstname required"

STATUS_CODES = {
    PostInviteButtonStatus.POSTED: status.HTTP_200_OK,
    PostInviteButtonStatus.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    PostInviteButtonStatus.NOT_READY: status.HTTP_503_SERVICE_UNAVAILABLE,
    PostInviteButtonStatus.FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

STATUS_BODIES = {
    PostInviteButtonStatus.POSTED: "ok",
    PostInviteButtonStatus.UNAUTHORIZED: "unauthorized",
    PostInviteButtonStatus.NOT_READY: "bot not ready",
    PostInviteButtonStatus.FAILED: "failed to post invite button",
}


class InviteMapAPIRequest(BaseModel):
    """API request mapping an invite code to a client first name."""

    model_config = ConfigDict(populate_by_name=True)

    invite_code: str | None = Field(default=None, alias="inviteCode")
    firstname: str | None = None


async def read_invite_map(request: Request) -> InviteMapAPIRequest | None:
    """Parse the webhook body, or None if it is not a JSON object of strings.

    A missing or empty body counts as ``{}``.
    """
    body = await request.body()
    if not body.strip():
        return InviteMapAPIRequest()
    try:
        return InviteMapAPIRequest.model_validate_json(body)
    except PydanticValidationError:
        return None


@router.post("/invite-map", response_class=PlainTextResponse)
async def map_invite(
    request: Request,
    map_invite_use_case: FromDishka[MapInviteUseCase],
) -> PlainTextResponse:
    """Record which client an externally created invite belongs to.

    Returns:
        200 "ok", or 400 if the body is malformed or a field is missing or blank
    """
    invite_map = await read_invite_map(request)
    if invite_map is None:
        return PlainTextResponse(
            MAP_INVITE_REJECTED, status_code=status.HTTP_400_BAD_REQUEST
        )

    try:
        await map_invite_use_case.execute(
            MapInviteRequest(
                invite_code=invite_map.invite_code, firstname=invite_map.firstname
            )
        )
    except ValidationError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)

    return PlainTextResponse("ok")


@router.post("/post-invite-button", response_class=PlainTextResponse)
async def post_invite_button(
    post_invite_button_use_case: FromDishka[PostInviteButtonUseCase],
    x_zapier_secret: str | None = Header(default=None),
) -> PlainTextResponse:
    """(Re)post the staff "generate invite" button.

    Requires the ``x-zapier-secret`` header to match ZAPIER_SECRET.
    """
    response = await post_invite_button_use_case.execute(
        PostInviteButtonRequest(secret=x_zapier_secret)
    )
    return PlainTextResponse(
        STATUS_BODIES[response.status], status_code=STATUS_CODES[response.status]
    )
