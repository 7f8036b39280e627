"""Invite use cases."""

from onboard.application.usecase.invite.issue_invite import (
    IssueInviteRequest,
    IssueInviteResponse,
    IssueInviteStatus,
    IssueInviteUseCase,
)
from onboard.application.usecase.invite.map_invite import (
    MapInviteRequest,
    MapInviteResponse,
    MapInviteUseCase,
)
from onboard.application.usecase.invite.post_invite_button import (
    PostInviteButtonRequest,
    PostInviteButtonResponse,
    PostInviteButtonStatus,
    PostInviteButtonUseCase,
)

__all__ = [
    "IssueInviteRequest",
    "IssueInviteResponse",
    "IssueInviteStatus",
    "IssueInviteUseCase",
    "MapInviteRequest",
    "MapInviteResponse",
    "MapInviteUseCase",
    "PostInviteButtonRequest",
    "PostInviteButtonResponse",
    "PostInviteButtonStatus",
    "PostInviteButtonUseCase",
]
