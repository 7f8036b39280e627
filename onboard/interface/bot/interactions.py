"""Helpers shared by the slash command and the invite button flow."""

import discord
import logfire

from onboard.application.usecase.invite import IssueInviteRequest, IssueInviteUseCase

GENERIC_FAILURE_MESSAGE = "❌ Something went wrong. Please try again."
MODAL_FALLBACK_MESSAGE = (
    "Couldn't open the invite form. Use `/create-invite firstname:<name>` instead."
)


def role_ids(user: discord.User | discord.Member) -> list[int]:
    """Role ids of the interaction user (none outside a guild)."""
    return [role.id for role in getattr(user, "roles", [])]


async def issue_invite(interaction: discord.Interaction, firstname: str) -> None:
    """Run invite issuance for the interaction user and reply ephemerally."""
    # Invite creation is a network round trip; acknowledge first
    await interaction.response.defer(ephemeral=True, thinking=True)

    async with interaction.client.container() as request_container:
        use_case = await request_container.get(IssueInviteUseCase)
        response = await use_case.execute(
            IssueInviteRequest(
                requester_id=interaction.user.id,
                requester_role_ids=role_ids(interaction.user),
                firstname=firstname,
            )
        )

    await interaction.followup.send(response.message, ephemeral=True)


async def reply_ephemeral(interaction: discord.Interaction, message: str) -> None:
    """Answer an interaction whether or not it was acknowledged already."""
    try:
        if interaction.response.is_done():
            await interaction.followup.send(message, ephemeral=True)
        else:
            await interaction.response.send_message(message, ephemeral=True)
    except discord.HTTPException as e:
        # Interaction token expired or already answered
        logfire.warn("Could not answer interaction", error=str(e))


async def handle_interaction_error(
    interaction: discord.Interaction, error: Exception, source: str
) -> None:
    """Log an unexpected handler error and answer with a generic failure."""
    logfire.error(
        "Interaction handler failed",
        source=source,
        user_id=interaction.user.id,
        error=str(error),
        error_type=type(error).__name__,
        _exc_info=error,
    )
    await reply_ephemeral(interaction, GENERIC_FAILURE_MESSAGE)
