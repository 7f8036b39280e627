"""Persistent staff view and the client invite modal."""

import discord
import logfire

from onboard.interface.bot.interactions import (
    MODAL_FALLBACK_MESSAGE,
    handle_interaction_error,
    issue_invite,
    reply_ephemeral,
)

GENERATE_INVITE_CUSTOM_ID = "onboard:generate-invite"


class ClientInviteModal(discord.ui.Modal, title="Client invite"):
    """Collects the client's first name."""

    firstname = discord.ui.TextInput(
        label="First name",
        placeholder="e.g. Maria",
        required=True,
        max_length=100,
    )

    async def on_submit(self, interaction: discord.Interaction) -> None:
        await issue_invite(interaction, self.firstname.value)

    async def on_error(
        self, interaction: discord.Interaction, error: Exception
    ) -> None:
        await handle_interaction_error(interaction, error, source="invite_modal")


class InviteRequestView(discord.ui.View):
    """Staff prompt carrying the "Generate client invite" button.

    The view has no timeout and a fixed custom id, so registering one
    instance at startup keeps buttons posted by earlier runs working.
    """

    def __init__(self) -> None:
        super().__init__(timeout=None)

    @discord.ui.button(
        label="Generate client invite",
        style=discord.ButtonStyle.primary,
        emoji="🎟️",
        custom_id=GENERATE_INVITE_CUSTOM_ID,
    )
    async def generate_invite(
        self, interaction: discord.Interaction, button: discord.ui.Button
    ) -> None:
        try:
            await interaction.response.send_modal(ClientInviteModal())
        except discord.HTTPException as e:
            logfire.warn(
                "Could not open invite modal",
                user_id=interaction.user.id,
                error=str(e),
            )
            await reply_ephemeral(interaction, MODAL_FALLBACK_MESSAGE)

    async def on_error(
        self,
        interaction: discord.Interaction,
        error: Exception,
        item: discord.ui.Item,
    ) -> None:
        await handle_interaction_error(interaction, error, source="invite_button")
