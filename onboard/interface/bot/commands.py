"""Slash commands."""

import discord
from discord import app_commands

from onboard.interface.bot.interactions import handle_interaction_error, issue_invite


class OnboardCommandTree(app_commands.CommandTree):
    """Command tree answering every failed command with a generic message."""

    async def on_error(
        self, interaction: discord.Interaction, error: app_commands.AppCommandError
    ) -> None:
        command = interaction.command.name if interaction.command else "unknown"
        await handle_interaction_error(
            interaction, error, source=f"/{command}"
        )


@app_commands.command(
    name="create-invite",
    description="Create a single-use invite for a new client",
)
@app_commands.describe(firstname="Client's first name")
@app_commands.guild_only()
async def create_invite(interaction: discord.Interaction, firstname: str) -> None:
    await issue_invite(interaction, firstname)
