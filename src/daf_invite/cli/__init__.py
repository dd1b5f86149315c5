"""Custom CLI commands for daf-invite."""

from daf_invite.cli.commands import InviteCLIPlugin, invite_group

__all__ = ["InviteCLIPlugin", "invite_group"]
