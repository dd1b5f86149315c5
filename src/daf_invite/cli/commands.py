"""Invitation layout commands for the Litestar CLI.

Adds the ``invite`` command group for previewing the default invitation
layout and the event date formatting without starting the server.
"""

from __future__ import annotations

import rich_click as click
from litestar.plugins import CLIPluginProtocol
from rich.console import Console
from rich.table import Table

from daf_invite.core.layout import format_event_datetime, synthesize_default_elements
from daf_invite.core.models import DesignDocument, EventData
from daf_invite.services.export import ExportService

console = Console()


@click.group(name="invite", help="Preview invitation layouts and formatting.")
def invite_group() -> None:
    """Preview invitation layouts and formatting."""


@invite_group.command(name="template", help="Show the default layout generated for an event.")
@click.option("--title", default="", help="Event title")
@click.option("--description", default="", help="Event description")
@click.option("--date", "event_date", default="", help="Event date (YYYY-MM-DD)")
@click.option("--time", "event_time", default="", help="Event time (HH:MM)")
@click.option("--location", default="", help="Event location")
@click.option("--contact-name", default="", help="Point of contact name")
@click.option("--contact-email", default="", help="Point of contact email")
@click.option("--contact-phone", default="", help="Point of contact phone")
@click.option("--dresscode", default="", help="Dress code")
@click.option("--notes", default="", help="Additional notes")
@click.option("--json", "as_json", is_flag=True, help="Print the design document as JSON")
def show_template(  # noqa: PLR0913
    title: str,
    description: str,
    event_date: str,
    event_time: str,
    location: str,
    contact_name: str,
    contact_email: str,
    contact_phone: str,
    dresscode: str,
    notes: str,
    as_json: bool,
) -> None:
    """Show the default layout generated for an event."""
    event = EventData(
        title=title,
        description=description,
        event_date=event_date,
        event_time=event_time,
        location=location,
        contact_name=contact_name,
        contact_email=contact_email,
        contact_phone=contact_phone,
        dresscode=dresscode,
        notes=notes,
    )
    elements = synthesize_default_elements(event)

    if as_json:
        click.echo(ExportService().to_json(DesignDocument(elements=elements)))
        return

    table = Table(title=f"Default layout ({len(elements)} elements)")
    table.add_column("ID", style="cyan")
    table.add_column("Y %", style="green", justify="right")
    table.add_column("Size", style="yellow")
    table.add_column("Font", style="magenta")
    table.add_column("Z", style="blue", justify="right")
    table.add_column("Content")

    for element in elements:
        style = element.style
        table.add_row(
            element.id,
            f"{element.position.y:g}",
            f"{element.size.width:g}x{element.size.height:g}",
            f"{style.font_family} {style.font_size} {style.font_weight}",
            str(element.z_index),
            element.content.replace("\n", " / ") or "-",
        )

    console.print(table)


@invite_group.command(name="format-date", help="Format an event date and time for display.")
@click.argument("event_date")
@click.argument("event_time", required=False, default="")
def format_date(event_date: str, event_time: str) -> None:
    """Format an event date and time for display."""
    console.print(format_event_datetime(event_date, event_time) or "[dim]no date[/dim]")


class InviteCLIPlugin(CLIPluginProtocol):
    """CLI plugin that adds the ``invite`` command group.

    Subcommands:
    - template: Show the default layout for the given event fields
    - format-date: Format a date and time the way invitations display them
    """

    def on_cli_init(self, cli: click.Group) -> None:
        """Register the invite command group."""
        cli.add_command(invite_group)
