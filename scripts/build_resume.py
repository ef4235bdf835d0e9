#!/usr/bin/env python3
"""
Command-line résumé builder.

Each invocation restores the résumé from file storage, applies one edit,
persists it, and prints the re-rendered preview.

Commands:
    sector          - Choose the sector (IT or Other) and start editing
    change-sector   - Discard the résumé and return to sector selection
    status          - Show session state and entry ids
    identity        - Update name, target role and contact details
    summary         - Replace the summary paragraph
    skills          - Replace the skills from comma-delimited text
    remove-skill    - Remove one skill by position
    add             - Add a work history, education or project entry
    update          - Change fields of an entry
    remove          - Remove an entry
    suggest-skills  - Merge LLM-suggested skills for the target role
    suggest-summary - Write the summary from key points with an LLM
    preview         - Print the rendered résumé (markdown or HTML)
    export          - Export the résumé to PDF
"""

import asyncio
import os
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from vitae.contexts.document import FileStorage, RecordStore, Sector
from vitae.contexts.document.resume_data_structure import COLLECTION_TYPES
from vitae.contexts.session import SessionController, SessionState
from vitae.contexts.session.logger import setup_session_logger
from vitae.contexts.suggestion import SuggestionClient
from vitae.utils import truncate_display

load_dotenv()
STORAGE_PATH = Path(os.getenv("VITAE_STORAGE_PATH", "outs/storage"))

app = typer.Typer(
    add_completion=False,
    help="Build a résumé one edit at a time",
    invoke_without_command=True,
)


class Collection(str, Enum):
    work_history = "work_history"
    education = "education"
    projects = "projects"


TRUE_VALUES = ("true", "yes", "y", "1")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Echo info logs to the console")] = False,
):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    setup_session_logger(console_level="INFO" if verbose else "WARNING")


def _session(provider: Optional[str] = None) -> SessionController:
    store = RecordStore(FileStorage(STORAGE_PATH))
    return SessionController(store, client=SuggestionClient(provider_name=provider))


def _active_session(provider: Optional[str] = None) -> SessionController:
    session = _session(provider)
    if session.state is not SessionState.ACTIVE:
        typer.secho("No sector selected. Run 'build_resume.py sector IT|Other' first.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return session


def _parse_assignments(collection: Collection, assignments: List[str]) -> Dict[str, object]:
    """Turn ["company=Acme", "is_current=true"] into typed entry fields."""
    entry_type = COLLECTION_TYPES[collection.value]
    bool_fields = {f.name for f in fields(entry_type) if f.type in (bool, "bool")}

    values = {}
    for assignment in assignments:
        if "=" not in assignment:
            typer.secho(f"✗ Expected field=value, got '{assignment}'", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)
        name, value = assignment.split("=", 1)
        name = name.strip()
        values[name] = value.strip().lower() in TRUE_VALUES if name in bool_fields else value
    return values


def _entry_label(entry) -> str:
    """First non-blank text field of an entry, for listing."""
    for f in fields(entry):
        value = getattr(entry, f.name)
        if f.name != "id" and isinstance(value, str) and value.strip():
            return value.strip()
    return "(blank)"


def _show(session: SessionController) -> None:
    typer.echo(session.preview_markdown())


@app.command("sector")
def sector_command(
    sector: Annotated[Sector, typer.Argument(help="Résumé sector: IT (plain) or Other (decorated)")],
):
    """Choose the sector and start editing."""
    session = _session()
    if session.state is SessionState.ACTIVE:
        typer.secho(
            f"Sector already set to {session.sector.value}. Use change-sector to start over.",
            fg=typer.colors.YELLOW,
            err=True,
        )
        raise typer.Exit(code=1)

    session.choose_sector(sector)
    typer.secho(f"✓ Sector: {sector.value}", fg=typer.colors.GREEN)


@app.command("change-sector")
def change_sector_command(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
):
    """
    Discard the résumé and return to sector selection.

    This clears all saved résumé data.
    """
    session = _active_session()
    if not yes and not typer.confirm("This clears the saved résumé. Continue?"):
        raise typer.Exit()

    session.change_sector()
    typer.secho("✓ Résumé cleared. Choose a sector to start again.", fg=typer.colors.GREEN)


@app.command("status")
def status_command():
    """Show session state, sector and entry ids."""
    session = _session()
    typer.secho(f"\nState: {session.state.value}", fg=typer.colors.BLUE, bold=True)
    if session.sector is not None:
        typer.echo(f"Sector: {session.sector.value}")

    document = session.store.get()
    typer.echo(f"Skills: {len(document.skills)}")
    for collection in Collection:
        entries = getattr(document, collection.value)
        typer.echo(f"{collection.value}: {len(entries)}")
        for entry in entries:
            typer.echo(f"  {entry.id}  {truncate_display(_entry_label(entry), 50)}")


@app.command("identity")
def identity_command(
    full_name: Annotated[Optional[str], typer.Option("--full-name", help="Full name")] = None,
    target_role: Annotated[Optional[str], typer.Option("--target-role", help="Target job role")] = None,
    email: Annotated[Optional[str], typer.Option("--email")] = None,
    phone: Annotated[Optional[str], typer.Option("--phone")] = None,
    location: Annotated[Optional[str], typer.Option("--location")] = None,
    website: Annotated[Optional[str], typer.Option("--website")] = None,
    linkedin: Annotated[Optional[str], typer.Option("--linkedin")] = None,
):
    """Update name, target role and contact details (only the options given)."""
    changes = {
        name: value
        for name, value in {
            "full_name": full_name,
            "target_role": target_role,
            "email": email,
            "phone": phone,
            "location": location,
            "website": website,
            "linkedin": linkedin,
        }.items()
        if value is not None
    }
    if not changes:
        typer.secho("Nothing to update.", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    session = _active_session()
    session.identity.update(**changes)
    _show(session)


@app.command("summary")
def summary_command(
    text: Annotated[str, typer.Argument(help="Summary paragraph")],
):
    """Replace the summary paragraph."""
    session = _active_session()
    session.summary.set_summary(text)
    _show(session)


@app.command("skills")
def skills_command(
    text: Annotated[str, typer.Argument(help="Comma-delimited skills, e.g. 'Python, SQL, Docker'")],
):
    """Replace the skills from comma-delimited text."""
    session = _active_session()
    skills = session.skills.set_from_text(text)
    typer.secho(f"✓ {len(skills)} skill(s)", fg=typer.colors.GREEN)
    _show(session)


@app.command("remove-skill")
def remove_skill_command(
    index: Annotated[int, typer.Argument(help="Zero-based position of the skill")],
):
    """Remove one skill by position."""
    session = _active_session()
    if not session.skills.remove_at(index):
        typer.secho(f"No skill at position {index}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    _show(session)


@app.command("add")
def add_command(
    collection: Annotated[Collection, typer.Argument(help="Collection to add to")],
    assignments: Annotated[
        Optional[List[str]], typer.Option("--set", "-s", help="Field value as field=value (repeatable)")
    ] = None,
):
    """
    Add an entry with optional initial fields.

    Examples:\n

        $ build_resume.py add work_history -s company=Acme -s position=Engineer -s start_month=2021-01 -s is_current=true
    """
    session = _active_session()
    editor = getattr(session, collection.value)
    try:
        entry_id = editor.add(**_parse_assignments(collection, assignments or []))
    except (TypeError, ValueError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Added {collection.value} entry {entry_id}", fg=typer.colors.GREEN)
    _show(session)


@app.command("update")
def update_command(
    collection: Annotated[Collection, typer.Argument(help="Collection holding the entry")],
    entry_id: Annotated[str, typer.Argument(help="Entry id (see status)")],
    assignments: Annotated[List[str], typer.Option("--set", "-s", help="Field value as field=value (repeatable)")],
):
    """Change fields of an entry."""
    session = _active_session()
    editor = getattr(session, collection.value)
    try:
        updated = editor.update(entry_id, **_parse_assignments(collection, assignments))
    except (TypeError, ValueError) as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not updated:
        typer.secho(f"No {collection.value} entry {entry_id}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    _show(session)


@app.command("remove")
def remove_command(
    collection: Annotated[Collection, typer.Argument(help="Collection holding the entry")],
    entry_id: Annotated[str, typer.Argument(help="Entry id (see status)")],
):
    """Remove an entry."""
    session = _active_session()
    if not getattr(session, collection.value).remove(entry_id):
        typer.secho(f"No {collection.value} entry {entry_id}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    _show(session)


@app.command("suggest-skills")
def suggest_skills_command(
    provider: Annotated[Optional[str], typer.Option("--provider", "-p", help="openai, anthropic or gemini")] = None,
):
    """Merge LLM-suggested skills for the target role."""
    session = _active_session(provider)
    outcome = asyncio.run(session.skills.request_suggestions())
    if not outcome.applied:
        typer.secho(f"✗ {outcome.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if outcome.added:
        typer.secho(f"✓ Added: {', '.join(outcome.added)}", fg=typer.colors.GREEN)
    else:
        typer.echo("No new skills suggested.")
    _show(session)


@app.command("suggest-summary")
def suggest_summary_command(
    hints: Annotated[str, typer.Argument(help="Key points to build the summary from")],
    provider: Annotated[Optional[str], typer.Option("--provider", "-p", help="openai, anthropic or gemini")] = None,
):
    """Write the summary from key points with an LLM."""
    session = _active_session(provider)
    session.summary.hint = hints
    outcome = asyncio.run(session.summary.request_suggestion())
    if not outcome.applied:
        typer.secho(f"✗ {outcome.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    _show(session)


@app.command("preview")
def preview_command(
    html: Annotated[bool, typer.Option("--html", help="Print the rendered HTML instead of markdown")] = False,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to file instead of stdout")] = None,
):
    """Print the rendered résumé."""
    session = _active_session()
    text = session.current_view if html else session.preview_markdown()

    if output is None:
        typer.echo(text)
        return
    output.write_text(text, encoding="utf-8")
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN)


@app.command("export")
def export_command():
    """Export the résumé to PDF."""
    session = _active_session()
    result = asyncio.run(session.export())
    if not result.success:
        typer.secho(f"✗ {session.last_alert or result.error}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    pages = f" ({result.page_count} page(s))" if result.page_count is not None else ""
    typer.secho(f"✓ Exported {result.pdf_path}{pages}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
