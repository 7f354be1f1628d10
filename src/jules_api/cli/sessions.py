"""CLI: jules sessions list|show|create|approve|message|delete"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from jules_api.errors import JulesError
from jules_api.models.session import AutomationMode, Session
from jules_api.models.source import SourceContext

console = Console()


def _get_client():
    from jules_api.cli.main import _get_client
    return _get_client()


def _fail(error, json_output):
    from jules_api.cli.main import _fail
    _fail(error, json_output)


def _echo_json(data):
    from jules_api.cli.main import _echo_json
    _echo_json(data)


def _truncate(text, length):
    from jules_api.cli.main import _truncate
    return _truncate(text, length)


def display_state(session: Session) -> str:
    # The API drops `state` once a session is done.
    return session.state.value if session.state else "COMPLETED"


def _print_session(session: Session) -> None:
    console.print(f"[bold]Name:[/bold]    {session.name}")
    console.print(f"[bold]ID:[/bold]      {session.id}")
    if session.title:
        console.print(f"[bold]Title:[/bold]   {session.title}")
    console.print(f"[bold]Prompt:[/bold]  {session.prompt}")
    console.print(f"[bold]State:[/bold]   {display_state(session)}")
    if session.url:
        console.print(f"[bold]URL:[/bold]     {session.url}")
    console.print(f"[bold]Created:[/bold] {session.create_time}")
    console.print(f"[bold]Updated:[/bold] {session.update_time}")
    if session.outputs:
        console.print("\n[bold]Outputs:[/bold]")
        for pr in session.pull_requests:
            console.print(f"  - PR: {pr.url}")
        for other in session.outputs:
            if isinstance(other, dict):
                console.print(f"  - {other}")


@click.group()
def sessions():
    """Session management."""


@sessions.command("list")
@click.option("--page-size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def sessions_list(page_size, json_output):
    """List sessions."""
    client = _get_client()
    try:
        items = client.sessions.all(page_size=page_size)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json([s.to_dict() for s in items])
        return
    if not items:
        console.print("No sessions found.")
        return
    table = Table(title=f"Sessions ({len(items)} total)")
    table.add_column("ID", style="bold")
    table.add_column("Title")
    table.add_column("State")
    table.add_column("Updated")
    for s in items:
        table.add_row(s.id or "", _truncate(s.title or s.prompt, 28), display_state(s), s.update_time or "N/A")
    console.print(table)


@sessions.command("show")
@click.argument("session_id")
@click.option("--json-output", "--json", is_flag=True)
def sessions_show(session_id, json_output):
    """Show details for a session."""
    client = _get_client()
    try:
        session = client.sessions.find(session_id)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json(session.to_dict())
    else:
        _print_session(session)


@sessions.command("create")
@click.option("--source", required=True, help="Source name, e.g. sources/github/owner/repo")
@click.option("--branch", default="main", show_default=True, help="Starting branch")
@click.option("--prompt", default=None, help="Task prompt")
@click.option("--prompt-file", default=None, type=click.Path(dir_okay=False), help="File containing the prompt")
@click.option("--title", default=None)
@click.option("--auto-pr", is_flag=True, help="Open a pull request when the session completes")
@click.option("--require-approval", is_flag=True, help="Wait for plan approval before working")
@click.option("--json-output", "--json", is_flag=True)
def sessions_create(source, branch, prompt, prompt_file, title, auto_pr, require_approval, json_output):
    """Create a new session. --prompt-file wins over --prompt."""
    prompt_text = _resolve_prompt(prompt, prompt_file)
    client = _get_client()
    try:
        with console.status("Creating session..."):
            session = client.sessions.create(
                prompt_text,
                SourceContext.build(source, branch),
                title=title,
                require_plan_approval=True if require_approval else None,
                automation_mode=AutomationMode.AUTO_CREATE_PR if auto_pr else None,
            )
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json(session.to_dict())
        return
    console.print(f"[green]Session created: {session.name}[/green]")
    console.print(f"URL: {session.url}")
    console.print(f"State: {display_state(session)}")


def _resolve_prompt(prompt: Optional[str], prompt_file: Optional[str]) -> str:
    if prompt_file:
        path = Path(prompt_file).expanduser()
        if not path.exists():
            raise click.UsageError(f"Prompt file not found: {path}")
        prompt = path.read_text()
    if not prompt or not prompt.strip():
        raise click.UsageError("You must provide --prompt or --prompt-file")
    return prompt


@sessions.command("approve")
@click.argument("session_id")
@click.option("--json-output", "--json", is_flag=True)
def sessions_approve(session_id, json_output):
    """Approve the plan for a session."""
    client = _get_client()
    try:
        session = client.sessions.approve_plan(session_id)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json(session.to_dict())
        return
    console.print(f"[green]Plan approved for session: {session.name}[/green]")
    console.print(f"State: {display_state(session)}")


@sessions.command("message")
@click.argument("session_id")
@click.option("--prompt", required=True, help="Message to send")
@click.option("--json-output", "--json", is_flag=True)
def sessions_message(session_id, prompt, json_output):
    """Send a message to a session."""
    client = _get_client()
    try:
        session = client.sessions.send_message(session_id, prompt)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json(session.to_dict())
        return
    console.print(f"[green]Message sent to session: {session.name}[/green]")
    console.print(f"State: {display_state(session)}")


@sessions.command("delete")
@click.argument("session_id")
@click.option("--json-output", "--json", is_flag=True)
def sessions_delete(session_id, json_output):
    """Delete a session."""
    client = _get_client()
    try:
        with console.status("Deleting..."):
            client.sessions.destroy(session_id)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json({"deleted": session_id})
    else:
        console.print(f"[green]Session deleted: {session_id}[/green]")
