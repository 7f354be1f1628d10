"""CLI: jules activities list|show"""

import click
from rich.console import Console
from rich.table import Table

from jules_api.errors import JulesError
from jules_api.models.activity import Activity, ActivityType

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


def summarize(activity: Activity) -> str:
    """One-line description of an activity for tables."""
    t = activity.type
    if t in (ActivityType.AGENT_MESSAGED, ActivityType.USER_MESSAGED):
        return activity.message or ""
    if t == ActivityType.PLAN_GENERATED:
        steps = activity.plan.steps if activity.plan else []
        return f"Plan with {len(steps)} steps"
    if t == ActivityType.PROGRESS_UPDATED:
        return activity.progress_title or ""
    if t == ActivityType.SESSION_COMPLETED:
        return "Session completed"
    if t == ActivityType.SESSION_FAILED:
        return activity.failure_reason or "Session failed"
    return activity.description or ""


@click.group()
def activities():
    """Session activity stream."""


@activities.command("list")
@click.argument("session_id")
@click.option("--page-size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def activities_list(session_id, page_size, json_output):
    """List activities for a session."""
    client = _get_client()
    try:
        items = client.activities.all(session_id, page_size=page_size)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json([a.to_dict() for a in items])
        return
    if not items:
        console.print("No activities found.")
        return
    table = Table(title=f"Activities ({len(items)})")
    table.add_column("ID", style="bold")
    table.add_column("Type")
    table.add_column("From")
    table.add_column("Description")
    for a in items:
        originator = a.originator.value if a.originator else "N/A"
        table.add_row(a.id or "", a.type.value, originator, _truncate(summarize(a), 38))
    console.print(table)


@activities.command("show")
@click.argument("name")
@click.option("--json-output", "--json", is_flag=True)
def activities_show(name, json_output):
    """Show details for an activity (sessions/ID/activities/ID)."""
    client = _get_client()
    try:
        activity = client.activities.find(name)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json(activity.to_dict())
        return

    console.print(f"[bold]Name:[/bold]        {activity.name}")
    console.print(f"[bold]Type:[/bold]        {activity.type.value}")
    console.print(f"[bold]Originator:[/bold]  {activity.originator.value if activity.originator else 'N/A'}")
    console.print(f"[bold]Created:[/bold]     {activity.create_time}")
    if activity.description:
        console.print(f"[bold]Description:[/bold] {activity.description}")

    if activity.message:
        console.print(f"\n{activity.message}")
    elif activity.plan:
        console.print("\n[bold]Plan:[/bold]")
        for i, step in enumerate(activity.plan.steps, 1):
            console.print(f"  {i}. {step.title}")
    elif activity.type == ActivityType.PROGRESS_UPDATED:
        console.print(f"\nProgress: {activity.progress_title}")
        if activity.progress_description:
            console.print(f"Details:  {activity.progress_description}")
    elif activity.type == ActivityType.SESSION_FAILED:
        console.print(f"\nFailure reason: {activity.failure_reason}")

    if activity.artifacts:
        console.print("\n[bold]Artifacts:[/bold]")
        for artifact in activity.artifacts:
            console.print(f"  - {artifact.type.value}")
            if artifact.bash_command:
                console.print(f"    $ {artifact.bash_command} (exit {artifact.bash_exit_code})")
            if artifact.unidiff_patch:
                console.print(artifact.unidiff_patch, markup=False, highlight=False)
