"""CLI: jules sources list|show"""

import click
from rich.console import Console
from rich.table import Table

from jules_api.errors import JulesError

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


@click.group()
def sources():
    """Connected repositories."""


@sources.command("list")
@click.option("--page-size", default=None, type=int)
@click.option("--json-output", "--json", is_flag=True)
def sources_list(page_size, json_output):
    """List all connected repositories."""
    client = _get_client()
    try:
        items = client.sources.all(page_size=page_size)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json([s.to_dict() for s in items])
        return
    if not items:
        console.print("No sources found.")
        return
    table = Table(title="Sources")
    table.add_column("Name", style="bold")
    table.add_column("Repository")
    for s in items:
        table.add_row(s.name or "", s.github_repo.full_name if s.github_repo else "N/A")
    console.print(table)


@sources.command("show")
@click.argument("name")
@click.option("--json-output", "--json", is_flag=True)
def sources_show(name, json_output):
    """Show details for a source."""
    client = _get_client()
    try:
        source = client.sources.find(name)
    except JulesError as e:
        _fail(e, json_output)
    if json_output:
        _echo_json(source.to_dict())
        return
    console.print(f"[bold]Name:[/bold]       {source.name}")
    console.print(f"[bold]ID:[/bold]         {source.id}")
    repo = source.github_repo
    if repo:
        console.print(f"[bold]Repository:[/bold] {repo.full_name}")
        if repo.default_branch:
            console.print(f"[bold]Default:[/bold]    {repo.default_branch.display_name}")
        if repo.branches:
            console.print(f"[bold]Branches:[/bold]   {', '.join(b.display_name or '' for b in repo.branches)}")
