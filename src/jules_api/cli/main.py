"""
Jules CLI — `jules` command.

Commands:
  jules sources <cmd>      List and inspect connected repositories
  jules sessions <cmd>     Session CRUD, plan approval, messages
  jules activities <cmd>   Inspect a session's activity stream
"""

import json
import logging
from typing import Any, NoReturn, Optional

try:
    import click
    from dotenv import find_dotenv, load_dotenv
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install jules-api[cli]")

from jules_api.client import JulesClient
from jules_api.errors import ConfigurationError, JulesError
from jules_api.version import __version__

console = Console()
err_console = Console(stderr=True)


def _get_client() -> JulesClient:
    try:
        client = JulesClient()
    except ConfigurationError as e:
        _fail(e, json_output=False)
    # Released when the invoking command's context closes.
    click.get_current_context().call_on_close(client.close)
    return client


def _fail(error: JulesError, json_output: bool) -> NoReturn:
    if json_output:
        click.echo(json.dumps({"error": error.message}))
    else:
        err_console.print(f"[red]Error: {error.message}[/red]")
        if isinstance(error, ConfigurationError):
            err_console.print("\nTo fix this:\n  export JULES_API_KEY='your_api_key_here'")
    raise SystemExit(1)


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


def _truncate(text: Optional[str], length: int) -> str:
    if not text:
        return ""
    return text if len(text) <= length else f"{text[:length - 3]}..."


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests to stderr.")
def main(verbose: bool):
    """Jules CLI — drive Jules coding sessions from the terminal."""
    load_dotenv(find_dotenv(usecwd=True))
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from jules_api.cli.activities import activities
from jules_api.cli.sessions import sessions
from jules_api.cli.sources import sources

main.add_command(sources)
main.add_command(sessions)
main.add_command(activities)


if __name__ == "__main__":
    main()
