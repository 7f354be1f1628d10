import json

import httpx
import pytest
from click.testing import CliRunner

from jules_api import JulesClient
from jules_api.cli import main as cli_main
from jules_api.cli.main import main


@pytest.fixture
def runner(client, monkeypatch):
    monkeypatch.setattr(cli_main, "_get_client", lambda: client)
    return CliRunner()


def test_sources_list_json(runner, api):
    api.add(json_body={"sources": [{"name": "sources/github/o/r", "githubRepo": {"owner": "o", "repo": "r"}}]})
    result = runner.invoke(main, ["sources", "list", "--json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data[0]["name"] == "sources/github/o/r"
    assert data[0]["github_repo"]["repo"] == "r"


def test_sources_list_table(runner, api):
    api.add(json_body={"sources": [{"name": "sources/a", "githubRepo": {"owner": "o", "repo": "r"}}]})
    result = runner.invoke(main, ["sources", "list"])
    assert result.exit_code == 0, result.output
    assert "sources/a" in result.output


def test_sources_list_empty(runner, api):
    api.add(json_body={})
    result = runner.invoke(main, ["sources", "list"])
    assert result.exit_code == 0
    assert "No sources found." in result.output


def test_sessions_show_normalizes_missing_state(runner, api):
    api.add(json_body={"name": "sessions/1", "id": "1", "prompt": "Fix"})
    result = runner.invoke(main, ["sessions", "show", "1"])
    assert result.exit_code == 0, result.output
    assert "COMPLETED" in result.output
    assert api.last.url.path.endswith("/sessions/1")


def test_sessions_create(runner, api):
    api.add(json_body={"name": "sessions/9", "id": "9", "state": "QUEUED"})
    result = runner.invoke(main, [
        "sessions", "create", "--source", "sources/github/o/r", "--prompt", "Add tests", "--auto-pr", "--json",
    ])
    assert result.exit_code == 0, result.output
    assert '"state": "QUEUED"' in result.output
    assert api.last_json() == {
        "prompt": "Add tests",
        "sourceContext": {"source": "sources/github/o/r", "githubRepoContext": {"startingBranch": "main"}},
        "automationMode": "AUTO_CREATE_PR",
    }


def test_sessions_create_from_prompt_file(runner, api, tmp_path):
    prompt_file = tmp_path / "task.md"
    prompt_file.write_text("From a file")
    api.add(json_body={"name": "sessions/9"})
    result = runner.invoke(main, [
        "sessions", "create", "--source", "sources/x", "--prompt", "ignored", "--prompt-file", str(prompt_file),
    ])
    assert result.exit_code == 0, result.output
    assert api.last_json()["prompt"] == "From a file"


def test_sessions_create_requires_prompt(runner, api):
    result = runner.invoke(main, ["sessions", "create", "--source", "sources/x"])
    assert result.exit_code != 0
    assert "--prompt" in result.output
    assert api.requests == []


def test_sessions_approve_and_message(runner, api):
    api.add(json_body={"name": "sessions/1", "state": "IN_PROGRESS"})
    api.add(json_body={"name": "sessions/1", "state": "IN_PROGRESS"})
    assert runner.invoke(main, ["sessions", "approve", "1"]).exit_code == 0
    assert api.last.url.path.endswith("/sessions/1:approvePlan")
    assert runner.invoke(main, ["sessions", "message", "1", "--prompt", "more"]).exit_code == 0
    assert api.last_json() == {"prompt": "more"}


def test_sessions_delete(runner, api):
    api.add(status=200)
    result = runner.invoke(main, ["sessions", "delete", "sessions/1", "--json"])
    assert result.exit_code == 0
    assert '"deleted": "sessions/1"' in result.output
    assert api.last.method == "DELETE"


def test_activities_list_json(runner, api):
    api.add(json_body={"activities": [{"id": "a1", "originator": "agent", "agentMessaged": {"agentMessage": "hi"}}]})
    result = runner.invoke(main, ["activities", "list", "s1", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)[0]["type"] == "agent_messaged"


def test_activities_show(runner, api):
    api.add(json_body={"name": "sessions/s1/activities/a1", "sessionFailed": {"reason": "out of memory"}})
    result = runner.invoke(main, ["activities", "show", "sessions/s1/activities/a1"])
    assert result.exit_code == 0, result.output
    assert "out of memory" in result.output


def test_api_error_exits_nonzero(runner, api):
    api.add(status=404, json_body={"error": {"message": "Session not found"}})
    result = runner.invoke(main, ["sessions", "show", "missing", "--json"])
    assert result.exit_code == 1
    assert json.loads(result.output) == {"error": "Session not found"}


def test_missing_api_key(monkeypatch):
    result = CliRunner().invoke(main, ["sources", "list"])
    assert result.exit_code == 1
    assert "JULES_API_KEY" in result.output


def test_client_closed_after_command(api, monkeypatch):
    created = []

    def make_client():
        c = JulesClient(api_key="k", base_url="https://jules.example.com/v1alpha",
                        transport=httpx.MockTransport(api.handler))
        created.append(c)
        return c

    monkeypatch.setattr(cli_main, "JulesClient", make_client)
    api.add(json_body={"sources": []})
    result = CliRunner().invoke(main, ["sources", "list", "--json"])
    assert result.exit_code == 0, result.output
    assert len(created) == 1
    assert created[0].http._client.is_closed
