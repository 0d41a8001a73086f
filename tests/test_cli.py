"""Tests for the bubbles command line."""

import json

import pytest
from click.testing import CliRunner

from bubbles.cli import main
from bubbles.exceptions import StoreError
from bubbles.models import Failed


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setattr("bubbles.config.load_dotenv", lambda: None)
    monkeypatch.setenv("GITHUB_OWNER", "mo-rieger")
    monkeypatch.setenv("GITHUB_REPO", "foambubble-highlights")
    monkeypatch.setenv("GH_PAT", "pat-123")
    monkeypatch.setenv("AUTH_TOKEN", "right")
    return monkeypatch


@pytest.fixture
def store(env, make_store):
    fake = make_store()
    env.setattr("bubbles.handler.ContentStoreClient", lambda config: fake)
    return fake


class TestAdd:
    """Tests for `bubbles add`."""

    def test_add_commits_highlight(self, runner, store):
        """Test a highlight is committed using the configured secret."""
        result = runner.invoke(main, [
            "add",
            "--host", "blog.example.com",
            "--path", "/posts/hello",
            "--url", "https://blog.example.com/posts/hello",
            "--text", "Quoted",
        ])

        assert result.exit_code == 0, result.output
        assert "Status: 201" in result.output
        path, _ = store.write_calls[0]
        assert path == "blog.example.com/-posts-hello.md"

    def test_add_with_title(self, runner, store):
        """Test --title names the note."""
        result = runner.invoke(main, [
            "add",
            "--host", "example.com",
            "--path", "/p",
            "--url", "https://example.com/p",
            "--text", "Quoted",
            "--title", "My Note",
        ])

        assert result.exit_code == 0
        assert store.write_calls[0][0] == "example.com/My%20Note.md"

    def test_add_store_failure_exits_nonzero(self, runner, env, make_store):
        """Test a failed commit exits with status 1."""
        fake = make_store(lookups=[Failed(StoreError("boom", status=500))])
        env.setattr("bubbles.handler.ContentStoreClient", lambda config: fake)

        result = runner.invoke(main, [
            "add", "--host", "a.com", "--path", "/p", "--url", "u", "--text", "t",
        ])

        assert result.exit_code == 1
        assert "Status: 500" in result.output

    def test_add_missing_config(self, runner, env):
        """Test missing configuration exits with status 2."""
        env.delenv("GH_PAT")

        result = runner.invoke(main, [
            "add", "--host", "a.com", "--path", "/p", "--url", "u", "--text", "t",
        ])

        assert result.exit_code == 2
        assert "Configuration error" in result.output


class TestInvoke:
    """Tests for `bubbles invoke`."""

    def test_invoke_from_stdin(self, runner, store, payload):
        """Test a JSON payload on stdin produces the response envelope."""
        result = runner.invoke(main, ["invoke"], input=json.dumps(payload))

        assert result.exit_code == 0
        assert json.loads(result.output.strip().splitlines()[-1]) == {"statusCode": 201}

    def test_invoke_bad_token(self, runner, store, payload):
        """Test the token in the payload is checked."""
        payload["token"] = "wrong"

        result = runner.invoke(main, ["invoke"], input=json.dumps(payload))

        assert json.loads(result.output.strip().splitlines()[-1]) == {"statusCode": 403}
        assert store.calls == 0

    def test_invoke_from_file(self, runner, store, payload, tmp_path):
        """Test the payload can be read from a file."""
        payload_file = tmp_path / "payload.json"
        payload_file.write_text(json.dumps(payload))

        result = runner.invoke(main, ["invoke", str(payload_file)])

        assert json.loads(result.output.strip().splitlines()[-1]) == {"statusCode": 201}

    def test_invoke_invalid_json(self, runner, store):
        """Test malformed JSON exits with status 2."""
        result = runner.invoke(main, ["invoke"], input="{not json")

        assert result.exit_code == 2
        assert "Invalid JSON payload" in result.output
