"""Tests for the command-line interface."""

import httpx
import pytest
from click.testing import CliRunner

from conftest import make_feed
from videorepo import cli
from videorepo.config import Config
from videorepo.http import FeedFetcher


@pytest.fixture
def runner(tmp_path, feed_server, monkeypatch):
    config = Config(session_store_path=str(tmp_path / "session.json"))
    monkeypatch.setattr(cli, "get_config", lambda: config)
    monkeypatch.setattr(
        cli,
        "create_fetcher",
        lambda config: FeedFetcher(transport=httpx.MockTransport(feed_server.handler)),
    )
    return CliRunner()


def test_search(runner, feed_server):
    feed_server.add("staff", make_feed(30))

    result = runner.invoke(cli.main, ["search", "staff"])
    assert result.exit_code == 0, result.output
    assert "Video 1" in result.output
    assert "--page 2" in result.output


def test_next_page_reuses_keyword(runner, feed_server):
    """Separate invocations share the keyword through the session file."""
    feed_server.add("staff", make_feed(30))

    runner.invoke(cli.main, ["search", "staff"])
    result = runner.invoke(cli.main, ["search", "--page", "2"])
    assert result.exit_code == 0, result.output
    assert "Video 28" in result.output
    assert "last" in result.output


def test_empty_page(runner, feed_server):
    feed_server.add("staff", make_feed(3))

    result = runner.invoke(cli.main, ["search", "staff", "--page", "4"])
    assert result.exit_code == 0
    assert "No videos on page 4" in result.output


def test_search_failure(runner):
    result = runner.invoke(cli.main, ["search", "nobody"])
    assert result.exit_code == 1
    assert "Search failed" in result.output


def test_unknown_type(runner):
    result = runner.invoke(cli.main, ["search", "staff", "--type", "nope"])
    assert result.exit_code == 1


def test_form(runner):
    result = runner.invoke(cli.main, ["form"])
    assert result.exit_code == 0
    assert "Search videos" in result.output


def test_info(runner):
    result = runner.invoke(cli.main, ["info"])
    assert result.exit_code == 0
    assert "vimeo" in result.output
    assert "external" in result.output
