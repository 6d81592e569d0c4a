"""Tests for INFO parsing and summary."""

from __future__ import annotations

import pytest

from redis_tui_core.models.config import ConnectionConfig
from redis_tui_ops.server_info import fetch_server_info, parse_info, summarize_info
from tests.mocks.mock_client import FakeKeyspaceClient
from tests.mocks.mock_factories import make_info_text


@pytest.mark.unit
class TestParseInfo:
    """Test line-level INFO parsing."""

    def test_parses_sections(self) -> None:
        """Headers and blank lines are skipped, CRLF is handled."""
        pairs = parse_info(make_info_text())
        assert pairs["redis_version"] == "7.2.4"
        assert pairs["used_memory_human"] == "1.00M"
        assert pairs["db0"] == "keys=42,expires=3,avg_ttl=0"
        assert not any(key.startswith("#") for key in pairs)

    def test_splits_on_first_colon_only(self) -> None:
        """Values keep any further colons."""
        assert parse_info("executable:/usr/bin/redis-server:7")["executable"] == (
            "/usr/bin/redis-server:7"
        )

    @pytest.mark.parametrize("line", ["no colon here", ":value", "key:", "   "])
    def test_malformed_lines_dropped(self, line: str) -> None:
        """Lines without a non-empty key and value are ignored."""
        pairs = parse_info(f"redis_version:7.2.4\n{line}\nrole:master")
        assert pairs == {"redis_version": "7.2.4", "role": "master"}

    def test_empty_text(self) -> None:
        """Empty input yields no pairs."""
        assert parse_info("") == {}


@pytest.mark.unit
class TestSummarizeInfo:
    """Test summary construction."""

    def test_summary_for_selected_db(self) -> None:
        """The keyspace line of the configured db is picked."""
        config = ConnectionConfig(host="cache", port=6380, db=0)
        summary = summarize_info(config, parse_info(make_info_text()))

        assert summary.version == "7.2.4"
        assert summary.memory == "1.00M"
        assert summary.endpoint == "cache:6380/0"
        assert summary.keyspace == "keys=42,expires=3,avg_ttl=0"

    def test_missing_db_uses_placeholder(self) -> None:
        """A db with no keys shows the placeholder."""
        summary = summarize_info(ConnectionConfig(db=5), parse_info(make_info_text()))
        assert summary.keyspace == "-"

    def test_malformed_line_still_summarizes(self) -> None:
        """One malformed line does not spoil the summary."""
        text = make_info_text(extra_lines=["this line is garbage"])
        summary = summarize_info(ConnectionConfig(), parse_info(text))
        assert summary.version == "7.2.4"
        assert summary.memory == "1.00M"
        assert summary.keyspace.startswith("keys=42")

    def test_render(self) -> None:
        """Render produces the two status lines."""
        summary = summarize_info(ConnectionConfig(), parse_info(make_info_text()))
        assert summary.render() == (
            " RedisVersion: 7.2.4    Memory: 1.00M    Server: 127.0.0.1:6379/0\n"
            " KeySpace: keys=42,expires=3,avg_ttl=0"
        )


@pytest.mark.unit
class TestFetchServerInfo:
    """Test fetching through a client."""

    @pytest.mark.asyncio
    async def test_fetch_uses_client_info(self) -> None:
        """fetch_server_info reads INFO text from the client."""
        client = FakeKeyspaceClient(info_text=make_info_text())
        summary = await fetch_server_info(client, ConnectionConfig())
        assert summary.version == "7.2.4"
