"""Tests for the Actor entry point."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from stack_badges import main as main_module


class FakeActor:
    """Stands in for apify.Actor: an async context manager with recorded calls."""

    def __init__(self, input_data) -> None:
        self.get_input = AsyncMock(return_value=input_data)
        self.fail = AsyncMock()
        self.set_value = AsyncMock()
        self.push_data = AsyncMock()
        self.log = MagicMock()

    async def __aenter__(self) -> "FakeActor":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None


@pytest.fixture
def run_actor(monkeypatch):
    def _run(input_data) -> FakeActor:
        actor = FakeActor(input_data)
        monkeypatch.setattr(main_module, "Actor", actor)
        asyncio.run(main_module.main())
        return actor

    return _run


class TestMain:
    """Tests for main()."""

    def test_invalid_languages_fails_without_output(self, run_actor) -> None:
        actor = run_actor({"languages": 5})

        actor.fail.assert_awaited_once()
        assert "languages" in actor.fail.await_args.kwargs["status_message"]
        actor.set_value.assert_not_awaited()
        actor.push_data.assert_not_awaited()

    def test_valid_input_stores_html_and_pushes_records(self, run_actor) -> None:
        actor = run_actor({"languages": ["python", "mysql"]})

        actor.fail.assert_not_awaited()
        actor.set_value.assert_awaited_once()
        args, kwargs = actor.set_value.await_args
        assert args[0] == "OUTPUT_BADGES"
        assert 'data-icon="python"' in args[1]
        assert kwargs["content_type"] == "text/html"

        actor.push_data.assert_awaited_once()
        records = actor.push_data.await_args.args[0]
        assert [record["key"] for record in records] == ["python", "mysql"]
        actor.log.warning.assert_not_called()

    def test_unknown_key_logs_warning(self, run_actor) -> None:
        actor = run_actor({"languages": "python, unknown-xyz"})

        actor.log.warning.assert_called_once()
        assert "unknown-xyz" in actor.log.warning.call_args.args[0]
        records = actor.push_data.await_args.args[0]
        assert records[1]["fallback"] is True

    def test_missing_input_resolves_every_language(self, run_actor) -> None:
        actor = run_actor(None)

        records = actor.push_data.await_args.args[0]
        assert len(records) == len(main_module.parse_requested_keys(None))

    def test_custom_title(self, run_actor) -> None:
        actor = run_actor({"languages": "python", "title": "My Stack"})

        html = actor.set_value.await_args.args[1]
        assert "<title>My Stack</title>" in html

    @pytest.mark.parametrize("title", [None, ""])
    def test_null_or_empty_title_uses_default(self, run_actor, title) -> None:
        actor = run_actor({"languages": "python", "title": title})

        html = actor.set_value.await_args.args[1]
        assert "<title>Tech Stack</title>" in html
        assert "Tech Stack (1)" in html
        assert "None" not in html
