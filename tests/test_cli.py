"""Tests for the command line interface."""

import json

import pytest

from aurora.main import build_parser, run


class TestCli:
    """Test suite for the aurora command."""

    def test_parser_defaults(self):
        args = build_parser().parse_args(["What is autism?"])
        assert args.question == "What is autism?"
        assert args.json is False
        assert args.max_references == 4
        assert args.log_level == "INFO"

    @pytest.mark.asyncio
    async def test_json_output(self, capsys):
        args = build_parser().parse_args(["What are sensory strategies for autism?", "--json"])

        assert await run(args) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["status"] == "success"
        assert payload["isInDomain"] is True

    @pytest.mark.asyncio
    async def test_text_output(self, capsys):
        args = build_parser().parse_args(["best pizza topping?"])

        assert await run(args) == 0
        assert "Status: Off Topic" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_missing_question(self, capsys):
        assert await run(build_parser().parse_args([])) == 2
        assert "Error:" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_status(self, capsys):
        assert await run(build_parser().parse_args(["--status"])) == 0
        assert json.loads(capsys.readouterr().out)["ai_service"] == "not_configured"

    @pytest.mark.asyncio
    async def test_info(self, capsys):
        assert await run(build_parser().parse_args(["--info"])) == 0
        info = json.loads(capsys.readouterr().out)
        assert info["name"] == "Aurora"
        assert info["contact"]["crisis"] == "Crisis Text Line: Text HOME to 741741"
