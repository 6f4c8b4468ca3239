"""
CLI 测试
"""

from __future__ import annotations

import json
import sys

import pytest
from typer.testing import CliRunner

from xiangqi.cli import app
from xiangqi.logging import logger

runner = CliRunner()

INITIAL_FEN = "RNBAKABNR/9/1C5C1/P1P1P1P1P/9/9/p1p1p1p1p/1c5c1/9/rnbakabnr w -- 0 0"


@pytest.fixture(autouse=True)
def restore_logging():
    """CLI 回调会把 sink 绑定到 CliRunner 的临时 stderr，测试后恢复 loguru 默认配置"""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestFenCommand:
    """fen 命令"""

    def test_initial(self):
        result = runner.invoke(app, ["fen"])
        assert result.exit_code == 0
        assert result.stdout.strip() == INITIAL_FEN

    def test_with_routes(self):
        result = runner.invoke(app, ["fen", "-r", "h2e2", "-r", "h9g7"])
        assert result.exit_code == 0
        assert result.stdout.strip().endswith("w -- 2 1")

    def test_json(self):
        result = runner.invoke(app, ["fen", "--route", "b0c2", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["round"] == 1
        assert data["noeat_move_num"] == 1
        assert data["last_move"] == "b0c2"

    def test_bad_route(self):
        result = runner.invoke(app, ["fen", "-r", "e4e5"])
        assert result.exit_code == 1

    @pytest.mark.parametrize("route", ["a/a1", "a0a:"])
    def test_off_board_route(self, route: str):
        """越界走法报错退出，不输出 FEN"""
        result = runner.invoke(app, ["fen", "-r", route])
        assert result.exit_code == 1
        assert " -- " not in result.stdout
        assert not isinstance(result.exception, IndexError)


class TestRouteCommand:
    """route 命令"""

    def test_plain(self):
        result = runner.invoke(app, ["route", "a0i9"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "0-0 9-8"

    def test_json(self):
        result = runner.invoke(app, ["route", "a0i9", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "from": {"row": 0, "col": 0},
            "to": {"row": 9, "col": 8},
        }

    def test_too_short(self):
        result = runner.invoke(app, ["route", "a0"])
        assert result.exit_code == 1


class TestShowCommand:
    """show 命令"""

    def test_show(self):
        result = runner.invoke(app, ["show", "-r", "h2e2"])
        assert result.exit_code == 0
        assert "Round 1, black to move" in result.stdout
        assert "1C2C4" in result.stdout

    def test_show_off_board_route(self):
        result = runner.invoke(app, ["show", "-r", "a/a1"])
        assert result.exit_code == 1
        assert not isinstance(result.exception, IndexError)
