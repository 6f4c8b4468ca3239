"""
象棋状态 CLI

诊断用命令行接口：
- fen: 从开局走若干步后输出 FEN
- route: 解析走法字符串
- show: 显示棋盘

## 使用示例

```bash
python -m xiangqi.cli fen --route h2e2 --route h9g7
python -m xiangqi.cli route a0i9 --json
python -m xiangqi.cli show -r b0c2
```
"""

from __future__ import annotations

import json
import sys

import typer
from rich.console import Console
from rich.table import Table

from xiangqi.errors import XiangqiError
from xiangqi.fen import format_route, parse_route
from xiangqi.game import GameState
from xiangqi.logging import DEFAULT_LOG_FILE, setup_logging
from xiangqi.types import Side

console = Console()
app = typer.Typer(help="Xiangqi game-state core - FEN / route tools")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="控制台日志级别"),
    log_file: bool = typer.Option(False, "--log-file", help="同时写入 logs/app.log"),
) -> None:
    """配置日志"""
    setup_logging(log_level, DEFAULT_LOG_FILE if log_file else None)


def _play(routes: list[str] | None) -> GameState:
    """开局并依次提交走法"""
    state = GameState()
    state.start()
    for route in routes or []:
        state.commit_route(route)
    return state


@app.command()
def fen(
    routes: list[str] | None = typer.Option(None, "--route", "-r", help="依次提交的走法"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """输出当前局面的 FEN"""
    try:
        state = _play(routes)
        fen_str = state.to_fen()
    except XiangqiError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None

    if output_json:
        last = state.get_last_move()
        response = {
            "fen": fen_str,
            "round": state.round,
            "noeat_move_num": state.noeat_move_num,
            "last_move": format_route(*last) if last else None,
        }
        print(json.dumps(response, indent=2))
    else:
        print(fen_str)


@app.command()
def route(
    value: str = typer.Argument(..., help="走法字符串，如 a0i9"),
    output_json: bool = typer.Option(False, "--json", help="JSON 输出"),
) -> None:
    """解析走法字符串"""
    try:
        (src_row, src_col), (dst_row, dst_col) = parse_route(value)
    except XiangqiError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(1) from None

    if output_json:
        response = {
            "from": {"row": src_row, "col": src_col},
            "to": {"row": dst_row, "col": dst_col},
        }
        print(json.dumps(response, indent=2))
    else:
        print(f"{src_row}-{src_col} {dst_row}-{dst_col}")


@app.command()
def show(
    routes: list[str] | None = typer.Option(None, "--route", "-r", help="依次提交的走法"),
) -> None:
    """显示棋盘"""
    try:
        state = _play(routes)
    except XiangqiError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    last = state.get_last_move()
    highlight = set(last) if last else set()

    table = Table(title=f"Round {state.round}, {state.current_side.value} to move")
    table.add_column("", style="dim", justify="right")
    for col in "abcdefghi":
        table.add_column(col, justify="center")

    for row in range(9, -1, -1):
        cells = []
        for col in range(9):
            piece = state.board[row, col]
            text = "." if piece is None else piece.code()
            if piece is not None:
                style = "red" if piece.side == Side.WHITE else "blue"
                text = f"[{style}]{text}[/{style}]"
            if (row, col) in highlight:
                text = f"[reverse]{text}[/reverse]"
            cells.append(text)
        table.add_row(str(row), *cells)

    console.print(table)
    console.print(state.to_fen())


if __name__ == "__main__":
    app()
