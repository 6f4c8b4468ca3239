"""
记谱转换

两个互相独立、无状态的转换：

1. 走法字符串 <-> 坐标

   走法字符串是 4 个 ASCII 字符 `<起点列><起点行><终点列><终点行>`，
   每个字符都是基准字符加偏移量（见 ROUTE_OFFSET）：

       "a0i9" -> ((0, 0), (9, 8))

2. 棋盘 -> 类 FEN 字符串

       <棋盘> <行棋方> -- <未吃子步数> <回合数>

   棋盘部分按格子顺序从 row 0 到 row 9，每行从 col 0 到 col 8，
   连续空格合并成数字，行与行用 `/` 分隔。`--` 是保留字段。

   初始局面：
       RNBAKABNR/9/1C5C1/P1P1P1P1P/9/9/p1p1p1p1p/1c5c1/9/rnbakabnr w -- 0 0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xiangqi.errors import InactiveSideError, RouteError
from xiangqi.types import ROUTE_OFFSET, Position, Side

if TYPE_CHECKING:
    from xiangqi.board import Board

# 保留字段（规则状态占位）
RESERVED_FIELD = "--"


# =============================================================================
# 走法字符串
# =============================================================================


def parse_route(route: str) -> tuple[tuple[int, int], tuple[int, int]]:
    """解析走法字符串

    Args:
        route: 至少 4 个字符，只读取前 4 个

    Returns:
        ((src_row, src_col), (dst_row, dst_col))，不检查坐标范围
    """
    if len(route) < 4:
        raise RouteError(route)

    col_base, row_base = ROUTE_OFFSET
    src_col = ord(route[0]) - col_base
    src_row = ord(route[1]) - row_base
    dst_col = ord(route[2]) - col_base
    dst_row = ord(route[3]) - row_base
    return (src_row, src_col), (dst_row, dst_col)


def format_route(src: tuple[int, int], dst: tuple[int, int]) -> str:
    """坐标转走法字符串"""
    col_base, row_base = ROUTE_OFFSET
    return "".join(
        (
            chr(col_base + src[1]),
            chr(row_base + src[0]),
            chr(col_base + dst[1]),
            chr(row_base + dst[0]),
        )
    )


def parse_move(route: str) -> tuple[Position, Position]:
    """解析走法字符串，返回 Position 对"""
    src, dst = parse_route(route)
    return Position(*src), Position(*dst)


# =============================================================================
# FEN 生成
# =============================================================================


def board_to_fen(board: Board) -> str:
    """棋盘部分"""
    lines: list[str] = []

    for pieces in board.rows():
        line = ""
        empty_count = 0
        for piece in pieces:
            if piece is None:
                empty_count += 1
            else:
                if empty_count > 0:
                    line += str(empty_count)
                    empty_count = 0
                line += piece.code()
        if empty_count > 0:
            line += str(empty_count)
        lines.append(line)

    return "/".join(lines)


def to_fen(board: Board, side: Side | None, noeat_move_num: int, round: int) -> str:
    """生成完整的 FEN 字符串

    Raises:
        InactiveSideError: 行棋方未设置
    """
    if side is None:
        raise InactiveSideError("to_fen")
    return f"{board_to_fen(board)} {side.code} {RESERVED_FIELD} {noeat_move_num} {round}"
