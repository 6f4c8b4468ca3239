"""
走棋引擎接口

搜索引擎是外部组件，核心只依赖它保存走棋记录并报告最后一步。
这里定义接口，并提供一个只记录走法的默认实现（用于对局记录和测试）。
"""

from typing import Protocol

from xiangqi.logging import logger
from xiangqi.types import Move, Position

# 引擎内部使用 16x16 的扩展棋盘，有效格子从 (3, 3) 开始
SQUARE_OFFSET = 3
SQUARE_WIDTH = 16


class Engine(Protocol):
    """引擎接口"""

    mv_list: list[int]

    def commit(self, src: Position, dst: Position) -> int:
        """按提交顺序记录一步走法，返回引擎内部编码"""
        ...

    def last_move(self) -> Move | None:
        """最后一步走法（核心坐标），没有走法时返回 None"""
        ...

    def reset(self) -> None:
        """清空走棋记录"""
        ...


def pos2square(row: int, col: int) -> int:
    return (row + SQUARE_OFFSET) * SQUARE_WIDTH + col + SQUARE_OFFSET


def square2pos(sq: int) -> tuple[int, int]:
    return sq // SQUARE_WIDTH - SQUARE_OFFSET, sq % SQUARE_WIDTH - SQUARE_OFFSET


def pos2move(src: tuple[int, int], dst: tuple[int, int]) -> int:
    """坐标转引擎走法编码：起点格 + 终点格 * 256"""
    return pos2square(*src) + pos2square(*dst) * 256


def move2pos(mv: int) -> tuple[tuple[int, int], tuple[int, int]]:
    """引擎走法编码转坐标"""
    return square2pos(mv & 0xFF), square2pos(mv >> 8)


class MoveListEngine:
    """只记录走法的引擎

    不做搜索，也不检查合法性。
    """

    def __init__(self):
        self.mv_list: list[int] = []

    def commit(self, src: Position, dst: Position) -> int:
        mv = pos2move(src, dst)
        self.mv_list.append(mv)
        logger.debug(f"engine commit {src} -> {dst} (mv={mv})")
        return mv

    def last_move(self) -> Move | None:
        if not self.mv_list:
            return None
        (src_row, src_col), (dst_row, dst_col) = move2pos(self.mv_list[-1])
        return Move(Position(src_row, src_col), Position(dst_row, dst_col))

    def reset(self) -> None:
        self.mv_list.clear()

    def __len__(self) -> int:
        return len(self.mv_list)

    def __repr__(self) -> str:
        return f"MoveListEngine(moves={len(self.mv_list)})"
