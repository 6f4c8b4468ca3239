"""
棋盘类定义

10 行 x 9 列的格子，每格最多一个棋子，是棋子位置的唯一依据
"""

from typing import Iterator

from xiangqi.errors import EmptySquareError
from xiangqi.piece import Piece
from xiangqi.types import Kind, Position, Side

ROWS = 10
COLS = 9

# 后排棋子（从左到右）
BACK_ROW = (
    Kind.ROOK,
    Kind.KNIGHT,
    Kind.BISHOP,
    Kind.ADVISOR,
    Kind.KING,
    Kind.ADVISOR,
    Kind.BISHOP,
    Kind.KNIGHT,
    Kind.ROOK,
)
CANNON_COLS = (1, 7)
PAWN_COLS = (0, 2, 4, 6, 8)


class Board:
    """象棋棋盘

    坐标系统：
    - row 0-9: 0 是白方底线，9 是黑方底线
    - col 0-8: 从左到右
    """

    def __init__(self, setup: bool = True):
        self._grid: list[list[Piece | None]] = [[None] * COLS for _ in range(ROWS)]
        if setup:
            self._setup_initial_position()

    @classmethod
    def new(cls) -> "Board":
        """标准开局"""
        return cls()

    @classmethod
    def empty(cls) -> "Board":
        """空棋盘"""
        return cls(setup=False)

    def _setup_initial_position(self) -> None:
        """初始化棋盘布局"""
        # 白方（下方，row 0-4）
        self._place_pieces_for_side(Side.WHITE, base_row=0, cannon_row=2, pawn_row=3)
        # 黑方（上方，row 5-9）
        self._place_pieces_for_side(Side.BLACK, base_row=9, cannon_row=7, pawn_row=6)

    def _place_pieces_for_side(
        self, side: Side, base_row: int, cannon_row: int, pawn_row: int
    ) -> None:
        """为一方放置所有棋子"""
        for col, kind in enumerate(BACK_ROW):
            self._grid[base_row][col] = Piece(kind, side, base_row, col)
        for col in CANNON_COLS:
            self._grid[cannon_row][col] = Piece(Kind.CANNON, side, cannon_row, col)
        for col in PAWN_COLS:
            self._grid[pawn_row][col] = Piece(Kind.PAWN, side, pawn_row, col)

    def __getitem__(self, pos: tuple[int, int]) -> Piece | None:
        row, col = pos
        return self._grid[row][col]

    def __setitem__(self, pos: tuple[int, int], piece: Piece | None) -> None:
        row, col = pos
        self._grid[row][col] = piece

    def get_piece(self, pos: Position) -> Piece | None:
        """获取指定位置的棋子"""
        return self[pos]

    def set_piece(self, pos: Position, piece: Piece | None) -> None:
        """设置指定位置的棋子（None 表示清空）"""
        self[pos] = piece

    def move_piece(self, src: tuple[int, int], dst: tuple[int, int]) -> Piece | None:
        """把 src 的棋子移到 dst，返回被吃的棋子（如果有）

        不检查走法是否合法，合法性由外部引擎负责。
        """
        piece = self[src]
        if piece is None:
            raise EmptySquareError(*src)
        captured = self[dst]
        self[dst] = piece
        self[src] = None
        return captured

    def rows(self) -> Iterator[tuple[Piece | None, ...]]:
        """按 row 0 到 row 9 的顺序遍历每一行"""
        for line in self._grid:
            yield tuple(line)

    def pieces(self, side: Side | None = None) -> Iterator[tuple[Position, Piece]]:
        """遍历所有棋子及其所在位置，可按行棋方过滤"""
        for row, line in enumerate(self._grid):
            for col, piece in enumerate(line):
                if piece is not None and (side is None or piece.side == side):
                    yield Position(row, col), piece

    def copy(self) -> "Board":
        """创建棋盘快照（棋子不可变，浅拷贝格子即可）"""
        new_board = Board.__new__(Board)
        new_board._grid = [list(line) for line in self._grid]
        return new_board

    def __len__(self) -> int:
        return sum(1 for _ in self.pieces())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"Board({len(self)} pieces)"

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {
            "pieces": [
                {**piece.to_dict(), "position": {"row": pos.row, "col": pos.col}}
                for pos, piece in self.pieces()
            ]
        }

    def display(self) -> str:
        """返回棋盘的文本表示"""
        char_map = {
            (Kind.KING, Side.WHITE): "帅",
            (Kind.KING, Side.BLACK): "将",
            (Kind.ADVISOR, Side.WHITE): "仕",
            (Kind.ADVISOR, Side.BLACK): "士",
            (Kind.BISHOP, Side.WHITE): "相",
            (Kind.BISHOP, Side.BLACK): "象",
            (Kind.KNIGHT, Side.WHITE): "马",
            (Kind.KNIGHT, Side.BLACK): "马",
            (Kind.ROOK, Side.WHITE): "车",
            (Kind.ROOK, Side.BLACK): "车",
            (Kind.CANNON, Side.WHITE): "炮",
            (Kind.CANNON, Side.BLACK): "炮",
            (Kind.PAWN, Side.WHITE): "兵",
            (Kind.PAWN, Side.BLACK): "卒",
        }

        lines = []
        for row in range(ROWS - 1, -1, -1):
            line = f"{row} "
            for col in range(COLS):
                piece = self._grid[row][col]
                line += "十 " if piece is None else char_map[(piece.kind, piece.side)] + " "
            lines.append(line)
        lines.append("  a  b  c  d  e  f  g  h  i")
        return "\n".join(lines)
