"""
棋子定义

棋子是不可变的值对象：走棋时替换棋盘格子里的值，而不是修改棋子本身
"""

from dataclasses import dataclass

from xiangqi.types import Kind, Side


@dataclass(frozen=True)
class Piece:
    """棋子

    row/col 只记录创建时的位置（用于初始布局），棋子移动后不会同步，
    棋盘格子的索引才是真实位置。
    """

    kind: Kind
    side: Side
    row: int
    col: int

    @classmethod
    def white(cls, kind: Kind, row: int, col: int) -> "Piece":
        return cls(kind, Side.WHITE, row, col)

    @classmethod
    def black(cls, kind: Kind, row: int, col: int) -> "Piece":
        return cls(kind, Side.BLACK, row, col)

    def code(self) -> str:
        """FEN 字符：白方大写，黑方小写"""
        char = self.kind.code
        return char.upper() if self.side == Side.WHITE else char

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.side.value})"

    def to_dict(self) -> dict:
        """序列化为字典"""
        return {"kind": self.kind.value, "side": self.side.value, "code": self.code()}
