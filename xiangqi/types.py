"""
核心类型定义

定义象棋中所有基础数据类型
"""

from enum import Enum
from typing import NamedTuple

from xiangqi.errors import NotationError

# 走法字符串的基准字符 (列, 行)：列从 'a' 开始，行从 '0' 开始
ROUTE_OFFSET: tuple[int, int] = (ord("a"), ord("0"))


class Side(Enum):
    """行棋方（白 = 红方）"""

    WHITE = "white"
    BLACK = "black"

    @property
    def code(self) -> str:
        """FEN 中的行棋方字符"""
        return "w" if self == Side.WHITE else "b"

    @property
    def opposite(self) -> "Side":
        """获取对方"""
        return Side.BLACK if self == Side.WHITE else Side.WHITE

    @classmethod
    def from_code(cls, code: str) -> "Side":
        for side in cls:
            if side.code == code:
                return side
        raise NotationError(f"Unknown side code: {code!r}")


class Kind(Enum):
    """棋子类型"""

    # 将/帅
    KING = "king"
    # 士/仕
    ADVISOR = "advisor"
    # 象/相
    BISHOP = "bishop"
    # 马
    KNIGHT = "knight"
    # 车
    ROOK = "rook"
    # 炮
    CANNON = "cannon"
    # 卒/兵
    PAWN = "pawn"

    @property
    def code(self) -> str:
        """小写记谱字符"""
        return KIND_TO_CHAR[self]

    @classmethod
    def from_code(cls, code: str) -> "Kind":
        try:
            return CHAR_TO_KIND[code.lower()]
        except KeyError:
            raise NotationError(f"Unknown piece code: {code!r}") from None


# 棋子类型 -> 字符
KIND_TO_CHAR: dict[Kind, str] = {
    Kind.KING: "k",
    Kind.ADVISOR: "a",
    Kind.BISHOP: "b",
    Kind.KNIGHT: "n",
    Kind.ROOK: "r",
    Kind.CANNON: "c",
    Kind.PAWN: "p",
}

# 字符 -> 棋子类型
CHAR_TO_KIND: dict[str, Kind] = {v: k for k, v in KIND_TO_CHAR.items()}


class Position(NamedTuple):
    """棋盘位置 (row, col)

    row: 0-9 (0 是白方底线，9 是黑方底线)
    col: 0-8 (从左到右)
    """

    row: int
    col: int

    def is_valid(self) -> bool:
        """检查位置是否在棋盘范围内"""
        return 0 <= self.row <= 9 and 0 <= self.col <= 8


class Move(NamedTuple):
    """走棋动作"""

    src: Position
    dst: Position


class GameMode(Enum):
    """游戏模式"""

    # 人机对战
    AI_GAME = "ai_game"
    # 打谱推演
    DEDUCE_GAME = "deduce_game"
    # 双人对战
    INTER_GAME = "inter_game"
