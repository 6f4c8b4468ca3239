"""
玩家

核心只关心玩家属于哪一方，其余字段由输入层维护
"""

from dataclasses import dataclass

from xiangqi.types import Side


@dataclass
class Player:
    """玩家"""

    side: Side
    name: str = ""

    @classmethod
    def new_white(cls) -> "Player":
        return cls(Side.WHITE, "红方")

    @classmethod
    def new_black(cls) -> "Player":
        return cls(Side.BLACK, "黑方")
