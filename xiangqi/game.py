"""
游戏状态

聚合棋盘、双方玩家、回合计数、走棋记录（由引擎保存）和界面选择状态，
提供换边、查询和提交走法等操作。
"""

from dataclasses import dataclass, field
from uuid import uuid4

from xiangqi import fen
from xiangqi.board import Board
from xiangqi.engine import Engine, MoveListEngine
from xiangqi.errors import InactiveSideError, OffBoardError
from xiangqi.logging import logger
from xiangqi.piece import Piece
from xiangqi.player import Player
from xiangqi.types import GameMode, Move, Position, Side


def _on_board(pos: tuple[int, int]) -> Position:
    """转成 Position，超出棋盘时报错"""
    pos = Position(*pos)
    if not pos.is_valid():
        raise OffBoardError(*pos)
    return pos


@dataclass
class GameConfig:
    """游戏配置"""

    mode: GameMode | None = None  # 游戏模式
    ai_side: Side | None = None  # 电脑执哪一方
    game_id: str = field(default_factory=lambda: str(uuid4()))


class GameState:
    """象棋游戏状态

    创建时是标准开局、没有行棋方；调用 start() 后才能走棋。
    """

    def __init__(self, config: GameConfig | None = None, engine: Engine | None = None):
        logger.info("init system data")
        self.config = config or GameConfig()
        self.game_id = self.config.game_id
        # 红方（白方）玩家
        self.white_player = Player.new_white()
        # 黑方玩家
        self.black_player = Player.new_black()
        # 棋盘
        self.board = Board.new()
        # 当前回合数（白方每走一步加一）
        self.round = 0
        # 没有吃子的步数
        self.noeat_move_num = 0
        # 当前行棋方
        self.current_side: Side | None = None
        # 走棋引擎（保存走棋记录）
        self.engine: Engine = engine if engine is not None else MoveListEngine()
        # 游戏模式
        self.mode: GameMode | None = self.config.mode
        # 选中的棋子
        self.selected: Piece | None = None
        # 电脑执哪一方
        self.ai_side: Side | None = self.config.ai_side

    def start(self) -> None:
        """开始游戏，白方先走"""
        self.current_side = Side.WHITE
        logger.info(f"game {self.game_id} started, mode={self.mode}, ai_side={self.ai_side}")

    def _require_side(self, operation: str) -> Side:
        if self.current_side is None:
            raise InactiveSideError(operation)
        return self.current_side

    def get_current_player(self) -> Player:
        """当前行棋方的玩家"""
        side = self._require_side("get_current_player")
        return self.white_player if side == Side.WHITE else self.black_player

    def change_side(self) -> None:
        """换边

        白方走完回合数加一再轮到黑方；黑方走完只换边，回合数不变。
        """
        side = self._require_side("change_side")
        if side == Side.WHITE:
            self.round += 1
            self.current_side = Side.BLACK
        else:
            self.current_side = Side.WHITE
        logger.debug(f"side changed to {self.current_side.value}, round={self.round}")

    def is_ai_turn(self) -> bool:
        """当前是否轮到电脑走"""
        return self.ai_side is not None and self.current_side == self.ai_side

    def get_last_move(self) -> Move | None:
        """最后一步走法，用于界面高亮"""
        last = self.engine.last_move()
        if last is not None:
            src, dst = last
            logger.debug(f"last move {src.row}-{src.col} {dst.row}-{dst.col}")
        return last

    def to_fen(self) -> str:
        """导出 FEN 字符串"""
        return fen.to_fen(self.board, self.current_side, self.noeat_move_num, self.round)

    def parse_route(self, route: str) -> tuple[tuple[int, int], tuple[int, int]]:
        """解析走法字符串"""
        return fen.parse_route(route)

    def commit_move(self, src: tuple[int, int], dst: tuple[int, int]) -> Piece | None:
        """提交一步已确定的走法

        移动棋子、更新未吃子步数、通知引擎并换边。不检查走法是否合法。

        Returns:
            被吃的棋子（如果有）
        """
        side = self._require_side("commit_move")
        src, dst = _on_board(src), _on_board(dst)

        captured = self.board.move_piece(src, dst)
        if captured is None:
            self.noeat_move_num += 1
        else:
            self.noeat_move_num = 0

        self.engine.commit(src, dst)
        self.selected = None
        logger.info(
            f"{side.value} {fen.format_route(src, dst)}"
            + (f" captures {captured!r}" if captured else "")
        )
        self.change_side()
        return captured

    def commit_route(self, route: str) -> Piece | None:
        """按走法字符串提交走法"""
        src, dst = self.parse_route(route)
        return self.commit_move(src, dst)

    def select(self, pos: tuple[int, int]) -> Piece | None:
        """选中指定位置的棋子（空格子则清空选择）"""
        self.selected = self.board[_on_board(pos)]
        return self.selected

    def clear_selection(self) -> None:
        self.selected = None

    def to_dict(self) -> dict:
        """序列化为字典（供渲染层读取）"""
        last = self.get_last_move()
        return {
            "game_id": self.game_id,
            "board": self.board.to_dict(),
            "current_side": self.current_side.value if self.current_side else None,
            "round": self.round,
            "noeat_move_num": self.noeat_move_num,
            "mode": self.mode.value if self.mode else None,
            "ai_side": self.ai_side.value if self.ai_side else None,
            "selected": self.selected.to_dict() if self.selected else None,
            "last_move": (
                {
                    "from": {"row": last[0].row, "col": last[0].col},
                    "to": {"row": last[1].row, "col": last[1].col},
                }
                if last
                else None
            ),
            "move_count": len(self.engine.mv_list),
        }

    def __repr__(self) -> str:
        side = self.current_side.value if self.current_side else None
        return f"GameState({self.game_id}, side={side}, round={self.round})"
