"""
象棋游戏状态核心

棋盘、行棋方、走棋记录，以及 FEN / 走法字符串转换
"""

from xiangqi.board import Board
from xiangqi.engine import Engine, MoveListEngine
from xiangqi.errors import (
    EmptySquareError,
    InactiveSideError,
    NotationError,
    OffBoardError,
    RouteError,
    XiangqiError,
)
from xiangqi.fen import board_to_fen, format_route, parse_route, to_fen
from xiangqi.game import GameConfig, GameState
from xiangqi.piece import Piece
from xiangqi.player import Player
from xiangqi.types import ROUTE_OFFSET, GameMode, Kind, Move, Position, Side

__all__ = [
    "Board",
    "EmptySquareError",
    "Engine",
    "GameConfig",
    "GameMode",
    "GameState",
    "InactiveSideError",
    "Kind",
    "Move",
    "MoveListEngine",
    "NotationError",
    "OffBoardError",
    "Piece",
    "Player",
    "Position",
    "ROUTE_OFFSET",
    "RouteError",
    "Side",
    "XiangqiError",
    "board_to_fen",
    "format_route",
    "parse_route",
    "to_fen",
]
