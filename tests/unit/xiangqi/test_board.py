"""
棋盘单元测试
"""

import pytest

from xiangqi.board import Board
from xiangqi.errors import EmptySquareError
from xiangqi.piece import Piece
from xiangqi.types import Kind, Position, Side

BACK_ROW = [
    Kind.ROOK,
    Kind.KNIGHT,
    Kind.BISHOP,
    Kind.ADVISOR,
    Kind.KING,
    Kind.ADVISOR,
    Kind.BISHOP,
    Kind.KNIGHT,
    Kind.ROOK,
]


class TestInitialLayout:
    """初始布局测试"""

    @pytest.fixture
    def board(self) -> Board:
        return Board.new()

    def test_piece_count(self, board: Board):
        """开局共 32 个棋子，双方各 16 个"""
        assert len(board) == 32
        assert len(list(board.pieces(Side.WHITE))) == 16
        assert len(list(board.pieces(Side.BLACK))) == 16

    @pytest.mark.parametrize("row,side", [(0, Side.WHITE), (9, Side.BLACK)])
    def test_back_rows(self, board: Board, row: int, side: Side):
        """底线：车马象士将士象马车"""
        pieces = [board[row, col] for col in range(9)]
        assert all(p is not None and p.side == side for p in pieces)
        assert [p.kind for p in pieces] == BACK_ROW

    @pytest.mark.parametrize("row,side", [(2, Side.WHITE), (7, Side.BLACK)])
    def test_cannon_rows(self, board: Board, row: int, side: Side):
        """炮只在第 1、7 列"""
        for col in range(9):
            piece = board[row, col]
            if col in (1, 7):
                assert piece == Piece(Kind.CANNON, side, row, col)
            else:
                assert piece is None

    @pytest.mark.parametrize("row,side", [(3, Side.WHITE), (6, Side.BLACK)])
    def test_pawn_rows(self, board: Board, row: int, side: Side):
        """兵/卒在 0、2、4、6、8 列"""
        for col in range(9):
            piece = board[row, col]
            if col % 2 == 0:
                assert piece == Piece(Kind.PAWN, side, row, col)
            else:
                assert piece is None

    @pytest.mark.parametrize("row", [1, 4, 5, 8])
    def test_empty_rows(self, board: Board, row: int):
        assert all(board[row, col] is None for col in range(9))

    def test_pieces_record_initial_position(self, board: Board):
        """初始布局中棋子记录的位置和格子一致"""
        for pos, piece in board.pieces():
            assert (piece.row, piece.col) == pos


class TestBoardAccess:
    """格子读写测试"""

    def test_empty_board(self):
        board = Board.empty()
        assert len(board) == 0
        assert all(cell is None for line in board.rows() for cell in line)

    def test_rows_shape(self):
        rows = list(Board.new().rows())
        assert len(rows) == 10
        assert all(len(line) == 9 for line in rows)

    def test_set_and_get(self):
        board = Board.empty()
        piece = Piece.black(Kind.KING, 9, 4)
        board.set_piece(Position(8, 4), piece)
        assert board.get_piece(Position(8, 4)) is piece
        assert board[8, 4] is piece

        board[8, 4] = None
        assert board[8, 4] is None


class TestMovePiece:
    """移动棋子测试"""

    def test_move_to_empty(self):
        board = Board.new()
        rook = board[0, 0]
        captured = board.move_piece((0, 0), (2, 0))

        assert captured is None
        assert board[0, 0] is None
        assert board[2, 0] is rook
        assert len(board) == 32

    def test_move_with_capture(self):
        """吃子：替换格子里的棋子"""
        board = Board.new()
        cannon = board[2, 1]
        captured = board.move_piece((2, 1), (9, 1))

        assert captured == Piece.black(Kind.KNIGHT, 9, 1)
        assert board[9, 1] is cannon
        assert len(board) == 31

    def test_piece_keeps_construction_coordinates(self):
        """移动后棋子本身不变，格子索引才是真实位置"""
        board = Board.new()
        board.move_piece((3, 4), (4, 4))
        pawn = board[4, 4]
        assert (pawn.row, pawn.col) == (3, 4)

    def test_move_from_empty_square(self):
        board = Board.new()
        with pytest.raises(EmptySquareError):
            board.move_piece((4, 4), (5, 4))


class TestBoardCopy:
    """快照测试"""

    def test_copy_is_independent(self):
        board = Board.new()
        snapshot = board.copy()
        assert snapshot == board

        board.move_piece((0, 0), (1, 0))
        assert snapshot != board
        assert snapshot[0, 0] is not None

    def test_to_dict(self):
        data = Board.new().to_dict()
        assert len(data["pieces"]) == 32
        assert {"kind": "king", "side": "white", "code": "K", "position": {"row": 0, "col": 4}} in data[
            "pieces"
        ]

    def test_display(self):
        text = Board.new().display()
        lines = text.split("\n")
        assert len(lines) == 11
        assert lines[0].startswith("9 车")
        assert lines[9].startswith("0 车")
