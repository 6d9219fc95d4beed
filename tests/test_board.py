from engine import Occupant, PieceKind, Side, initial_board
from engine.board import Move, board_fen, empty_board, in_bounds, square_name


BACK = [
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
]


def test_initial_setup():
    board = initial_board()
    assert board[1] == [Occupant(PieceKind.PAWN, Side.BLACK)] * 8
    assert board[6] == [Occupant(PieceKind.PAWN, Side.WHITE)] * 8
    assert board[0] == [Occupant(kind, Side.BLACK) for kind in BACK]
    assert board[7] == [Occupant(kind, Side.WHITE) for kind in BACK]
    for row in range(2, 6):
        assert board[row] == [None] * 8


def test_initial_board_matches_standard_placement():
    assert board_fen(initial_board()) == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def test_square_names_follow_ranks():
    assert square_name((7, 0)) == "a1"
    assert square_name((0, 7)) == "h8"
    assert Move((6, 4), (5, 4)).uci() == "e2e3"


def test_bounds():
    assert in_bounds(0, 0) and in_bounds(7, 7)
    assert not in_bounds(-1, 0)
    assert not in_bounds(0, 8)


def test_side_helpers():
    assert Side.WHITE.opponent is Side.BLACK
    assert Side.BLACK.opponent is Side.WHITE
    assert str(Side.BLACK) == "Black"
    assert Occupant(PieceKind.KNIGHT, Side.WHITE).symbol() == "N"
    assert Occupant(PieceKind.KNIGHT, Side.BLACK).symbol() == "n"


def test_empty_board_rows_are_independent():
    board = empty_board()
    board[0][0] = Occupant(PieceKind.KING, Side.WHITE)
    assert board[1][0] is None
