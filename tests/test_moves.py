import pytest

from bitchess.bitboard import bitboard_from_fen, initial_bitboard
from bitchess.moves import (
    Color,
    PieceType,
    algebraic_to_numeric,
    get_all_pieces_moves,
    get_pawn_moves,
    get_piece_color,
    get_piece_type,
    get_rook_moves,
    num_nonzero_moves,
    numeric_to_algebraic,
)

START = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq 0 0"


PAWN_CASES = [
    ("WP push 2, no captures", START, 12, [20, 28]),
    ("WP push 1, no captures",
     "rnbqkbnr/3p4/8/3p4/8/8/PPPPPPPP/RNBQKBNR w KQkq 0 0", 12, [20]),
    ("WP push 1, no captures (advanced)",
     "rnbqkbnr/8/3p4/8/8/8/PPPPPPPP/RNBQKBNR w KQkq 0 0", 20, [28]),
    ("WP no push, no captures",
     "rnbqkbnr/3p4/3p4/8/8/8/PPPPPPPP/RNBQKBNR w KQkq 0 0", 12, []),
    ("WP no push, 2 captures",
     "rnbqkbnr/3p4/2PPP3/8/8/8/PPPPPPPP/RNBQKBNR w KQkq 0 0", 12, [19, 21]),
    # Square 16 flips onto the h-file pawn of the third rank, a black pawn.
    ("edge square resolves to black pawn",
     "rnbqkbnr/7p/PPPPPPPP/8/8/8/PPPPPPPP/RNBQKBNR w KQkq 0 0", 16, [7]),
    ("BP push 2, no captures", START, 52, [44, 36]),
    ("BP push 1, no captures",
     "rnbqkbnr/pppppppp/8/8/3p4/8/PPPPPPPP/RNBQKBNR w KQkq 0 0", 52, [44]),
    ("BP push 1, no captures (advanced)",
     "rnbqkbnr/pppppppp/8/8/8/3P4/PPPPPPPP/RNBQKBNR w KQkq 0 0", 44, [36]),
    ("BP no push, no captures",
     "rnbqkbnr/pppppppp/8/8/8/3P4/PPPPPPPP/RNBQKBNR w KQkq 0 0", 52, []),
    ("BP no push, 2 captures",
     "rnbqkbnr/pppppppp/8/8/8/2ppp3/PPPPPPPP/RNBQKBNR w KQkq 0 0", 52, [45, 43]),
]


@pytest.mark.parametrize("name, fen, square, expected", PAWN_CASES,
                         ids=[case[0] for case in PAWN_CASES])
def test_pawn_moves(name, fen, square, expected):
    board = bitboard_from_fen(fen)
    assert get_pawn_moves(board, square) == expected


def test_pawn_moves_edge_square_not_a_pawn():
    board = bitboard_from_fen("rnbqkbnr/pppppppp/8/8/8/6pp/7P/RNBQKBNR w KQkq 0 0")
    with pytest.raises(ValueError, match="pawn"):
        get_pawn_moves(board, 56)


def test_pawn_moves_on_empty_square_raises():
    with pytest.raises(ValueError):
        get_pawn_moves(initial_bitboard(), 30)


def test_rook_slide():
    board = bitboard_from_fen("7r/8/8/8/8/8/8/8 w KQkq 0 0")
    assert get_rook_moves(board, 1) == [2, 3, 4, 5, 6, 7, 8, 9, 17, 25, 33, 41, 49, 57]


def test_rook_slide_count_matches_nonzero_index():
    board = bitboard_from_fen("7r/8/8/8/8/8/8/8 w KQkq 0 0")
    moves = get_rook_moves(board, 1)
    assert num_nonzero_moves(moves) == len(moves) - 1 == 13


def test_black_rook_has_no_moves():
    board = bitboard_from_fen("7R/8/8/8/8/8/8/8 w KQkq 0 0")
    assert get_rook_moves(board, 1) == []


def test_rook_moves_without_rook_raises():
    board = bitboard_from_fen("8/8/8/8/8/8/8/8")
    with pytest.raises(ValueError, match="rook"):
        get_rook_moves(board, 1)


@pytest.mark.parametrize(
    "numeric, name",
    [(12, "d2"), (1, "a1"), (64, "h8"), (29, "e4"), (20, "d3")],
)
def test_numeric_to_algebraic(numeric, name):
    assert numeric_to_algebraic(numeric) == name


def test_numeric_to_algebraic_below_range_is_blank():
    assert numeric_to_algebraic(0) == "  "


@pytest.mark.parametrize("name, numeric", [("e4", 29), ("a1", 1), ("h8", 64), ("d2", 12)])
def test_algebraic_to_numeric(name, numeric):
    assert algebraic_to_numeric(name) == numeric


def test_algebraic_round_trip():
    for square in range(1, 65):
        assert algebraic_to_numeric(numeric_to_algebraic(square)) == square


def test_algebraic_to_numeric_too_short():
    with pytest.raises(ValueError):
        algebraic_to_numeric("e")


@pytest.mark.parametrize(
    "bit, kind",
    [
        (0, PieceType.ROOK),
        (63, PieceType.ROOK),
        (51, PieceType.PAWN),
        (9, PieceType.PAWN),
        (57, PieceType.KNIGHT),
        (58, PieceType.BISHOP),
        (59, PieceType.QUEEN),
        (60, PieceType.KING),
        (32, PieceType.NONE),
    ],
)
def test_piece_type_in_start_position(bit, kind):
    assert get_piece_type(initial_bitboard(), bit) == kind


@pytest.mark.parametrize(
    "bit, color",
    [(63, Color.WHITE), (48, Color.WHITE), (0, Color.BLACK), (15, Color.BLACK), (32, Color.NONE)],
)
def test_piece_color_in_start_position(bit, color):
    assert get_piece_color(initial_bitboard(), bit) == color


def test_piece_color_values():
    board = initial_bitboard()
    assert get_piece_color(board, 63) == 1
    assert get_piece_color(board, 0) == 0
    assert get_piece_color(board, 40) == -1


def test_piece_lookup_wraps_out_of_range_bits():
    board = initial_bitboard()
    assert get_piece_type(board, -1) == get_piece_type(board, 63) == PieceType.ROOK
    assert get_piece_color(board, 64) == Color.BLACK


def test_all_black_pawn_moves_from_start():
    moves = get_all_pieces_moves(initial_bitboard(), "P")
    assert moves == [47, 39, 46, 38, 45, 37, 44, 36, 43, 35, 42, 34, 41, 33]


def test_all_white_pawn_moves_from_start_are_pushes_forward():
    moves = get_all_pieces_moves(initial_bitboard(), "p")
    assert len(moves) == 14
    assert all(17 <= move <= 31 for move in moves)


def test_all_pieces_moves_unsupported_piece():
    with pytest.raises(ValueError):
        get_all_pieces_moves(initial_bitboard(), "r")


def test_all_pieces_moves_without_pawns_is_empty():
    board = bitboard_from_fen("7r/8/8/8/8/8/8/8")
    assert get_all_pieces_moves(board, "p") == []


@pytest.mark.parametrize(
    "moves, expected",
    [
        ([20, 28], 1),
        ([20, 28, 0, 0], 1),
        ([20, 0], 0),
        ([0, 0], -1),
        ([], -1),
        ([5] * 28, 0),
        ([5] * 30, 0),
    ],
)
def test_num_nonzero_moves(moves, expected):
    assert num_nonzero_moves(moves) == expected