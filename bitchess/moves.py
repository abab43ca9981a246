"""Square notation, piece lookup and move generation for pawns and rooks.

Squares passed to the move generators are numbered 1 to 64. A square is
mapped onto a bitboard bit by flipping it (``63 - square`` for pawns,
``64 - square`` for rooks). Bit positions outside 0..63 wrap modulo 64.
"""

from __future__ import annotations

from enum import IntEnum

from .bitboard import Bitboard

# A piece can have at most this many moves (a queen in the open).
MAX_MOVES = 28


class PieceType(IntEnum):
    """Kind of piece on a square; NONE for an empty square."""

    NONE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Color(IntEnum):
    """Colour of the piece on a square; NONE for an empty square."""

    NONE = -1
    BLACK = 0
    WHITE = 1


def _bit(mask: int, position: int) -> int:
    """Bit of a 64-bit mask, with the position taken modulo 64."""
    return mask >> (position & 63) & 1


def numeric_to_algebraic(numeric: int) -> str:
    """Two-character name of a square numbered from 1, such as 12 -> 'd2'."""
    if numeric < 1:
        return "  "
    rank, file = divmod(numeric - 1, 8)
    return chr(ord("a") + file) + chr(ord("1") + rank)


def algebraic_to_numeric(alge: str) -> int:
    """Square number, from 1, of a name such as 'e4'."""
    if len(alge) < 2:
        raise ValueError(f"not a square name: {alge!r}")
    return (ord(alge[0]) - 96) + (ord(alge[1]) - 49) * 8


def get_piece_type(board: Bitboard, square: int) -> PieceType:
    """Kind of piece on a bitboard bit, of either colour."""
    by_type = (
        (PieceType.PAWN, board.wpawn | board.bpawn),
        (PieceType.KNIGHT, board.wknight | board.bknight),
        (PieceType.BISHOP, board.wbishop | board.bbishop),
        (PieceType.ROOK, board.wrook | board.brook),
        (PieceType.QUEEN, board.wqueen | board.bqueen),
        (PieceType.KING, board.wking | board.bking),
    )
    for kind, mask in by_type:
        if _bit(mask, square):
            return kind
    return PieceType.NONE


def get_piece_color(board: Bitboard, square: int) -> Color:
    """Colour of the piece on a bitboard bit."""
    if _bit(board.white(), square):
        return Color.WHITE
    if _bit(board.black(), square):
        return Color.BLACK
    return Color.NONE


def get_pawn_moves(board: Bitboard, square: int) -> list[int]:
    """Target squares of the pawn standing on ``square``.

    Raises ValueError if there is no pawn there.
    """
    flipped = 63 - square
    if get_piece_type(board, flipped) != PieceType.PAWN:
        raise ValueError(f"Square selected does not contain a pawn {square}")
    occupied = board.occupied()
    moves: list[int] = []
    if get_piece_color(board, flipped) != Color.BLACK:
        if not _bit(occupied, flipped - 8):
            moves.append(square + 8)
            if 8 <= square <= 16 and not _bit(occupied, flipped - 16):
                moves.append(square + 16)
        if get_piece_color(board, flipped - 7) == Color.BLACK:
            moves.append(square + 7)
        if get_piece_color(board, flipped - 9) == Color.BLACK:
            moves.append(square + 9)
    else:
        if not _bit(occupied, flipped + 8):
            moves.append(square - 8)
            if 48 <= square <= 56 and not _bit(occupied, flipped + 16):
                moves.append(square - 16)
        if (square + 1) % 8 != 1 and get_piece_color(board, flipped + 7) == Color.WHITE:
            moves.append(square - 7)
        if (square + 1) % 8 != 0 and get_piece_color(board, flipped + 9) == Color.WHITE:
            moves.append(square - 9)
    return moves


def get_rook_moves(board: Bitboard, square: int) -> list[int]:
    """Target squares of the rook standing on ``square``.

    Only white rooks are generated; a black rook yields no moves.
    Raises ValueError if there is no rook there.
    """
    flipped = 64 - square
    if get_piece_type(board, flipped) != PieceType.ROOK:
        raise ValueError(f"Square selected does not contain a rook {square}")
    moves: list[int] = []
    if get_piece_color(board, flipped) == Color.BLACK:
        return moves

    empty = board.empty()
    white = board.white()
    black = board.black()

    # right slide
    slide = 1
    while True:
        target = flipped + slide
        if target % 8 == 0:
            break
        if _bit(empty, target):
            moves.append(square + slide)
            slide += 1
        elif _bit(white, target):
            break
        elif _bit(black, target):
            moves.append(square + slide)
            break

    # left slide
    slide = 1
    blocked = False
    while not blocked:
        if (flipped - slide) % 8 == 0:
            blocked = True
        target = flipped + slide
        if _bit(empty, target):
            moves.append(square + slide)
            slide += 1
        elif _bit(white, target):
            blocked = True
        elif _bit(black, target):
            moves.append(square - slide)
            slide += 1
            blocked = True

    # up slide
    slide = 1
    while True:
        target = flipped + slide * 8
        if target > 63:
            break
        if _bit(empty, target):
            moves.append(square - slide * 8)
            slide += 1
        elif _bit(white, target):
            break
        elif _bit(black, target):
            moves.append(square - slide * 8)
            break

    # down slide
    slide = 1
    blocked = False
    while not blocked:
        if flipped - slide < 0:
            blocked = True
        target = flipped - slide * 8
        if _bit(empty, target):
            moves.append(square + slide * 8)
            slide += 1
        elif _bit(white, target):
            blocked = True
        elif _bit(black, target):
            moves.append(square + slide * 8)
            slide += 1
            blocked = True

    return moves


def get_all_pieces_moves(board: Bitboard, piece: str) -> list[int]:
    """Moves of every piece of one kind: 'p' for white pawns, 'P' for black.

    Pieces whose square does not resolve to a pawn contribute nothing.
    """
    if piece == "p":
        mask = board.wpawn
    elif piece == "P":
        mask = board.bpawn
    else:
        raise ValueError(f"move generation not supported for piece {piece!r}")
    moves: list[int] = []
    for bit in range(64):
        if mask >> bit & 1:
            try:
                moves.extend(get_pawn_moves(board, 64 - bit))
            except ValueError:
                continue
    return moves


def num_nonzero_moves(moves: list[int]) -> int:
    """Index of the last move before the first zero or the end of the list.

    Gives -1 when there are no moves, and 0 when the first MAX_MOVES
    entries are all moves.
    """
    for index, move in enumerate(moves[:MAX_MOVES]):
        if move == 0:
            return index - 1
    if len(moves) < MAX_MOVES:
        return len(moves) - 1
    return 0