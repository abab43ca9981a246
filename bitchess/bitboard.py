"""Twelve-bitboard chess position with FEN parsing and text renderings."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import Iterator, Optional

MASK64 = (1 << 64) - 1

# Lower case letters are the white pieces, upper case the black ones; the
# order matches the order of the bitboard fields.
PIECE_NAMES = "pnbrqkPNBRQK"

_INITIAL = {
    "p": 255 << 48,
    "n": 66 << 56,
    "b": 36 << 56,
    "r": 129 << 56,
    "q": 8 << 56,
    "k": 16 << 56,
    "P": 255 << 8,
    "N": 66,
    "B": 36,
    "R": 129,
    "Q": 8,
    "K": 16,
}


@dataclass
class Bitboard:
    """One 64-bit occupancy mask per piece kind and colour."""

    wpawn: int = 0
    wknight: int = 0
    wbishop: int = 0
    wrook: int = 0
    wqueen: int = 0
    wking: int = 0
    bpawn: int = 0
    bknight: int = 0
    bbishop: int = 0
    brook: int = 0
    bqueen: int = 0
    bking: int = 0

    def items(self) -> list[tuple[str, int]]:
        """Pairs of piece letter and its bitboard, in piece order."""
        return list(zip(PIECE_NAMES, astuple(self)))

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self.items())

    def _assign(self, boards: dict[str, int]) -> None:
        for field, piece in zip(fields(self), PIECE_NAMES):
            setattr(self, field.name, boards[piece] & MASK64)

    def reset(self) -> None:
        """Set up the starting position."""
        self._assign(_INITIAL)

    def clear(self) -> None:
        """Remove every piece."""
        self._assign(dict.fromkeys(PIECE_NAMES, 0))

    def bitstr(self, new_lines) -> str:
        """Each piece letter followed by its 64 bits, least significant first."""
        out: list[str] = []
        length = 0
        for num, (piece, bb) in enumerate(self.items()):
            out.append(piece + "\n")
            length += 2
            for i in range(64):
                out.append(str(bb >> i & 1))
                length += 1
                if (new_lines and (length - 2 - 3 * num) % 9 == 0) or i == 63:
                    out.append("\n")
                    length += 1
        return "".join(out)

    def board_str(self) -> str:
        """Eight rows of eight cells, square 0 first, '-' for an empty square."""
        cells = ["-"] * 64
        for piece, bb in self.items():
            for square in range(64):
                if bb >> square & 1:
                    cells[square] = piece
        return "\n".join("".join(cells[row:row + 8]) for row in range(0, 64, 8))

    def _piece_at(self, square: int) -> Optional[str]:
        for piece, bb in self.items():
            if bb >> square & 1:
                return piece
        return None

    def to_fen(self) -> str:
        """Piece placement field, starting from square 0."""
        ranks = []
        for start in range(0, 64, 8):
            parts: list[str] = []
            run = 0
            for square in range(start, start + 8):
                piece = self._piece_at(square)
                if piece is None:
                    run += 1
                    continue
                if run:
                    parts.append(str(run))
                    run = 0
                parts.append(piece)
            if run:
                parts.append(str(run))
            ranks.append("".join(parts))
        return "/".join(ranks)

    def load_fen(self, fen: str) -> None:
        """Replace the position with the placement described by a FEN string."""
        boards = dict.fromkeys(PIECE_NAMES, 0)
        ranks = [token for token in fen.split("/") if token]
        if len(ranks) > 8:
            raise ValueError(f"FEN has more than 8 ranks: {fen!r}")
        for rank, token in enumerate(ranks):
            file = 0
            pos = 0
            while file < 8:
                char = token[pos] if pos < len(token) else ""
                pos += 1
                if "1" <= char <= "9":
                    file += int(char)
                    continue
                if char in boards:
                    boards[char] |= 1 << ((7 - rank) * 8 + file)
                file += 1
        self._assign(boards)

    def occupied(self) -> int:
        """Mask of all occupied squares."""
        mask = 0
        for _, bb in self.items():
            mask |= bb
        return mask

    def empty(self) -> int:
        """Mask of all empty squares."""
        return ~self.occupied() & MASK64

    def white(self) -> int:
        """Mask of the squares holding white pieces."""
        return (self.wpawn | self.wknight | self.wbishop
                | self.wrook | self.wqueen | self.wking)

    def black(self) -> int:
        """Mask of the squares holding black pieces."""
        return (self.bpawn | self.bknight | self.bbishop
                | self.brook | self.bqueen | self.bking)


def initial_bitboard() -> Bitboard:
    """A board in the starting position."""
    board = Bitboard()
    board.reset()
    return board


def bitboard_from_fen(fen: str) -> Bitboard:
    """A board loaded from a FEN string."""
    board = Bitboard()
    board.load_fen(fen)
    return board