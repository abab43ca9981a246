# bitchess

A small chess position model built on bitboards. A position is held as
twelve 64-bit masks, one for each piece kind and colour. Lower-case letters
(`p n b r q k`) are white pieces and upper-case letters (`P N B R Q K`) are
black pieces.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## The board: `bitchess.bitboard`

`Bitboard` is a dataclass with one integer field per piece mask:
`wpawn`, `wknight`, `wbishop`, `wrook`, `wqueen`, `wking`, `bpawn`,
`bknight`, `bbishop`, `brook`, `bqueen`, `bking`. A new `Bitboard()` is
empty.

- `reset()` sets up the starting position; `clear()` removes every piece.
- `load_fen(fen)` replaces the position with the piece placement of a FEN
  string. The first rank in the string goes to bits 56–63, the last to bits
  0–7. Only the placement is read; side to move, castling and counters are
  ignored. More than eight ranks raises `ValueError`.
- `to_fen()` writes a placement string, listing rows from square 0 upward
  (so rows come out in the reverse order of what `load_fen` reads).
- `board_str()` returns eight lines of eight characters, square 0 first,
  with `-` for an empty square.
- `bitstr(new_lines)` dumps each of the twelve masks: the piece letter on
  its own line followed by its 64 bits, least significant first.
- `occupied()`, `empty()`, `white()` and `black()` return combined masks.
- `items()` (and iteration over the board) gives `(letter, mask)` pairs in
  the order `pnbrqkPNBRQK`.

`initial_bitboard()` returns a board in the starting position and
`bitboard_from_fen(fen)` a board loaded from a FEN string. The module also
exposes `PIECE_NAMES` and `MASK64`.

## Moves: `bitchess.moves`

Squares passed to the move generators are numbered 1 to 64.

- `get_pawn_moves(board, square)` returns the target squares of the pawn on
  `square`: single and double pushes and diagonal captures.
- `get_rook_moves(board, square)` returns the target squares of a white rook
  on `square`; a black rook yields an empty list.
- Both raise `ValueError` when the square does not hold that kind of piece.
- `get_all_pieces_moves(board, piece)` collects pawn moves for every white
  pawn (`"p"`) or every black pawn (`"P"`); any other letter raises
  `ValueError`.
- `get_piece_type(board, bit)` and `get_piece_color(board, bit)` look up a
  bitboard bit and return a `PieceType` or `Color` enum member (`NONE` for
  an empty square).
- `numeric_to_algebraic(n)` turns a square number into its name
  (`12` → `"d2"`, anything below 1 → two spaces); `algebraic_to_numeric(name)`
  goes the other way and raises `ValueError` for names shorter than two
  characters.
- `num_nonzero_moves(moves)` gives the index of the last move before the
  first zero entry (`-1` for none), looking at most at `MAX_MOVES` entries.

```python
from bitchess.bitboard import initial_bitboard, bitboard_from_fen
from bitchess.moves import get_pawn_moves, get_rook_moves, numeric_to_algebraic

board = initial_bitboard()
print(board.board_str())
print(board.to_fen())

board = bitboard_from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq 0 0")
print(get_pawn_moves(board, 12))

rook_board = bitboard_from_fen("7r/8/8/8/8/8/8/8 w KQkq 0 0")
print(get_rook_moves(rook_board, 1))

print(numeric_to_algebraic(12))   # "d2"
```

## What it does not do

Moves are generated only for pawns and for white rooks. There is no move
generation for knights, bishops, queens or kings, no check, castling, en
passant or promotion handling, no way to play a game, and no command-line
program.