"""Bitboard chess position model with FEN placement support and pawn and rook moves."""

__version__ = "0.1.0"
__all__ = ["bitboard", "moves"]