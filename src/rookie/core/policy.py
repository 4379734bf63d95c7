"""Terminal-state policy: which ranks are scanned and what counts as a draw."""

from __future__ import annotations

from dataclasses import dataclass

from rookie.core.enums import DrawRule
from rookie.core.types import BOARD_SIZE

# Checkmate and draw scans visit y in range(SCAN_RANKS). The last rank
# (y = 7, White's back rank) is skipped.
SCAN_RANKS = 7


@dataclass(frozen=True, slots=True)
class TerminalPolicy:
    """Immutable configuration for :class:`~rookie.core.rules.Rules`.

    Args:
        scan_ranks: Number of ranks, counted from ``y = 0``, that the
            checkmate and draw scans visit.
        draw_rule: ``NO_LEGAL_MOVES`` reports a draw when no piece of either
            color can move. ``STALEMATE`` reports a draw when the side to
            move cannot move and is not in check.
    """

    scan_ranks: int = SCAN_RANKS
    draw_rule: DrawRule = DrawRule.NO_LEGAL_MOVES

    def __post_init__(self) -> None:
        if not 1 <= self.scan_ranks <= BOARD_SIZE:
            raise ValueError(
                f"scan_ranks must be between 1 and {BOARD_SIZE}, got {self.scan_ranks}"
            )

    # Presets
    @classmethod
    def literal(cls) -> TerminalPolicy:
        return cls()

    @classmethod
    def standard(cls) -> TerminalPolicy:
        """Full-board scan with the conventional stalemate rule."""
        return cls(scan_ranks=BOARD_SIZE, draw_rule=DrawRule.STALEMATE)
