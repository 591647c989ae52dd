from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 200

    def score_for_lines(self, lines: int) -> int:
        if lines < 0:
            raise ValueError("line count cannot be negative")
        return lines * self.line_clear_points


class ScoreTracker:
    """Running score for one session. Only ever grows."""

    def __init__(self, rules: ScoringRules | None = None) -> None:
        self.rules = rules or ScoringRules()
        self.score = 0
        self.lines_cleared = 0

    def award(self, rows_cleared: int, cols_cleared: int) -> int:
        if rows_cleared < 0 or cols_cleared < 0:
            raise ValueError("cleared counts cannot be negative")
        lines = rows_cleared + cols_cleared
        gained = self.rules.score_for_lines(lines)
        self.score += gained
        self.lines_cleared += lines
        return gained

    def reset(self) -> None:
        self.score = 0
        self.lines_cleared = 0
