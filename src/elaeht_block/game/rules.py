from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 150
    combo_multiplier: int = 2
    placement_score: int = 10

    def score_for_lines(self, row_count: int, col_count: int) -> int:
        total = row_count + col_count
        if total <= 0:
            return 0
        points = total * self.line_clear_points
        # Clearing more than one line in a single move doubles the line score.
        if total > 1:
            points *= self.combo_multiplier
        return points
