# gui/penalty_rules.py
from PySide6.QtWidgets import QGroupBox, QGridLayout, QLabel
from PySide6.QtCore import Qt

from short_tracker.logic.penalty import SHORT_SURCHARGE, UNRECORDED_TIERS
from short_tracker.utils.format_utils import format_currency


def rule_lines():
    """(range, penalty) display pairs built from the tier table."""
    lines = []
    lower = 0
    for upper, penalty in UNRECORDED_TIERS:
        label = "Free" if penalty == 0 else format_currency(penalty)
        lines.append((f"{lower}-{int(upper)}", label))
        lower = int(upper) + 1
    lines.append((f"Over {int(UNRECORDED_TIERS[-1][0])}", "Full amount"))
    lines.append(("Short", f"Input + {format_currency(SHORT_SURCHARGE)}"))
    return lines


class PenaltyRulesBox(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Penalty Rules", parent)
        self.setStyleSheet(
            "QGroupBox{background:#eff6ff; border:1px solid #dbeafe; border-radius:8px;"
            " margin-top:12px; font-weight:600; color:#1e40af;}"
            " QLabel{font-size:11px; color:#1e40af; font-weight:400;}"
        )
        grid = QGridLayout(self)
        for r, (rng, penalty) in enumerate(rule_lines()):
            left = QLabel(rng)
            right = QLabel(penalty)
            right.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            grid.addWidget(left, r, 0)
            grid.addWidget(right, r, 1)
