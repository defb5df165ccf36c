"""Appeal letters and appeal deadlines."""

from __future__ import annotations

from clarityclaim.appeals.deadlines import calculate_deadline, new_appeal_number
from clarityclaim.appeals.generator import AppealLetterGenerator, render_template_letter


__all__ = [
    "AppealLetterGenerator",
    "calculate_deadline",
    "new_appeal_number",
    "render_template_letter",
]
