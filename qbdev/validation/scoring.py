from typing import List

from ..config.config import COMMENT_BONUS, COMMENT_RATIO_THRESHOLD, MAX_SCORE, MIN_SCORE, SCORE_WEIGHTS
from ..core.classes import Finding, SourceLine


def comment_ratio(lines: List[SourceLine]) -> float:
    """Ratio of comment lines to code lines (blank lines count as neither)."""
    comments = sum(1 for line in lines if line.is_comment)
    code = sum(1 for line in lines if not line.is_blank and not line.is_comment)
    if code == 0:
        return 0.0
    return comments / code


def calculate_score(findings: List[Finding], lines: List[SourceLine]) -> int:
    """
    Quality score in [0, 100]: each error costs 10 points, each warning 2,
    info findings are free, and well-commented code earns a small bonus.
    """
    score = MAX_SCORE
    for finding in findings:
        score -= SCORE_WEIGHTS[finding.severity.value]
    if comment_ratio(lines) > COMMENT_RATIO_THRESHOLD:
        score += COMMENT_BONUS
    return max(MIN_SCORE, min(MAX_SCORE, score))
