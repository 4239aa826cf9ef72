# DEPENDENCIES
import sys
import math
from typing import Dict
from typing import Tuple
from pathlib import Path
from typing import Optional
from typing import Iterable

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import settings
from config.legal_patterns import RiskLevel
from config.legal_patterns import ClauseType
from config.legal_patterns import LegalPatterns


class RiskScorer:
    """
    Aggregates per-clause risk into a single 0-100 document score

    Each clause contributes base(risk level) + adjustment(clause type), weighted
    by the risk level's weight, so high-risk clauses dominate the average
    """
    def __init__(self, level_scores: Optional[Dict[RiskLevel, Tuple[int, int]]] = None, type_adjustments: Optional[Dict[ClauseType, int]] = None,
                 default_score: Optional[int] = None):
        """
        Initialize scorer

        Arguments:
        ----------
            level_scores     { dict } : Risk level -> (base score, weight)

            type_adjustments { dict } : Clause type -> score adjustment

            default_score    { int }  : Score returned for an empty clause list
        """
        self.level_scores     = dict(level_scores or LegalPatterns.RISK_LEVEL_SCORES)
        self.type_adjustments = dict(type_adjustments or LegalPatterns.CLAUSE_TYPE_ADJUSTMENTS)
        self.default_score    = settings.DEFAULT_RISK_SCORE if default_score is None else default_score


    def clause_contribution(self, risk_level: RiskLevel, clause_type: Optional[ClauseType]) -> Tuple[int, int]:
        """
        (score, weight) of a single clause
        """
        base, weight = self.level_scores.get(risk_level, (0, 1))
        adjustment   = self.type_adjustments.get(clause_type, 0) if clause_type is not None else 0

        return (base + adjustment, weight)


    def calculate_score(self, clauses: Iterable) -> int:
        """
        Weighted average risk score

        Arguments:
        ----------
            clauses { list } : Objects exposing risk_level and, optionally, clause_type

        Returns:
        --------
                { int }      : Score clamped to [0, 100], rounded half up
        """
        total_score  = 0
        total_weight = 0

        for clause in clauses:
            score, weight = self.clause_contribution(risk_level  = clause.risk_level,
                                                     clause_type = getattr(clause, "clause_type", None),
                                                    )
            total_score  += score * weight
            total_weight += weight

        if (total_weight == 0):
            return self.default_score

        average = total_score / total_weight
        clamped = max(0.0, min(100.0, average))

        return int(math.floor(clamped + 0.5))


    @staticmethod
    def score_to_risk_level(score: float) -> str:
        """
        Convert risk score to risk level string
        """
        if (score >= 80):
            return "Critical"

        elif (score >= 60):
            return "High"

        elif (score >= 40):
            return "Medium"

        else:
            return "Low"
