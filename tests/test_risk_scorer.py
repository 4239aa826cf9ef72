# DEPENDENCIES
import pytest
import itertools
from types import SimpleNamespace
from config.legal_patterns import RiskLevel
from config.legal_patterns import ClauseType
from services.risk_scorer import RiskScorer


@pytest.fixture
def scorer() -> RiskScorer:
    return RiskScorer()


def clause(risk_level: RiskLevel, clause_type: ClauseType = ClauseType.NEUTRAL) -> SimpleNamespace:
    return SimpleNamespace(risk_level = risk_level, clause_type = clause_type)


def test_empty_list_scores_default(scorer):
    assert scorer.calculate_score([]) == 30


@pytest.mark.parametrize("risk_level, clause_type, expected", [(RiskLevel.HIGH, ClauseType.RISK, 90),
                                                               (RiskLevel.MEDIUM, ClauseType.RISK, 60),
                                                               (RiskLevel.MEDIUM, ClauseType.NEUTRAL, 50),
                                                               (RiskLevel.LOW, ClauseType.NEUTRAL, 20),
                                                               (RiskLevel.LOW, ClauseType.POSITIVE, 5),
                                                               (RiskLevel.POSITIVE, ClauseType.POSITIVE, 0),
                                                              ])
def test_single_clause(scorer, risk_level, clause_type, expected):
    assert scorer.calculate_score([clause(risk_level, clause_type)]) == expected


def test_weighted_average_rounds_half_up(scorer):
    # (90 * 3 + 20 * 1) / 4 = 72.5
    assert scorer.calculate_score([clause(RiskLevel.HIGH, ClauseType.RISK), clause(RiskLevel.LOW)]) == 73


def test_weighted_average(scorer):
    # (50 * 2 + 5 * 1) / 3 = 35
    assert scorer.calculate_score([clause(RiskLevel.MEDIUM), clause(RiskLevel.LOW, ClauseType.POSITIVE)]) == 35


def test_missing_clause_type_has_no_adjustment(scorer):
    assert scorer.calculate_score([SimpleNamespace(risk_level = RiskLevel.HIGH)]) == 80


def test_score_is_monotonic_in_risk_level(scorer):
    levels = (RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH)
    types  = (ClauseType.RISK, ClauseType.NEUTRAL, ClauseType.POSITIVE)

    for others in itertools.product(levels, repeat = 2):
        for clause_type in types:
            fixed  = [clause(level) for level in others]
            before = scorer.calculate_score(fixed + [clause(RiskLevel.LOW, clause_type)])
            after  = scorer.calculate_score(fixed + [clause(RiskLevel.HIGH, clause_type)])

            assert after >= before


def test_scores_stay_in_range(scorer):
    many_high = [clause(RiskLevel.HIGH, ClauseType.RISK)] * 50
    many_pos  = [clause(RiskLevel.POSITIVE, ClauseType.POSITIVE)] * 50

    assert scorer.calculate_score(many_high) == 90
    assert scorer.calculate_score(many_pos) == 0


@pytest.mark.parametrize("score, label", [(100, "Critical"), (80, "Critical"), (79, "High"), (60, "High"), (40, "Medium"), (39, "Low"), (0, "Low")])
def test_score_to_risk_level(score, label):
    assert RiskScorer.score_to_risk_level(score) == label
