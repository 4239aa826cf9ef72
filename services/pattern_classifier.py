# DEPENDENCIES
import sys
from typing import Tuple
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.legal_patterns import RuleSet
from config.legal_patterns import RiskLevel
from config.legal_patterns import ClauseType
from services.data_models import RiskMatch
from services.data_models import CategoryMatch
from config.legal_patterns import LegalPatterns
from config.legal_patterns import ClauseCategory


class RiskPatternClassifier:
    """
    Risk-tier pass of the analysis view

    Tiers are tried in a fixed order (high, medium, positive, low, important legal
    terms); the first pattern that matches decides the outcome and no later tier
    is consulted
    """
    def __init__(self, high_patterns: Tuple = LegalPatterns.HIGH_RISK_PATTERNS, medium_patterns: Tuple = LegalPatterns.MEDIUM_RISK_PATTERNS,
                 positive_patterns: Tuple = LegalPatterns.POSITIVE_PATTERNS, low_patterns: Tuple = LegalPatterns.LOW_RISK_PATTERNS,
                 important_terms: Tuple[str, ...] = LegalPatterns.IMPORTANT_LEGAL_TERMS):
        """
        Initialize the classifier with its ordered rule tables

        Arguments:
        ----------
            high_patterns     { tuple } : (pattern, label, category) entries of the high tier

            medium_patterns   { tuple } : Entries of the medium tier

            positive_patterns { tuple } : Entries of the positive tier

            low_patterns      { tuple } : Entries of the low tier

            important_terms   { tuple } : Lowercase keywords of the last-resort tier
        """
        # (rule set, entries, risk level, clause type)
        self.tiers           = ((RuleSet.HIGH, tuple(high_patterns), RiskLevel.HIGH, ClauseType.RISK),
                                (RuleSet.MEDIUM, tuple(medium_patterns), RiskLevel.MEDIUM, ClauseType.RISK),
                                (RuleSet.POSITIVE, tuple(positive_patterns), RiskLevel.LOW, ClauseType.POSITIVE),
                                (RuleSet.LOW, tuple(low_patterns), RiskLevel.LOW, ClauseType.NEUTRAL),
                               )
        self.important_terms = tuple(important_terms)


    def classify(self, text: str) -> Optional[RiskMatch]:
        """
        Classify one text unit

        Arguments:
        ----------
            text { str } : Trimmed text unit

        Returns:
        --------
            { RiskMatch } : Match of the first firing rule, or None when nothing matches
        """
        for rule_set, entries, risk_level, clause_type in self.tiers:
            for pattern, label, category in entries:
                if pattern.search(text):
                    return RiskMatch(rule_set        = rule_set,
                                     risk_level      = risk_level,
                                     clause_type     = clause_type,
                                     category        = category,
                                     matched_pattern = label,
                                    )

        lowered = text.lower()

        for term in self.important_terms:
            if term in lowered:
                return RiskMatch(rule_set        = RuleSet.IMPORTANT_TERMS,
                                 risk_level      = RiskLevel.MEDIUM,
                                 clause_type     = ClauseType.NEUTRAL,
                                 category        = ClauseCategory.GENERAL,
                                 matched_pattern = term,
                                )

        return None


class CategoryClassifier:
    """
    Category pass of the flow view

    Substring rules assign a category and its default risk level in a fixed
    priority order; a high-risk override phrase then forces the risk level to
    high whatever the category
    """
    def __init__(self, category_rules: Tuple = LegalPatterns.CATEGORY_RULES, high_risk_overrides: Tuple[str, ...] = LegalPatterns.HIGH_RISK_OVERRIDES,
                 default_risk_level: RiskLevel = LegalPatterns.DEFAULT_CATEGORY_RISK):
        self.category_rules      = tuple(category_rules)
        self.high_risk_overrides = tuple(high_risk_overrides)
        self.default_risk_level  = default_risk_level


    def classify(self, text: str) -> CategoryMatch:
        """
        Classify one clause block; always returns a match (general when no rule fires)
        """
        lowered    = text.lower()
        category   = ClauseCategory.GENERAL
        risk_level = self.default_risk_level

        for rule_category, substrings, rule_risk_level in self.category_rules:
            if any(substring in lowered for substring in substrings):
                category   = rule_category
                risk_level = rule_risk_level
                break

        override = next((term for term in self.high_risk_overrides if term in lowered), None)

        return CategoryMatch(category           = category,
                             label              = LegalPatterns.category_label(category),
                             risk_level         = RiskLevel.HIGH if override else risk_level,
                             default_risk_level = risk_level,
                             override_term      = override,
                            )
