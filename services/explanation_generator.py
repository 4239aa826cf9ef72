# DEPENDENCIES
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.legal_patterns import RuleSet
from config.legal_patterns import RiskLevel
from services.data_models import RiskMatch
from utils.text_processor import TextProcessor


class ExplanationGenerator:
    """
    Maps a classified clause to a plain-language rationale by keyword lookup

    Each family is an ordered tuple of (substring groups, explanation); the
    first entry whose groups all match the lowercased clause text wins
    """
    RISK_EXPLANATIONS     = (((('unlimited',), ('liability',)), "This clause exposes you to unlimited financial liability, which could result in significant financial loss beyond the contract value."),
                             ((('indemnif',),), "This indemnification clause requires you to protect the other party from legal claims, potentially at significant cost."),
                             ((('waive',), ('rights',)), "This clause requires you to give up important legal rights, which could limit your options if disputes arise."),
                             ((('no warranty', 'as is'),), "This disclaimer removes warranties and protections, meaning you accept the product/service without guarantees."),
                             ((('penalty', 'liquidated damages'),), "This clause imposes financial penalties that could be costly if you fail to meet certain obligations."),
                             ((('immediate termination',),), "This allows for immediate contract termination, which could disrupt your business operations without notice."),
                             ((('sole discretion',),), "This gives the other party unilateral decision-making power, potentially limiting your input on important matters."),
                            )

    RISK_LEVEL_FALLBACKS  = {RiskLevel.HIGH   : "This clause contains terms that could expose you to significant risk or liability. Consider negotiating modifications.",
                             RiskLevel.MEDIUM : "This clause has moderate risk implications and should be reviewed carefully to understand your obligations.",
                            }

    DEFAULT_EXPLANATION   = "This clause should be reviewed to understand its implications for your rights and obligations."

    POSITIVE_EXPLANATIONS = (((('warranty', 'guarantee'),), "This clause provides you with warranties or guarantees, offering protection and recourse if issues arise."),
                             ((('right to cure',),), "This gives you the opportunity to fix any breaches before facing penalties, providing valuable protection."),
                             ((('notice period',),), "This ensures you receive adequate notice before any adverse actions, giving you time to respond."),
                             ((('fair market value',),), "This ensures pricing or valuations are based on fair market standards, protecting against unfair terms."),
                            )

    POSITIVE_FALLBACK     = "This clause appears to provide beneficial terms or protections in your favor."

    NEUTRAL_EXPLANATIONS  = (((('reasonable efforts',),), "This sets a reasonable standard for performance obligations without being overly burdensome."),
                             ((('good faith',),), "This requires both parties to act honestly and fairly in their dealings under the contract."),
                             ((('written notice',),), "This establishes clear communication requirements, ensuring important notices are properly documented."),
                            )

    NEUTRAL_FALLBACK      = "This appears to be a standard contractual provision with balanced terms for both parties."

    IMPORTANT_TERMS_TEXT  = "This clause contains important legal terms that should be reviewed carefully."


    @staticmethod
    def _lookup(lowered: str, table) -> str:
        for groups, explanation in table:
            if TextProcessor.matches_groups(lowered, groups):
                return explanation

        return ""


    def explain_risk(self, text: str, risk_level: RiskLevel) -> str:
        """
        Rationale for a high or medium tier clause, falling back on the risk level alone
        """
        explanation = self._lookup(text.lower(), self.RISK_EXPLANATIONS)

        if explanation:
            return explanation

        return self.RISK_LEVEL_FALLBACKS.get(risk_level, self.DEFAULT_EXPLANATION)


    def explain_positive(self, text: str) -> str:
        return self._lookup(text.lower(), self.POSITIVE_EXPLANATIONS) or self.POSITIVE_FALLBACK


    def explain_neutral(self, text: str) -> str:
        return self._lookup(text.lower(), self.NEUTRAL_EXPLANATIONS) or self.NEUTRAL_FALLBACK


    def explain(self, text: str, match: RiskMatch) -> str:
        """
        Rationale for a clause classified by the risk-tier pass

        Arguments:
        ----------
            text       { str }     : Clause text

            match   { RiskMatch }  : Classification of that text

        Returns:
        --------
                { str }            : One to three sentence explanation
        """
        if match.rule_set in (RuleSet.HIGH, RuleSet.MEDIUM):
            return self.explain_risk(text, match.risk_level)

        if (match.rule_set == RuleSet.POSITIVE):
            return self.explain_positive(text)

        if (match.rule_set == RuleSet.LOW):
            return self.explain_neutral(text)

        if (match.rule_set == RuleSet.IMPORTANT_TERMS):
            return self.IMPORTANT_TERMS_TEXT

        return self.explain_risk(text, match.risk_level)
