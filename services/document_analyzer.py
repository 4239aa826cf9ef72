# DEPENDENCIES
import sys
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.settings import settings
from services.data_models import Clause
from config.legal_patterns import RuleSet
from utils.logger import LegalLensLogger
from config.legal_patterns import RiskLevel
from utils.validators import TextValidator
from config.legal_patterns import ClauseType
from services.risk_scorer import RiskScorer
from utils.text_processor import TextProcessor
from config.legal_patterns import ClauseCategory
from services.data_models import DocumentAnalysis
from services.summary_generator import SummaryGenerator
from services.pattern_classifier import RiskPatternClassifier
from services.explanation_generator import ExplanationGenerator


class DocumentAnalyzer:
    """
    Analysis view of the engine

    Analysis Pipeline:
    1. Sentence segmentation
    2. Risk-tier classification of every sentence
    3. Explanation lookup for every matched sentence
    4. General analysis when nothing matched
    5. Weighted risk scoring
    """
    # (substring groups, clause text, clause type, category, explanation); every matching entry is emitted
    GENERAL_TOPICS = (((('employment', 'employee'),), "Employment agreement detected", ClauseType.NEUTRAL, ClauseCategory.OBLIGATION,
                       "Employment agreements typically contain important terms regarding compensation, benefits, termination, and post-employment obligations. Review carefully for non-compete clauses and termination conditions."),
                      ((('payment',), ('terms',)), "Payment terms identified", ClauseType.NEUTRAL, ClauseCategory.FINANCIAL,
                       "Payment terms define when and how payments must be made. Ensure you understand due dates, late fees, and acceptable payment methods."),
                      ((('termination',),), "Termination provisions found", ClauseType.RISK, ClauseCategory.TERMINATION,
                       "Termination clauses define how and when the contract can be ended. Pay attention to notice requirements, termination fees, and post-termination obligations."),
                     )


    def __init__(self, classifier: Optional[RiskPatternClassifier] = None, explainer: Optional[ExplanationGenerator] = None, scorer: Optional[RiskScorer] = None,
                 min_sentence_length: Optional[int] = None, min_clause_length: Optional[int] = None, min_text_length: Optional[int] = None):
        """
        Initialize the analyzer with its collaborators

        Arguments:
        ----------
            classifier     { RiskPatternClassifier } : Risk-tier classifier

            explainer      { ExplanationGenerator }  : Explanation lookup

            scorer              { RiskScorer }       : Document scorer

            min_sentence_length    { int }           : Sentence threshold (defaults to settings.MIN_SENTENCE_LENGTH)

            min_clause_length      { int }           : Sentences shorter than this are skipped (defaults to settings.MIN_CLAUSE_LENGTH)

            min_text_length        { int }           : Shortest accepted document (defaults to settings.MIN_TEXT_LENGTH)
        """
        self.classifier          = classifier or RiskPatternClassifier()
        self.explainer           = explainer or ExplanationGenerator()
        self.scorer              = scorer or RiskScorer()
        self.min_sentence_length = settings.MIN_SENTENCE_LENGTH if min_sentence_length is None else min_sentence_length
        self.min_clause_length   = settings.MIN_CLAUSE_LENGTH if min_clause_length is None else min_clause_length
        self.min_text_length     = settings.MIN_TEXT_LENGTH if min_text_length is None else min_text_length
        self.logger              = LegalLensLogger.get_logger()


    @LegalLensLogger.log_execution_time("analyze_document")
    def analyze(self, text: str) -> DocumentAnalysis:
        """
        Classify the clauses of a document and score it

        Arguments:
        ----------
            text { str } : Document text, at least min_text_length characters

        Raises:
        -------
            InputTooShortError : Text is below the minimum length

        Returns:
        --------
            { DocumentAnalysis } : Clauses, risk score and label, document type guess
        """
        TextValidator.require_min_length(text, self.min_text_length, operation = "analysis")

        clauses      = self.classify_clauses(text)
        used_general = False

        if not clauses:
            self.logger.info("No clause matched any pattern, running general analysis")
            clauses      = self.general_analysis(text)
            used_general = True

        risk_score = self.scorer.calculate_score(clauses)

        log_info("Document analysis completed",
                 clauses      = len(clauses),
                 risk_score   = risk_score,
                 used_general = used_general,
                )

        return DocumentAnalysis(clauses               = clauses,
                                risk_score            = risk_score,
                                risk_label            = self.scorer.score_to_risk_level(risk_score),
                                document_type         = SummaryGenerator.identify_document_type(text),
                                used_general_analysis = used_general,
                               )


    def classify_clauses(self, text: str) -> List[Clause]:
        """
        Run the risk-tier pass over every sentence; unmatched sentences are not emitted
        """
        clauses = list()

        for sentence in TextProcessor.segment(text, min_length = self.min_sentence_length):
            if (len(sentence.text) < self.min_clause_length):
                continue

            match = self.classifier.classify(sentence.text)

            if match is None:
                continue

            clauses.append(Clause(id              = f"clause_{len(clauses) + 1}",
                                  text            = sentence.text,
                                  category        = match.category,
                                  risk_level      = match.risk_level,
                                  clause_type     = match.clause_type,
                                  explanation     = self.explainer.explain(sentence.text, match),
                                  rule_set        = match.rule_set,
                                  matched_pattern = match.matched_pattern,
                                  start_pos       = sentence.start,
                                  end_pos         = sentence.end,
                                 ))

        return clauses


    def general_analysis(self, text: str) -> List[Clause]:
        """
        Synthetic clauses for documents where no sentence matched, one per detected topic
        """
        lowered = text.lower()
        clauses = list()

        for groups, clause_text, clause_type, category, explanation in self.GENERAL_TOPICS:
            if not TextProcessor.matches_groups(lowered, groups):
                continue

            clauses.append(Clause(id          = f"clause_{len(clauses) + 1}",
                                  text        = clause_text,
                                  category    = category,
                                  risk_level  = RiskLevel.MEDIUM,
                                  clause_type = clause_type,
                                  explanation = explanation,
                                  rule_set    = RuleSet.GENERAL,
                                 ))

        return clauses
