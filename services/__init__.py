# DEPENDENCIES
from .data_models import Clause
from .data_models import FlowData
from .data_models import RiskMatch
from .data_models import ChatAnswer
from .data_models import ClauseNode
from .risk_scorer import RiskScorer
from .data_models import FlowSummary
from .data_models import Relationship
from .data_models import CategoryMatch
from .data_models import SummaryResult
from .data_models import DocumentAnalysis
from .clause_extractor import ClauseExtractor
from .flow_visualizer import FlowVisualizer
from .document_analyzer import DocumentAnalyzer
from .summary_generator import SummaryGenerator
from .question_answering import QuestionAnswerer
from .question_answering import SUGGESTED_QUESTIONS
from .pattern_classifier import CategoryClassifier
from .relationship_builder import RelationshipBuilder
from .pattern_classifier import RiskPatternClassifier
from .explanation_generator import ExplanationGenerator



__all__ = ['Clause',
           'FlowData',
           'RiskMatch',
           'ChatAnswer',
           'ClauseNode',
           'RiskScorer',
           'FlowSummary',
           'Relationship',
           'CategoryMatch',
           'SummaryResult',
           'FlowVisualizer',
           'ClauseExtractor',
           'DocumentAnalysis',
           'DocumentAnalyzer',
           'SummaryGenerator',
           'QuestionAnswerer',
           'CategoryClassifier',
           'RelationshipBuilder',
           'SUGGESTED_QUESTIONS',
           'ExplanationGenerator',
           'RiskPatternClassifier',
          ]
