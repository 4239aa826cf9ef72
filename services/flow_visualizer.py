# DEPENDENCIES
import sys
from typing import List
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.settings import settings
from services.data_models import FlowData
from config.legal_patterns import RiskLevel
from utils.logger import LegalLensLogger
from services.data_models import ClauseNode
from services.data_models import FlowSummary
from services.data_models import Relationship
from utils.text_processor import TextProcessor
from services.clause_extractor import ClauseExtractor
from services.pattern_classifier import CategoryClassifier
from services.relationship_builder import RelationshipBuilder


class FlowVisualizer:
    """
    Visualization view of the engine: clause blocks, their categories and the links between them
    """
    def __init__(self, extractor: Optional[ClauseExtractor] = None, classifier: Optional[CategoryClassifier] = None,
                 builder: Optional[RelationshipBuilder] = None, node_text_limit: Optional[int] = None):
        """
        Initialize the flow visualizer

        Arguments:
        ----------
            extractor       { ClauseExtractor }     : Clause block extractor

            classifier      { CategoryClassifier }  : Category / flow classifier

            builder         { RelationshipBuilder } : Pairwise relationship builder

            node_text_limit { int }                 : Display text limit of a node (defaults to settings.NODE_TEXT_LIMIT)
        """
        self.extractor       = extractor or ClauseExtractor()
        self.classifier      = classifier or CategoryClassifier()
        self.builder         = builder or RelationshipBuilder()
        self.node_text_limit = settings.NODE_TEXT_LIMIT if node_text_limit is None else node_text_limit


    @LegalLensLogger.log_execution_time("generate_flow")
    def generate(self, text: Optional[str]) -> FlowData:
        """
        Build the clause graph of a document

        Arguments:
        ----------
            text { str } : Document text; text without clause blocks yields an empty graph

        Returns:
        --------
            { FlowData } : Nodes, relationships and summary statistics
        """
        nodes         = self.build_nodes(text)
        relationships = self.builder.build(nodes)
        summary       = self.calculate_summary(nodes, relationships)

        log_info("Flow data generated",
                 nodes         = summary.total_clauses,
                 relationships = len(relationships),
                 categories    = len(summary.categories),
                )

        return FlowData(nodes         = nodes,
                        relationships = relationships,
                        summary       = summary,
                       )


    def build_nodes(self, text: Optional[str]) -> List[ClauseNode]:
        nodes = list()

        for block in self.extractor.extract_blocks(text):
            match = self.classifier.classify(block.text)

            nodes.append(ClauseNode(id         = ClauseExtractor.clause_id(block.index),
                                    text       = TextProcessor.truncate(block.text, self.node_text_limit),
                                    category   = match.category,
                                    risk_level = match.risk_level,
                                    source     = block,
                                   ))

        return nodes


    @staticmethod
    def calculate_summary(nodes: List[ClauseNode], relationships: List[Relationship]) -> FlowSummary:
        """
        Clause count, risk histogram, distinct category labels in first-seen order and relationship histogram
        """
        risk_distribution  = {level.value: 0 for level in (RiskLevel.HIGH, RiskLevel.MEDIUM, RiskLevel.LOW, RiskLevel.POSITIVE)}
        categories         = list()
        relationship_types = dict()

        for node in nodes:
            risk_distribution[node.risk_level.value] += 1

            if node.category_label not in categories:
                categories.append(node.category_label)

        for relationship in relationships:
            key                     = relationship.relation_type.value
            relationship_types[key] = relationship_types.get(key, 0) + 1

        return FlowSummary(total_clauses      = len(nodes),
                           risk_distribution  = risk_distribution,
                           categories         = categories,
                           relationship_types = relationship_types,
                          )
