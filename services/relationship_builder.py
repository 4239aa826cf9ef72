# DEPENDENCIES
import sys
from typing import List
from typing import Tuple
from pathlib import Path
from typing import Optional

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from utils.logger import log_info
from config.legal_patterns import RiskLevel
from services.data_models import ClauseNode
from config.legal_patterns import RelationType
from services.data_models import Relationship
from utils.text_processor import TextProcessor
from config.legal_patterns import ClauseCategory


class RelationshipBuilder:
    """
    Derives typed links between the clause nodes of the flow view

    Every pair (i, j) with i < j is tested against the rules below in order and
    receives at most one relationship; the source node's connections are updated
    for every emitted link (from -> to only)
    """
    CONDITION_TERMS    = ('if', 'provided that', 'subject to')
    CONSEQUENCE_TERMS  = ('then', 'shall', 'must')
    REFERENCE_TERMS    = ('section', 'paragraph', 'clause')

    # (from category, to category) pairs where the second clause depends on the first
    DEPENDENCY_PAIRS   = ((ClauseCategory.OBLIGATION, ClauseCategory.FINANCIAL),
                          (ClauseCategory.TERMINATION, ClauseCategory.LIABILITY),
                         )

    DESCRIPTIONS       = {RelationType.SEQUENTIAL  : "Sequential clauses in the document",
                          RelationType.CONDITIONAL : "Conditional dependency between clauses",
                          RelationType.REFERENCE   : "One clause references another",
                          RelationType.CONFLICT    : "Potentially conflicting terms",
                          RelationType.DEPENDENCY  : "One clause depends on another",
                         }


    def build(self, nodes: List[ClauseNode]) -> List[Relationship]:
        """
        Build relationships for an ordered list of clause nodes

        Arguments:
        ----------
            nodes { list } : ClauseNode objects in document order; their connections are appended to in place

        Returns:
        --------
              { list }     : Relationships in discovery order (ascending i, then ascending j)
        """
        relationships = list()

        for i, first in enumerate(nodes):
            for second in nodes[i + 1:]:
                found = self.find_relationship(first, second)

                if found is None:
                    continue

                relation_type, description = found

                relationships.append(Relationship(from_id       = first.id,
                                                  to_id         = second.id,
                                                  relation_type = relation_type,
                                                  description   = description,
                                                 ))
                first.connections.append(second.id)

        log_info("Clause relationships built",
                 nodes         = len(nodes),
                 relationships = len(relationships),
                )

        return relationships


    def find_relationship(self, first: ClauseNode, second: ClauseNode) -> Optional[Tuple[RelationType, str]]:
        """
        First matching rule for an ordered pair of nodes, or None

        Text rules look at the full source text of each clause block, not the truncated display text
        """
        first_text  = first.source.text.lower()
        second_text = second.source.text.lower()

        if (abs(first.index - second.index) == 1):
            return (RelationType.SEQUENTIAL, self.DESCRIPTIONS[RelationType.SEQUENTIAL])

        if TextProcessor.contains_any(first_text, self.CONDITION_TERMS) and TextProcessor.contains_any(second_text, self.CONSEQUENCE_TERMS):
            return (RelationType.CONDITIONAL, self.DESCRIPTIONS[RelationType.CONDITIONAL])

        if TextProcessor.contains_any(first_text, self.REFERENCE_TERMS):
            return (RelationType.REFERENCE, self.DESCRIPTIONS[RelationType.REFERENCE])

        if ({first.risk_level, second.risk_level} == {RiskLevel.HIGH, RiskLevel.POSITIVE}):
            return (RelationType.CONFLICT, self.DESCRIPTIONS[RelationType.CONFLICT])

        if (first.category == second.category) and (first.category != ClauseCategory.GENERAL):
            return (RelationType.CATEGORY, f"Both relate to {first.category_label}")

        if ((first.category, second.category) in self.DEPENDENCY_PAIRS):
            return (RelationType.DEPENDENCY, self.DESCRIPTIONS[RelationType.DEPENDENCY])

        return None
