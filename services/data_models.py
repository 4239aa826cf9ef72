# DEPENDENCIES
import sys
from typing import Any
from typing import Dict
from typing import List
from pathlib import Path
from typing import Optional
from dataclasses import field
from dataclasses import dataclass

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.legal_patterns import RuleSet
from utils.text_processor import TextUnit
from config.legal_patterns import RiskLevel
from config.legal_patterns import ClauseType
from config.legal_patterns import RelationType
from config.legal_patterns import LegalPatterns
from config.legal_patterns import ClauseCategory


@dataclass(frozen = True)
class RiskMatch:
    """
    Outcome of the risk-tier pass over one text unit
    """
    rule_set        : RuleSet
    risk_level      : RiskLevel
    clause_type     : ClauseType
    category        : ClauseCategory
    matched_pattern : str             # label of the regex or keyword that fired


@dataclass(frozen = True)
class CategoryMatch:
    """
    Outcome of the category / flow pass over one text unit
    """
    category           : ClauseCategory
    label              : str
    risk_level         : RiskLevel
    default_risk_level : RiskLevel
    override_term      : Optional[str] = None   # high-risk phrase that forced risk_level to high


@dataclass(frozen = True)
class Clause:
    """
    Classified clause of the analysis view
    """
    id              : str
    text            : str
    category        : ClauseCategory
    risk_level      : RiskLevel
    clause_type     : ClauseType
    explanation     : str
    rule_set        : RuleSet
    matched_pattern : Optional[str] = None
    start_pos       : Optional[int] = None
    end_pos         : Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary for serialization
        """
        return {"id"              : self.id,
                "text"            : self.text,
                "category"        : self.category.value,
                "risk_level"      : self.risk_level.value,
                "type"            : self.clause_type.value,
                "explanation"     : self.explanation,
                "rule_set"        : self.rule_set.value,
                "matched_pattern" : self.matched_pattern,
                "start_pos"       : self.start_pos,
                "end_pos"         : self.end_pos,
               }


@dataclass(frozen = True)
class DocumentAnalysis:
    """
    Aggregate analysis of one document
    """
    clauses               : List[Clause]
    risk_score            : int
    risk_label            : str
    document_type         : Optional[str] = None
    used_general_analysis : bool          = False

    def to_dict(self) -> Dict[str, Any]:
        risk_counts = {level.value: 0 for level in (RiskLevel.HIGH, RiskLevel.MEDIUM, RiskLevel.LOW)}

        for clause in self.clauses:
            risk_counts[clause.risk_level.value] = risk_counts.get(clause.risk_level.value, 0) + 1

        return {"clauses"               : [clause.to_dict() for clause in self.clauses],
                "risk_score"            : self.risk_score,
                "risk_label"            : self.risk_label,
                "document_type"         : self.document_type,
                "used_general_analysis" : self.used_general_analysis,
                "risk_counts"           : risk_counts,
               }


@dataclass(frozen = True)
class SummaryResult:
    """
    Extractive summary with derived statistics
    """
    summary           : str
    key_points        : List[str]
    word_count        : int
    compression_ratio : float
    method            : str           = "extractive"
    document_type     : Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"summary"           : self.summary,
                "key_points"        : self.key_points,
                "word_count"        : self.word_count,
                "compression_ratio" : round(self.compression_ratio, 4),
                "method"            : self.method,
                "document_type"     : self.document_type,
               }


@dataclass(frozen = True)
class ChatAnswer:
    """
    Answer to one free-text question against one document
    """
    question          : str
    topic             : Optional[str]
    answer            : str
    matched_sentences : List[str] = field(default_factory = list)

    def to_dict(self) -> Dict[str, Any]:
        return {"question"          : self.question,
                "topic"             : self.topic,
                "answer"            : self.answer,
                "matched_sentences" : self.matched_sentences,
               }


@dataclass
class ClauseNode:
    """
    Clause block of the flow view; connections are filled in by the relationship builder
    """
    id          : str
    text        : str                 # display text, truncated
    category    : ClauseCategory
    risk_level  : RiskLevel
    source      : TextUnit
    connections : List[str] = field(default_factory = list)

    @property
    def index(self) -> int:
        """
        1-based position encoded in the node id
        """
        return int(self.id.rsplit('_', 1)[1])


    @property
    def category_label(self) -> str:
        return LegalPatterns.category_label(self.category)


    def to_dict(self) -> Dict[str, Any]:
        return {"id"          : self.id,
                "text"        : self.text,
                "type"        : self.category.value,
                "category"    : self.category_label,
                "risk_level"  : self.risk_level.value,
                "start_pos"   : self.source.start,
                "end_pos"     : self.source.end,
                "connections" : list(self.connections),
               }


@dataclass(frozen = True)
class Relationship:
    """
    Directed link between two clause nodes
    """
    from_id       : str
    to_id         : str
    relation_type : RelationType
    description   : str

    def to_dict(self) -> Dict[str, Any]:
        return {"from"        : self.from_id,
                "to"          : self.to_id,
                "type"        : self.relation_type.value,
                "description" : self.description,
               }


@dataclass(frozen = True)
class FlowSummary:
    total_clauses      : int
    risk_distribution  : Dict[str, int]
    categories         : List[str]
    relationship_types : Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {"total_clauses"      : self.total_clauses,
                "risk_distribution"  : dict(self.risk_distribution),
                "categories"         : list(self.categories),
                "relationship_types" : dict(self.relationship_types),
               }


@dataclass(frozen = True)
class FlowData:
    """
    Graph handed to the visualization layer
    """
    nodes         : List[ClauseNode]
    relationships : List[Relationship]
    summary       : FlowSummary

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes"         : [node.to_dict() for node in self.nodes],
                "relationships" : [relationship.to_dict() for relationship in self.relationships],
                "summary"       : self.summary.to_dict(),
               }
