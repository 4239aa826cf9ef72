# DEPENDENCIES
import re
from enum import Enum
from typing import Tuple


class RiskLevel(Enum):
    HIGH     = "high"
    MEDIUM   = "medium"
    LOW      = "low"
    POSITIVE = "positive"


class ClauseType(Enum):
    RISK     = "risk"
    NEUTRAL  = "neutral"
    POSITIVE = "positive"


class RuleSet(Enum):
    HIGH            = "high"
    MEDIUM          = "medium"
    POSITIVE        = "positive"
    LOW             = "low"
    IMPORTANT_TERMS = "important_terms"
    GENERAL         = "general"


class ClauseCategory(Enum):
    FINANCIAL             = "financial"
    TERMINATION           = "termination"
    LIABILITY             = "liability"
    INTELLECTUAL_PROPERTY = "intellectual_property"
    CONFIDENTIALITY       = "confidentiality"
    OBLIGATION            = "obligation"
    WARRANTY              = "warranty"
    DISPUTE_RESOLUTION    = "dispute_resolution"
    GOVERNING_LAW         = "governing_law"
    BENEFIT               = "benefit"
    GENERAL               = "general"


class RelationType(Enum):
    SEQUENTIAL  = "sequential"
    CONDITIONAL = "conditional"
    REFERENCE   = "reference"
    CONFLICT    = "conflict"
    CATEGORY    = "category"
    DEPENDENCY  = "dependency"


def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


class LegalPatterns:
    """
    Immutable rule tables for the rule-based engine

    Every table is an ordered tuple: evaluation is a linear scan and the first
    entry that matches wins, so the position of an entry is its priority
    """
    # (compiled pattern, label, category) per risk tier
    HIGH_RISK_PATTERNS      = ((_compile(r'liability.*unlimited|unlimited.*liability'), "unlimited_liability", ClauseCategory.LIABILITY),
                               (_compile(r'indemnif.*all.*claims'), "indemnify_all_claims", ClauseCategory.LIABILITY),
                               (_compile(r'waive.*all.*rights'), "waive_all_rights", ClauseCategory.LIABILITY),
                               (_compile(r'exclusive.*remedy'), "exclusive_remedy", ClauseCategory.DISPUTE_RESOLUTION),
                               (_compile(r'no.*warranty'), "no_warranty", ClauseCategory.WARRANTY),
                               (_compile(r'as.*is.*basis'), "as_is_basis", ClauseCategory.WARRANTY),
                               (_compile(r'liquidated.*damages'), "liquidated_damages", ClauseCategory.FINANCIAL),
                               (_compile(r'penalty'), "penalty", ClauseCategory.FINANCIAL),
                               (_compile(r'forfeit'), "forfeit", ClauseCategory.FINANCIAL),
                               (_compile(r'immediate.*termination'), "immediate_termination", ClauseCategory.TERMINATION),
                               (_compile(r'sole.*discretion'), "sole_discretion", ClauseCategory.OBLIGATION),
                               (_compile(r'irrevocable'), "irrevocable", ClauseCategory.OBLIGATION),
                               (_compile(r'personal.*guarantee'), "personal_guarantee", ClauseCategory.LIABILITY),
                              )

    MEDIUM_RISK_PATTERNS    = ((_compile(r'limitation.*liability'), "limitation_of_liability", ClauseCategory.LIABILITY),
                               (_compile(r'consequential.*damages'), "consequential_damages", ClauseCategory.LIABILITY),
                               (_compile(r'material.*breach'), "material_breach", ClauseCategory.TERMINATION),
                               (_compile(r'cure.*period'), "cure_period", ClauseCategory.TERMINATION),
                               (_compile(r'arbitration.*binding|binding.*arbitration'), "binding_arbitration", ClauseCategory.DISPUTE_RESOLUTION),
                               (_compile(r'governing.*law'), "governing_law", ClauseCategory.GOVERNING_LAW),
                               (_compile(r'assignment.*consent'), "assignment_consent", ClauseCategory.OBLIGATION),
                               (_compile(r'modification.*writing'), "modification_in_writing", ClauseCategory.GENERAL),
                               (_compile(r'confidentiality'), "confidentiality", ClauseCategory.CONFIDENTIALITY),
                               (_compile(r'non.*compete'), "non_compete", ClauseCategory.OBLIGATION),
                               (_compile(r'intellectual.*property'), "intellectual_property", ClauseCategory.INTELLECTUAL_PROPERTY),
                              )

    POSITIVE_PATTERNS       = ((_compile(r'warranty.*provided'), "warranty_provided", ClauseCategory.WARRANTY),
                               (_compile(r'guarantee.*quality'), "guarantee_quality", ClauseCategory.WARRANTY),
                               (_compile(r'right.*to.*cure'), "right_to_cure", ClauseCategory.TERMINATION),
                               (_compile(r'notice.*period'), "notice_period", ClauseCategory.TERMINATION),
                               (_compile(r'mutual.*termination'), "mutual_termination", ClauseCategory.TERMINATION),
                               (_compile(r'fair.*market.*value'), "fair_market_value", ClauseCategory.FINANCIAL),
                               (_compile(r'reasonable.*compensation'), "reasonable_compensation", ClauseCategory.FINANCIAL),
                               (_compile(r'protection.*of.*rights'), "protection_of_rights", ClauseCategory.BENEFIT),
                              )

    LOW_RISK_PATTERNS       = ((_compile(r'reasonable.*efforts'), "reasonable_efforts", ClauseCategory.OBLIGATION),
                               (_compile(r'good.*faith'), "good_faith", ClauseCategory.OBLIGATION),
                               (_compile(r'mutual.*agreement'), "mutual_agreement", ClauseCategory.GENERAL),
                               (_compile(r'written.*notice'), "written_notice", ClauseCategory.GENERAL),
                               (_compile(r'business.*days'), "business_days", ClauseCategory.GENERAL),
                               (_compile(r'standard.*terms'), "standard_terms", ClauseCategory.GENERAL),
                              )

    IMPORTANT_LEGAL_TERMS   = ('force majeure',
                               'assignment',
                               'severability',
                               'entire agreement',
                               'governing law',
                               'jurisdiction',
                               'dispute resolution',
                               'arbitration',
                               'intellectual property',
                               'trade secrets',
                               'confidential information',
                               'payment terms',
                               'delivery terms',
                               'performance standards',
                              )

    # Category / flow view: (category, substrings, default risk) in priority order
    CATEGORY_RULES          = ((ClauseCategory.FINANCIAL, ('payment', 'fee', 'cost', 'compensation'), RiskLevel.MEDIUM),
                               (ClauseCategory.TERMINATION, ('terminat', 'end', 'cancel', 'expire'), RiskLevel.MEDIUM),
                               (ClauseCategory.LIABILITY, ('liability', 'damages', 'indemnif', 'waive', 'disclaim', 'limit'), RiskLevel.HIGH),
                               (ClauseCategory.INTELLECTUAL_PROPERTY, ('intellectual property', 'copyright', 'trademark', 'patent', 'proprietary'), RiskLevel.MEDIUM),
                               (ClauseCategory.CONFIDENTIALITY, ('confidential', 'non-disclosure', 'proprietary information', 'trade secret'), RiskLevel.MEDIUM),
                               (ClauseCategory.OBLIGATION, ('shall', 'must', 'required', 'obligation'), RiskLevel.MEDIUM),
                               (ClauseCategory.WARRANTY, ('warrant', 'represent', 'guarantee', 'assure'), RiskLevel.LOW),
                               (ClauseCategory.DISPUTE_RESOLUTION, ('dispute', 'arbitration', 'mediation', 'litigation'), RiskLevel.MEDIUM),
                               (ClauseCategory.GOVERNING_LAW, ('governing law', 'jurisdiction', 'venue', 'court'), RiskLevel.LOW),
                               (ClauseCategory.BENEFIT, ('benefit', 'advantage', 'protection', 'right'), RiskLevel.POSITIVE),
                              )

    DEFAULT_CATEGORY_RISK   = RiskLevel.LOW

    HIGH_RISK_OVERRIDES     = ('unlimited liability',
                               'personal guarantee',
                               'waive all rights',
                               'no recourse',
                               'as is',
                               'without warranty',
                               'sole discretion',
                               'immediate termination',
                               'liquidated damages',
                               'penalty',
                              )

    CATEGORY_LABELS         = {ClauseCategory.FINANCIAL             : "Financial Terms",
                               ClauseCategory.TERMINATION           : "Termination",
                               ClauseCategory.LIABILITY             : "Liability & Risk",
                               ClauseCategory.INTELLECTUAL_PROPERTY : "Intellectual Property",
                               ClauseCategory.CONFIDENTIALITY       : "Confidentiality",
                               ClauseCategory.OBLIGATION            : "Obligations",
                               ClauseCategory.WARRANTY              : "Warranties",
                               ClauseCategory.DISPUTE_RESOLUTION    : "Dispute Resolution",
                               ClauseCategory.GOVERNING_LAW         : "Legal Framework",
                               ClauseCategory.BENEFIT               : "Benefits & Rights",
                               ClauseCategory.GENERAL               : "General",
                              }

    CLAUSE_START_MARKERS    = ('section',
                               'article',
                               'clause',
                               'paragraph',
                               'whereas',
                               'therefore',
                               'furthermore',
                               'in addition',
                               'notwithstanding',
                               'subject to',
                               'provided that',
                               'it is agreed',
                               'the parties agree',
                               'each party',
                               'either party',
                               'upon termination',
                               'in the event',
                               'if any',
                               'this agreement',
                              )

    SUMMARY_KEYWORDS        = ('agreement',
                               'contract',
                               'party',
                               'parties',
                               'terms',
                               'conditions',
                               'payment',
                               'liability',
                               'warranty',
                               'termination',
                               'breach',
                               'confidentiality',
                               'intellectual property',
                               'indemnification',
                               'governing law',
                               'jurisdiction',
                               'dispute',
                               'arbitration',
                               'force majeure',
                               'assignment',
                               'modification',
                               'severability',
                              )

    # (all-of groups, any-of within each group) -> label, first match wins
    DOCUMENT_TYPES          = (((('employment', 'employee'),), "an employment agreement"),
                               ((('service',), ('agreement',)), "a service agreement"),
                               ((('lease', 'rental'),), "a lease agreement"),
                               ((('purchase', 'sale'),), "a purchase agreement"),
                               ((('license', 'licensing'),), "a licensing agreement"),
                               ((('confidentiality', 'non-disclosure'),), "a confidentiality agreement"),
                               ((('partnership', 'joint venture'),), "a partnership agreement"),
                              )

    DEFAULT_DOCUMENT_TYPE   = "a legal document"

    # Risk scorer tables: risk level -> (base score, weight); clause type -> adjustment
    RISK_LEVEL_SCORES       = {RiskLevel.HIGH     : (80, 3),
                               RiskLevel.MEDIUM   : (50, 2),
                               RiskLevel.LOW      : (20, 1),
                               RiskLevel.POSITIVE : (0, 1),
                              }

    CLAUSE_TYPE_ADJUSTMENTS = {ClauseType.RISK     : 10,
                               ClauseType.POSITIVE : -15,
                               ClauseType.NEUTRAL  : 0,
                              }


    @staticmethod
    def category_label(category: ClauseCategory) -> str:
        """
        Display label of a clause category
        """
        return LegalPatterns.CATEGORY_LABELS.get(category, LegalPatterns.CATEGORY_LABELS[ClauseCategory.GENERAL])
