# DEPENDENCIES
from .settings import settings
from .legal_patterns import RuleSet
from .legal_patterns import RiskLevel
from .legal_patterns import ClauseType
from .legal_patterns import RelationType
from .legal_patterns import LegalPatterns
from .legal_patterns import ClauseCategory


__all__ = ['settings',
           'RuleSet',
           'RiskLevel',
           'ClauseType',
           'RelationType',
           'LegalPatterns',
           'ClauseCategory',
          ]
