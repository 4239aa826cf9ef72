# DEPENDENCIES
import os
import sys
import pytest
import tempfile
from pathlib import Path

# Log files of the test run go to a scratch directory; must be set before settings is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix = "legallens-logs-"))

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.legal_patterns import RiskLevel
from utils.text_processor import TextUnit
from services.data_models import ClauseNode
from config.legal_patterns import ClauseCategory


SCENARIO_TEXT = ("This Agreement between Acme Corp and Jane Doe includes a clause: Employee waives all rights to overtime pay. "
                 "This section shall be governed by the laws of Delaware.")

PLAIN_TEXT    = ("The weather was pleasant and sunny all afternoon. "
                 "We walked along the river until dinner time.")

FLOW_TEXT     = ("Section one requires the client to pay a fee of two thousand dollars monthly. "
                 "Section two lets the supplier cancel the contract with immediate termination rights. "
                 "Section three grants the tenant the right to quiet enjoyment of the premises.")


@pytest.fixture
def scenario_text() -> str:
    return SCENARIO_TEXT


@pytest.fixture
def plain_text() -> str:
    return PLAIN_TEXT


@pytest.fixture
def flow_text() -> str:
    return FLOW_TEXT


@pytest.fixture
def make_node():
    """
    Factory for clause nodes whose source block is the node text itself
    """
    def factory(index: int, text: str, category: ClauseCategory = ClauseCategory.GENERAL, risk_level: RiskLevel = RiskLevel.LOW) -> ClauseNode:
        source = TextUnit(raw   = text,
                          text  = text,
                          start = 0,
                          end   = len(text),
                          index = index - 1,
                         )

        return ClauseNode(id         = f"clause_{index}",
                          text       = text,
                          category   = category,
                          risk_level = risk_level,
                          source     = source,
                         )

    return factory
