# DEPENDENCIES
import pytest
from config.legal_patterns import RiskLevel
from config.legal_patterns import RelationType
from config.legal_patterns import ClauseCategory
from services.flow_visualizer import FlowVisualizer


@pytest.fixture
def visualizer() -> FlowVisualizer:
    return FlowVisualizer()


def test_empty_text_gives_empty_graph(visualizer):
    flow = visualizer.generate("")

    assert flow.nodes == []
    assert flow.relationships == []
    assert flow.summary.to_dict() == {"total_clauses"      : 0,
                                      "risk_distribution"  : {"high": 0, "medium": 0, "low": 0, "positive": 0},
                                      "categories"         : [],
                                      "relationship_types" : {},
                                     }


def test_nodes_are_classified_by_category(visualizer, flow_text):
    flow = visualizer.generate(flow_text)

    assert [node.id for node in flow.nodes] == ["clause_1", "clause_2", "clause_3"]
    assert [node.category for node in flow.nodes] == [ClauseCategory.FINANCIAL, ClauseCategory.TERMINATION, ClauseCategory.BENEFIT]
    # "immediate termination" forces high risk
    assert [node.risk_level for node in flow.nodes] == [RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.POSITIVE]


def test_relationships_and_summary(visualizer, flow_text):
    flow = visualizer.generate(flow_text)

    assert [(rel.from_id, rel.to_id, rel.relation_type) for rel in flow.relationships] == [("clause_1", "clause_2", RelationType.SEQUENTIAL),
                                                                                           ("clause_1", "clause_3", RelationType.REFERENCE),
                                                                                           ("clause_2", "clause_3", RelationType.SEQUENTIAL),
                                                                                          ]
    assert flow.nodes[0].connections == ["clause_2", "clause_3"]
    assert flow.summary.total_clauses == 3
    assert flow.summary.risk_distribution == {"high": 1, "medium": 1, "low": 0, "positive": 1}
    assert flow.summary.categories == ["Financial Terms", "Termination", "Benefits & Rights"]
    assert flow.summary.relationship_types == {"sequential": 2, "reference": 1}


def test_node_text_is_truncated(flow_text):
    flow = FlowVisualizer(node_text_limit = 20).generate(flow_text)

    assert all(len(node.text) == 23 and node.text.endswith("...") for node in flow.nodes)
    # relationship rules still see the full block text
    assert flow.relationships[1].relation_type == RelationType.REFERENCE


def test_scenario_block_is_high_risk(visualizer, scenario_text):
    flow = visualizer.generate(scenario_text)

    assert len(flow.nodes) == 1
    assert flow.nodes[0].risk_level == RiskLevel.HIGH
    assert flow.nodes[0].category == ClauseCategory.LIABILITY


def test_to_dict(visualizer, flow_text):
    payload = visualizer.generate(flow_text).to_dict()
    node    = payload["nodes"][1]

    assert set(payload) == {"nodes", "relationships", "summary"}
    assert node["type"] == "termination"
    assert node["category"] == "Termination"
    assert node["risk_level"] == "high"
    assert node["connections"] == ["clause_3"]
