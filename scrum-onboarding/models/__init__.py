from .agent import Agent, TeamMember, CONTRIBUTION_LEVELS
from .knowledge import KnowledgeItem, KNOWLEDGE_TYPE_META
from .integration import INTEGRATION_ORDER, INTEGRATION_META, LOGIN_PROVIDERS
from .flow import Step, STEP_META, FlowSnapshot, OperationResult

__all__ = [
    "Agent",
    "TeamMember",
    "CONTRIBUTION_LEVELS",
    "KnowledgeItem",
    "KNOWLEDGE_TYPE_META",
    "INTEGRATION_ORDER",
    "INTEGRATION_META",
    "LOGIN_PROVIDERS",
    "Step",
    "STEP_META",
    "FlowSnapshot",
    "OperationResult",
]
