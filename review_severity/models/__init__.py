"""数据模型定义"""

from .config import LLMConfig, ScorerConfig
from .request import ChatMessage, ClassificationRequest, CompiledTask, ReviewInput
from .severity import CANDIDATE_RESPONSES, SEVERITY_LABELS, SeverityLabel, SeverityScore

__all__ = [
    "LLMConfig",
    "ScorerConfig",
    "ChatMessage",
    "ClassificationRequest",
    "CompiledTask",
    "ReviewInput",
    "CANDIDATE_RESPONSES",
    "SEVERITY_LABELS",
    "SeverityLabel",
    "SeverityScore",
]
