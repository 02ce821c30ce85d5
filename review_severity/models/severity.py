"""严重级别与评分数据模型"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SeverityLabel(str, Enum):
    """评审意见严重级别（顺序固定，从高到低）"""

    CRITICAL = "Critical - Security vulnerability, crash, data loss, or major bug"
    MAJOR = "Major - Logic error, performance issue, or breaking change"
    MODERATE = "Moderate - Best practice violation, maintainability concern, or code organization"
    MINOR = "Minor - Naming convention, documentation, or minor style issue"
    TRIVIAL = "Trivial - Whitespace, formatting, or negligible issue"

    @property
    def short_name(self) -> str:
        """标签名称，例如 "Critical" """
        return self.value.split(" - ", 1)[0]


# 候选回复，顺序与权重一一对应
SEVERITY_LABELS: tuple[SeverityLabel, ...] = tuple(SeverityLabel)
CANDIDATE_RESPONSES: tuple[str, ...] = tuple(label.value for label in SEVERITY_LABELS)


class SeverityScore(BaseModel):
    """一次评分的结果"""

    model_config = ConfigDict(frozen=True)

    score: float = Field(description="加权得分，0 (trivial) 到 1 (critical)")
    probabilities: tuple[float, ...] = Field(description="各级别的概率，顺序同 SEVERITY_LABELS")
    label: SeverityLabel = Field(description="概率最高的级别")
