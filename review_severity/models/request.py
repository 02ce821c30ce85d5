"""评分输入与分类请求数据模型"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .severity import CANDIDATE_RESPONSES


class ReviewInput(BaseModel):
    """待评分的评审意见"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    comment: str = Field(description="The code review comment or feedback to evaluate.")
    code: Optional[str] = Field(None, description="Optional: The code snippet being reviewed.")
    context: Optional[str] = Field(
        None, description="Optional: Additional context about the codebase or review."
    )

    @field_validator("code", "context", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        """可选字段未提供时应省略，不接受显式的 null"""
        if value is None:
            raise ValueError("不能为 null，未提供时请省略该字段")
        return value

    @classmethod
    def from_fields(
        cls, comment: str, code: Optional[str] = None, context: Optional[str] = None
    ) -> "ReviewInput":
        """由命令行等来源构建，值为 None 的可选字段视为未提供"""
        data = {"comment": comment}
        if code is not None:
            data["code"] = code
        if context is not None:
            data["context"] = context
        return cls(**data)


class ChatMessage(BaseModel):
    """编译后任务中的单条消息"""

    model_config = ConfigDict(frozen=True)

    role: Literal["user"] = "user"
    content: str


class CompiledTask(BaseModel):
    """编译后的 vector.completion 任务"""

    model_config = ConfigDict(frozen=True)

    type: Literal["vector.completion"] = "vector.completion"
    messages: tuple[ChatMessage, ...]
    responses: tuple[str, ...] = CANDIDATE_RESPONSES


class ClassificationRequest(BaseModel):
    """发送给分类后端的请求"""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(description="完整的提示词")
    candidate_labels: tuple[str, ...] = Field(
        default=CANDIDATE_RESPONSES, description="候选回复，顺序固定"
    )

    def to_compiled_task(self) -> CompiledTask:
        """转换为 vector.completion 任务"""
        return CompiledTask(
            messages=(ChatMessage(content=self.prompt),),
            responses=self.candidate_labels,
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为 JSON 可序列化的任务字典"""
        return self.to_compiled_task().model_dump(mode="json")
