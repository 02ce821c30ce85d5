"""配置数据模型"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LLMConfig(BaseModel):
    """LLM 配置"""

    model: str = Field(default="gpt-4o-mini", description="模型名称")
    api_key: str = Field(description="API Key")
    base_url: Optional[str] = Field(None, description="Base URL，支持 ollama 等兼容接口")
    temperature: float = Field(default=0.0, description="温度参数")
    timeout: int = Field(default=30, description="超时时间（秒）")
    top_logprobs: int = Field(default=20, ge=5, le=20, description="返回的候选 token 数")


class ScorerConfig(BaseModel):
    """评分器配置"""

    model_config = ConfigDict(extra="ignore")

    llm: LLMConfig = Field(description="LLM 配置")
    output_file: Optional[str] = Field(None, description="可选的评分日志文件路径")
