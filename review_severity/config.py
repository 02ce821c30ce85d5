"""配置加载模块"""

import os
from pathlib import Path

import toml

from .models.config import LLMConfig, ScorerConfig


DEFAULT_CONFIG_PATH = ".review-severity.toml"
DEFAULT_CONFIG_CONTENT = """# Review Severity Scorer 配置文件

[llm]
model = "gpt-4o-mini"
api_key = ""
base_url = ""  # 例如: "http://localhost:11434/v1" for ollama
temperature = 0.0
top_logprobs = 20

[scorer]
output_file = ".review-severity-log.json"
"""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """从 start_dir 向上查找配置文件"""
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir
    while True:
        config_path = current / DEFAULT_CONFIG_PATH
        if config_path.exists():
            return config_path
        if current == current.parent:
            return None
        current = current.parent


def load_config(config_path: Path | None = None) -> ScorerConfig:
    """加载配置

    Args:
        config_path: 配置文件路径，如果为 None 则自动查找

    Returns:
        ScorerConfig: 配置对象

    Raises:
        FileNotFoundError: 配置文件不存在
        ValidationError: 配置格式错误
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path is None or not config_path.exists():
        raise FileNotFoundError(
            f"配置文件不存在: {DEFAULT_CONFIG_PATH}\n"
            f"请创建配置文件或运行: review-severity init"
        )

    data = toml.load(config_path)

    # 构建 LLM 配置，支持环境变量覆盖
    llm_data = data.get("llm", {})
    llm_data["api_key"] = os.getenv("REVIEW_SEVERITY_API_KEY", llm_data.get("api_key", ""))
    llm_data["base_url"] = os.getenv("REVIEW_SEVERITY_BASE_URL", llm_data.get("base_url")) or None

    scorer_data = data.get("scorer", {})
    scorer_data["llm"] = LLMConfig(**llm_data)

    return ScorerConfig(**scorer_data)


def create_default_config(path: Path | None = None) -> Path:
    """创建默认配置文件"""
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_PATH

    if path.exists():
        raise FileExistsError(f"配置文件已存在: {path}")

    path.write_text(DEFAULT_CONFIG_CONTENT, encoding="utf-8")
    return path
