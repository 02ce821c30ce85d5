"""LangChain 严重级别评分链"""

import logging
from typing import Any

from langchain_core.runnables import Runnable, RunnableLambda

from ..config import load_config
from ..models.config import ScorerConfig
from ..models.request import ClassificationRequest, ReviewInput
from ..models.severity import SEVERITY_LABELS, SeverityScore
from ..parsers.vote_parser import vote_parser
from ..prompts.templates import build_chat_prompt, compile_request
from ..scoring import aggregate, most_likely_label

# 配置日志
logger = logging.getLogger(__name__)


def setup_debug_logging(verbose: bool = False, log_file: str | None = None):
    """设置调试日志

    Args:
        verbose: 是否输出到控制台
        log_file: 日志文件路径（可选）
    """
    handlers = []

    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter("\n[DEBUG] %(message)s"))
        handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
        handlers.append(file_handler)

    if handlers:
        logger.setLevel(logging.DEBUG)
        for handler in handlers:
            logger.addHandler(handler)


def create_classifier(config: ScorerConfig) -> Runnable:
    """创建默认的分类后端（OpenAI 兼容接口，返回首个 token 的 logprobs）"""
    from langchain_openai import ChatOpenAI

    return ChatOpenAI(
        model=config.llm.model,
        api_key=config.llm.api_key,
        base_url=config.llm.base_url,
        temperature=config.llm.temperature,
        timeout=config.llm.timeout,
        max_tokens=1,
        logprobs=True,
        top_logprobs=config.llm.top_logprobs,
    )


def create_severity_chain(
    config: ScorerConfig | None = None,
    classifier: Runnable | None = None,
) -> Runnable:
    """创建评分链

    使用 LCEL 构建：
    1. 校验输入
    2. 编译提示词
    3. 调用分类后端
    4. 解析概率分布
    5. 加权得分

    Args:
        config: 配置对象，未提供 classifier 且为 None 时自动加载
        classifier: 分类后端，接收提示词，返回带 logprobs 的 AIMessage

    Returns:
        评分链，输入 ReviewInput 或 dict，输出 SeverityScore
    """
    if classifier is None:
        if config is None:
            config = load_config()
        classifier = create_classifier(config)

    def prepare_input(value: ReviewInput | dict[str, Any]) -> dict[str, Any]:
        """校验输入并编译请求"""
        review = value if isinstance(value, ReviewInput) else ReviewInput.model_validate(value)
        request = compile_request(review)

        logger.debug("=" * 80)
        logger.debug("【1. 编译后的提示词】")
        logger.debug("=" * 80)
        logger.debug(request.prompt)

        return {"review": review, "request": request}

    def invoke_classifier(data: dict[str, Any]) -> dict[str, Any]:
        """调用分类后端并解析分布"""
        request: ClassificationRequest = data["request"]
        prompt = build_chat_prompt(request)

        logger.debug("=" * 80)
        logger.debug("【2. 调用分类后端】")
        logger.debug("=" * 80)
        if config is not None:
            logger.debug(f"Model: {config.llm.model}")
            logger.debug(f"Base URL: {config.llm.base_url}")

        chain = prompt | classifier | vote_parser
        probabilities = chain.invoke({"prompt": request.prompt})

        logger.debug("=" * 80)
        logger.debug("【3. 概率分布】")
        logger.debug("=" * 80)
        for label, probability in zip(SEVERITY_LABELS, probabilities):
            logger.debug(f"  {label.short_name}: {probability:.4f}")

        return {**data, "probabilities": probabilities}

    def build_score(data: dict[str, Any]) -> SeverityScore:
        """加权得分"""
        probabilities = data["probabilities"]
        score = SeverityScore(
            score=aggregate(probabilities),
            probabilities=probabilities,
            label=most_likely_label(probabilities),
        )
        logger.debug(f"得分: {score.score:.4f} ({score.label.short_name})")
        return score

    return (
        RunnableLambda(prepare_input)
        | RunnableLambda(invoke_classifier)
        | RunnableLambda(build_score)
    )
