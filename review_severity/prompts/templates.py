"""提示词编译与 LangChain 提示词模板"""

from langchain_core.prompts import ChatPromptTemplate

from ..models.request import ClassificationRequest, ReviewInput
from ..models.severity import CANDIDATE_RESPONSES

PROMPT_HEADER = 'Classify the severity of this code review comment.\n\nComment: "{comment}"'
CODE_SECTION = "\n\nCode being reviewed:\n{code}"
CONTEXT_SECTION = "\n\nAdditional context:\n{context}"
PROMPT_QUESTION = "\n\nWhich severity category best describes this issue?"

# 候选回复的选项键，顺序同 CANDIDATE_RESPONSES
RESPONSE_KEYS: tuple[str, ...] = ("A", "B", "C", "D", "E")

SYSTEM_PROMPT = """You are classifying a code review comment. Choose exactly one of the responses below.

{choices}

Answer with the key of the best response only (a single letter, no punctuation)."""


def compile_prompt(review: ReviewInput) -> str:
    """按固定顺序拼接提示词

    空字符串与 None 一样视为未提供，comment 原样保留。
    """
    # 不用 str.format 拼接内容，避免评论中的花括号被解释
    prompt = PROMPT_HEADER.replace("{comment}", review.comment)
    if review.code:
        prompt += CODE_SECTION.replace("{code}", review.code)
    if review.context:
        prompt += CONTEXT_SECTION.replace("{context}", review.context)
    return prompt + PROMPT_QUESTION


def compile_request(review: ReviewInput) -> ClassificationRequest:
    """编译分类请求

    Args:
        review: 评审意见输入

    Returns:
        ClassificationRequest: 提示词和固定的 5 个候选回复
    """
    return ClassificationRequest(
        prompt=compile_prompt(review), candidate_labels=CANDIDATE_RESPONSES
    )


def format_choices(responses: tuple[str, ...] = CANDIDATE_RESPONSES) -> str:
    """把候选回复格式化为 "A. ..." 形式的列表"""
    return "\n".join(f"{key}. {text}" for key, text in zip(RESPONSE_KEYS, responses))


def build_chat_prompt(request: ClassificationRequest) -> ChatPromptTemplate:
    """构建发送给聊天模型的提示词模板

    编译好的提示词作为变量 ``prompt`` 传入，其中的花括号不会被当作模板变量。

    Args:
        request: 分类请求

    Returns:
        ChatPromptTemplate: 需要以 ``{"prompt": request.prompt}`` 调用
    """
    system = SYSTEM_PROMPT.replace("{choices}", format_choices(request.candidate_labels))
    return ChatPromptTemplate.from_messages(
        [
            ("system", system.replace("{", "{{").replace("}", "}}")),
            ("human", "{prompt}"),
        ]
    )
