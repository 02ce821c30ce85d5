"""远程函数描述（scalar.function）

描述由托管平台执行，其中的 JMESPath 表达式只作为数据导出，本项目不做求值。
"""

from typing import Any

from .models.severity import CANDIDATE_RESPONSES
from .scoring import SCORE_WEIGHTS

FUNCTION_DESCRIPTION = (
    "Score the severity of code review comments. Outputs a score from 0 "
    "(trivial/stylistic) to 1 (critical security/bug issue)."
)

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "comment": {
            "type": "string",
            "description": "The code review comment or feedback to evaluate.",
        },
        "code": {
            "type": "string",
            "description": "Optional: The code snippet being reviewed.",
        },
        "context": {
            "type": "string",
            "description": "Optional: Additional context about the codebase or review.",
        },
    },
    "required": ["comment"],
    "additionalProperties": False,
}

PROMPT_EXPRESSION = (
    "join('', ['Classify the severity of this code review comment.\n\nComment: \"', "
    "input.comment, '\"', "
    "if(input.code, '\n\nCode being reviewed:\n', ''), if(input.code, input.code, ''), "
    "if(input.context, '\n\nAdditional context:\n', ''), if(input.context, input.context, ''), "
    "'\n\nWhich severity category best describes this issue?'])"
)


def build_output_expression(weights: tuple[float, ...] = SCORE_WEIGHTS) -> str:
    """生成加权求和的 JMESPath 表达式

    权重为 0 的级别不出现在表达式中。
    """
    terms = [
        f"multiply(tasks[0].scores[{i}], `{weight}`)"
        for i, weight in enumerate(weights)
        if weight
    ]
    expression = terms[0]
    for term in terms[1:]:
        expression = f"add({expression}, {term})"
    return expression


def build_function_descriptor() -> dict[str, Any]:
    """构建远程函数描述

    Returns:
        可直接序列化为 JSON 的描述字典
    """
    return {
        "type": "scalar.function",
        "input_maps": None,
        "description": FUNCTION_DESCRIPTION,
        "changelog": None,
        "input_schema": INPUT_SCHEMA,
        "tasks": [
            {
                "type": "vector.completion",
                "skip": None,
                "map": None,
                "messages": [
                    {"role": "user", "content": {"$jmespath": PROMPT_EXPRESSION}},
                ],
                "tools": None,
                "responses": list(CANDIDATE_RESPONSES),
            }
        ],
        "output": {"$jmespath": build_output_expression()},
    }
