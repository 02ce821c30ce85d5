"""回归样例：输入与期望的编译结果"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..models.request import ChatMessage, CompiledTask, ReviewInput
from ..models.severity import CANDIDATE_RESPONSES


class ExampleInput(BaseModel):
    """单个回归样例"""

    model_config = ConfigDict(frozen=True)

    value: ReviewInput
    compiled_tasks: tuple[CompiledTask, ...]
    output_length: Optional[int] = None


def _compiled_task(
    comment: str, code: Optional[str] = None, context: Optional[str] = None
) -> tuple[CompiledTask, ...]:
    """按约定格式写出期望的编译结果"""
    content = f'Classify the severity of this code review comment.\n\nComment: "{comment}"'
    if code:
        content += f"\n\nCode being reviewed:\n{code}"
    if context:
        content += f"\n\nAdditional context:\n{context}"
    content += "\n\nWhich severity category best describes this issue?"

    return (
        CompiledTask(
            messages=(ChatMessage(role="user", content=content),),
            responses=CANDIDATE_RESPONSES,
        ),
    )


def _example(comment: str, code: Optional[str] = None, context: Optional[str] = None) -> ExampleInput:
    return ExampleInput(
        value=ReviewInput.from_fields(comment, code=code, context=context),
        compiled_tasks=_compiled_task(comment, code, context),
        output_length=None,
    )


EXAMPLE_INPUTS: tuple[ExampleInput, ...] = (
    # Critical: SQL 注入
    _example(
        "This is vulnerable to SQL injection. User input is directly concatenated into the "
        "query string without any sanitization or parameterized queries.",
        code='const query = "SELECT * FROM users WHERE id = " + userId;',
    ),
    # Critical: 认证绕过
    _example(
        "CRITICAL: This authentication check can be bypassed by passing null. The function "
        "returns true when the password parameter is undefined.",
        code="function checkAuth(password) { return password === expectedPassword; }",
        context="This is the main authentication function for the admin panel.",
    ),
    # Major: 死循环
    _example(
        "This will cause an infinite loop when the array is empty. The while condition never "
        "becomes false.",
    ),
    # Major: 性能问题
    _example(
        "This N+1 query pattern will cause severe performance issues at scale. Each iteration "
        "makes a separate database call instead of batching.",
        code="users.forEach(user => { const orders = await db.query(`SELECT * FROM orders "
        "WHERE user_id = ${user.id}`); });",
    ),
    # Moderate: 重复逻辑
    _example(
        "Consider extracting this repeated logic into a shared utility function. It appears in "
        "3 other places in the codebase.",
    ),
    # Moderate: 可维护性
    _example(
        "This function is doing too many things. It should be split into smaller, "
        "single-responsibility functions for better testability.",
        context="Part of the order processing module.",
    ),
    # Minor: 命名
    _example(
        "Variable name 'x' is not descriptive. Consider renaming to something like 'userCount' "
        "or 'totalItems'.",
        code="const x = users.length;",
    ),
    # Minor: 文档
    _example(
        "Please add a JSDoc comment explaining the purpose of this function and its parameters.",
    ),
    # Trivial: 空行
    _example("There's an extra blank line here that should be removed."),
    # Trivial: 格式
    _example(
        "Nit: trailing comma missing on the last item in this array.",
        code="const items = [\n  'apple',\n  'banana'\n];",
    ),
    # 边界: 只有评论
    _example("LGTM"),
    # 边界: 所有字段
    _example(
        "The error handling here silently swallows exceptions. At minimum, log the error for "
        "debugging.",
        code="try { doSomething(); } catch (e) { }",
        context="This is in a critical payment processing flow where errors must be tracked.",
    ),
    # 边界: 超长评论
    _example(
        "While this implementation works, I have several concerns: First, the variable naming "
        "could be improved for clarity. Second, there's some code duplication with the "
        "processOrder function. Third, the error messages could be more user-friendly. Fourth, "
        "consider adding input validation. Fifth, the function could benefit from unit tests. "
        "Overall, this is functional but could use some polish before merging.",
    ),
    # Moderate 到 Major: 竞态
    _example(
        "Potential race condition here. Multiple concurrent requests could read stale data "
        "before the update completes.",
        code="const balance = await getBalance();\nawait updateBalance(balance + amount);",
    ),
    # Minor: 风格偏好
    _example(
        "Prefer using arrow functions for consistency with the rest of the codebase.",
        code="function handleClick() { ... }",
    ),
    # 边界: 单字符
    _example("?"),
    # 边界: 超长代码
    _example(
        "This function is overly complex and hard to follow.",
        code=(
            "function processData(input) {\n"
            "  const result = [];\n"
            "  for (let i = 0; i < input.length; i++) {\n"
            "    for (let j = 0; j < input[i].items.length; j++) {\n"
            "      for (let k = 0; k < input[i].items[j].values.length; k++) {\n"
            "        result.push(transform(input[i].items[j].values[k]));\n"
            "      }\n"
            "    }\n"
            "  }\n"
            "  return result.filter(x => x !== null).map(x => x.value).reduce((a, b) => a + b, 0);\n"
            "}"
        ),
    ),
    # 边界: 超长上下文
    _example(
        "This could cause issues in production.",
        context=(
            "This file is part of the payment processing module which handles credit card "
            "transactions, refunds, and chargebacks. It integrates with Stripe, PayPal, and our "
            "internal ledger system. The module is critical for revenue and must maintain 99.99% "
            "uptime. Any changes require approval from the payments team lead and must include "
            "comprehensive test coverage."
        ),
    ),
    # 边界: unicode
    _example(
        "The emoji handling might cause encoding issues.",
        code="const greeting = '\U0001F44B Hello, World! © 2024';",
    ),
    # 边界: 混合缩进
    _example(
        "Inconsistent indentation between tabs and spaces.",
        code="function test() {\n\tif (condition) {\n        return true;\n\t}\n}",
    ),
    # 边界: 只有上下文
    _example(
        "This approach seems inefficient for our use case.",
        context="We expect this endpoint to receive 10,000+ requests per minute during peak hours.",
    ),
)
