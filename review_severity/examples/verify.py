"""回归样例校验"""

import logging
from dataclasses import dataclass
from typing import Iterable

from ..prompts.templates import compile_request
from .inputs import EXAMPLE_INPUTS, ExampleInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExampleMismatch:
    """编译结果与期望不一致的样例"""

    index: int
    example: ExampleInput
    actual_prompt: str

    @property
    def expected_prompt(self) -> str:
        return self.example.compiled_tasks[0].messages[0].content


def verify_examples(examples: Iterable[ExampleInput] = EXAMPLE_INPUTS) -> list[ExampleMismatch]:
    """逐个编译样例并与记录的结果比较

    Returns:
        不一致的样例列表，全部一致时为空
    """
    mismatches: list[ExampleMismatch] = []
    for index, example in enumerate(examples):
        task = compile_request(example.value).to_compiled_task()
        expected = [recorded.model_dump() for recorded in example.compiled_tasks]
        if [task.model_dump()] != expected:
            logger.debug(f"样例 {index} 不一致: {example.value.comment[:60]}")
            mismatches.append(
                ExampleMismatch(index=index, example=example, actual_prompt=task.messages[0].content)
            )
    return mismatches
