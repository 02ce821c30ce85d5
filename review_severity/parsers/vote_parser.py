"""分类结果解析器：把模型回复解析为各级别的概率分布"""

import math
import re
from typing import Any

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import BaseOutputParser
from langchain_core.outputs import ChatGeneration, Generation

from ..models.severity import SEVERITY_LABELS
from ..prompts.templates import RESPONSE_KEYS

# 回复只能是选项键本身，或 "B. ..." 这类复述选项的形式
KEY_PATTERN = re.compile(r"^\(?([A-E])(?:[.:)]?$|[.:)]\s)")


class VoteOutputParser(BaseOutputParser[tuple[float, ...]]):
    """投票解析器

    优先使用首个 token 的 top_logprobs 计算分布，拿不到时退化为按回复文本投票。
    """

    def parse(self, text: str) -> tuple[float, ...]:
        """按回复文本解析为 one-hot 分布

        Args:
            text: 模型回复文本

        Returns:
            各级别概率，顺序同 SEVERITY_LABELS

        Raises:
            OutputParserException: 回复中没有可识别的选项
        """
        index = self._find_choice(text)
        if index is None:
            raise OutputParserException(f"无法从输出中识别严重级别: {text[:200]}...")
        return tuple(1.0 if i == index else 0.0 for i in range(len(RESPONSE_KEYS)))

    def _find_choice(self, text: str) -> int | None:
        """在文本中查找选项，返回其下标"""
        text = text.strip()

        # 方式1: 选项键，例如 "B"、"(B)"、"B. Major - ..."
        key_match = KEY_PATTERN.match(text)
        if key_match:
            return RESPONSE_KEYS.index(key_match.group(1))

        # 方式2: 最先出现的级别名称，例如 "A minor issue"
        lowered = text.lower()
        best: tuple[int, int] | None = None
        for i, label in enumerate(SEVERITY_LABELS):
            name_match = re.search(rf"\b{label.short_name.lower()}\b", lowered)
            if name_match and (best is None or name_match.start() < best[0]):
                best = (name_match.start(), i)

        return best[1] if best else None

    def parse_logprobs(self, logprobs: Any) -> tuple[float, ...] | None:
        """从 OpenAI 格式的 logprobs 计算分布

        对出现的选项键做 softmax，未出现的选项概率为 0。
        """
        if not isinstance(logprobs, dict):
            return None
        content = logprobs.get("content") or []
        if not content:
            return None

        first = content[0]
        candidates = first.get("top_logprobs") or [first]

        votes: list[tuple[int, float]] = []
        for candidate in candidates:
            token = str(candidate.get("token", "")).strip()
            if token in RESPONSE_KEYS:
                votes.append((RESPONSE_KEYS.index(token), float(candidate["logprob"])))

        if not votes:
            return None

        # 减去最大值，避免 exp 下溢
        peak = max(logprob for _, logprob in votes)
        weights = [0.0] * len(RESPONSE_KEYS)
        for index, logprob in votes:
            weights[index] += math.exp(logprob - peak)

        total = sum(weights)
        return tuple(w / total for w in weights)

    def parse_result(self, result: Any, *, partial: bool = False) -> tuple[float, ...]:
        """解析 Generation 结果"""
        if isinstance(result, list) and result:
            result = result[0]

        if isinstance(result, ChatGeneration):
            metadata = result.message.response_metadata or {}
            distribution = self.parse_logprobs(metadata.get("logprobs"))
            if distribution is not None:
                return distribution
            return self.parse(result.text)

        if isinstance(result, Generation):
            return self.parse(result.text)

        raise NotImplementedError(f"不支持的类型: {type(result)}")

    @property
    def _type(self) -> str:
        return "severity_vote"


# 单例实例
vote_parser = VoteOutputParser()
