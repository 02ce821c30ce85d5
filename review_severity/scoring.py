"""严重级别得分计算"""

import math
from typing import Sequence

from .models.severity import SEVERITY_LABELS, SeverityLabel

# 各级别权重，顺序同 SEVERITY_LABELS；Trivial 不计入得分
SCORE_WEIGHTS: tuple[float, ...] = (1.0, 0.75, 0.5, 0.25, 0.0)


class InvalidProbabilitiesError(ValueError):
    """概率向量长度与级别数不一致"""


def aggregate(probabilities: Sequence[float]) -> float:
    """按固定权重对 5 个级别的概率加权求和

    不校验取值范围，也不要求概率之和为 1。

    Args:
        probabilities: 各级别概率，顺序同 SEVERITY_LABELS

    Returns:
        加权得分

    Raises:
        InvalidProbabilitiesError: 概率个数不是 5
    """
    if len(probabilities) != len(SCORE_WEIGHTS):
        raise InvalidProbabilitiesError(
            f"需要 {len(SCORE_WEIGHTS)} 个概率值，实际为 {len(probabilities)} 个"
        )

    # 逐项精确累加，不受求和顺序影响
    return math.fsum(p * w for p, w in zip(probabilities, SCORE_WEIGHTS))


def most_likely_label(probabilities: Sequence[float]) -> SeverityLabel:
    """返回概率最高的级别，并列时取更严重的级别"""
    if len(probabilities) != len(SEVERITY_LABELS):
        raise InvalidProbabilitiesError(
            f"需要 {len(SEVERITY_LABELS)} 个概率值，实际为 {len(probabilities)} 个"
        )
    best = max(range(len(probabilities)), key=lambda i: (probabilities[i], -i))
    return SEVERITY_LABELS[best]
