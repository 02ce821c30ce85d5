"""Review Severity - 基于 LangChain 的评审意见严重级别评分"""

__version__ = "0.1.0"

from .chains import create_severity_chain
from .cli import main
from .config import load_config
from .examples import EXAMPLE_INPUTS, verify_examples
from .function import build_function_descriptor
from .models import (
    ClassificationRequest,
    LLMConfig,
    ReviewInput,
    ScorerConfig,
    SeverityLabel,
    SeverityScore,
)
from .prompts import compile_request
from .scoring import SCORE_WEIGHTS, InvalidProbabilitiesError, aggregate

__all__ = [
    "main",
    "load_config",
    "create_severity_chain",
    "compile_request",
    "aggregate",
    "build_function_descriptor",
    "verify_examples",
    "EXAMPLE_INPUTS",
    "SCORE_WEIGHTS",
    "InvalidProbabilitiesError",
    "ClassificationRequest",
    "LLMConfig",
    "ReviewInput",
    "ScorerConfig",
    "SeverityLabel",
    "SeverityScore",
]
