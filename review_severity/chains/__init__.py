"""评分链"""

from .severity_chain import create_classifier, create_severity_chain, setup_debug_logging

__all__ = ["create_classifier", "create_severity_chain", "setup_debug_logging"]
