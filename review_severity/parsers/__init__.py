"""输出解析器"""

from .vote_parser import VoteOutputParser, vote_parser

__all__ = ["VoteOutputParser", "vote_parser"]
