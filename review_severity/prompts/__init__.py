"""提示词"""

from .templates import RESPONSE_KEYS, build_chat_prompt, compile_prompt, compile_request

__all__ = ["RESPONSE_KEYS", "build_chat_prompt", "compile_prompt", "compile_request"]
