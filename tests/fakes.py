"""Fake classifier replies for chain and parser tests."""

import math

from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda


def make_logprobs(**token_probs):
    """Build an OpenAI-style logprobs payload from {token: probability}."""
    top = [
        {"token": token, "logprob": math.log(prob), "bytes": list(token.encode())}
        for token, prob in token_probs.items()
    ]
    best = max(top, key=lambda t: t["logprob"])
    return {"content": [{**best, "top_logprobs": top}], "refusal": None}


def make_classifier(content, logprobs=None, calls=None):
    """Fake chat model: records the prompt it receives and returns a fixed reply."""

    def _reply(prompt_value):
        if calls is not None:
            calls.append(prompt_value)
        metadata = {"logprobs": logprobs} if logprobs is not None else {}
        return AIMessage(content=content, response_metadata=metadata)

    return RunnableLambda(_reply)
