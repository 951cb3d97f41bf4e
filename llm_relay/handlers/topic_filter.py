"""Keyword-based coding topic filter."""

from __future__ import annotations

import re
from collections.abc import Iterable

from llm_relay.config.filters import CODING_KEYWORDS, TOPIC_TOKEN_PATTERN, TOPIC_MAX_PHRASE_TOKENS


class TopicFilter:
    """Accept prompts that mention at least one coding keyword.

    Matching works on whole lower-cased tokens and short token phrases, so a
    one-letter keyword such as "r" only matches the word "r" and not every
    prompt containing the letter.
    """

    def __init__(self, keywords: Iterable[str] = CODING_KEYWORDS) -> None:
        self._token_re = re.compile(TOPIC_TOKEN_PATTERN)
        self._phrases: frozenset[str] = frozenset(
            " ".join(self.tokenize(k)) for k in keywords if self.tokenize(k)
        )
        self._max_tokens = max(
            [TOPIC_MAX_PHRASE_TOKENS, *(p.count(" ") + 1 for p in self._phrases)],
        )

    def tokenize(self, text: str) -> list[str]:
        return self._token_re.findall(text.lower())

    def matches(self, prompt: str) -> set[str]:
        tokens = self.tokenize(prompt)
        hits: set[str] = set()
        for size in range(1, self._max_tokens + 1):
            for start in range(0, len(tokens) - size + 1):
                phrase = " ".join(tokens[start : start + size])
                if phrase in self._phrases:
                    hits.add(phrase)
        return hits

    def is_on_topic(self, prompt: str) -> bool:
        return bool(self.matches(prompt))


__all__ = ["TopicFilter"]
