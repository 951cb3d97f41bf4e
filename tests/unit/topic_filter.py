from __future__ import annotations

import pytest

from llm_relay.handlers.topic_filter import TopicFilter


@pytest.fixture(scope="module")
def topic_filter() -> TopicFilter:
    return TopicFilter()


@pytest.mark.parametrize(
    "prompt",
    [
        "How do I reverse a linked list?",
        "Explain Big O for merge sort",
        "write it in C++ please",
        "Is R good for statistics?",
        "Why does my Python loop never end",
        "hello",
    ],
)
def test_on_topic_prompts(topic_filter: TopicFilter, prompt: str) -> None:
    assert topic_filter.is_on_topic(prompt)


@pytest.mark.parametrize(
    "prompt",
    [
        "What's the weather tomorrow?",
        "Recommend a great restaurant near the harbour",
        "Tell me about your favourite movie",
    ],
)
def test_off_topic_prompts(topic_filter: TopicFilter, prompt: str) -> None:
    assert not topic_filter.is_on_topic(prompt)


def test_single_letter_keyword_needs_a_whole_token(topic_filter: TopicFilter) -> None:
    # Substring matching would accept this because of the letter "r".
    assert "r" not in topic_filter.matches("Recommend a great restaurant near the harbour")
    assert topic_filter.matches("plotting in r") >= {"r"}


def test_phrase_keywords_match_across_tokens(topic_filter: TopicFilter) -> None:
    assert "binary search tree" in topic_filter.matches("insert into a Binary-Search Tree")


def test_custom_keywords() -> None:
    topic_filter = TopicFilter(["kotlin", "jetpack compose"])
    assert topic_filter.is_on_topic("jetpack compose layouts")
    assert not topic_filter.is_on_topic("python lists")
