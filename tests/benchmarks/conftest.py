"""pytest-benchmark configuration for HashtagLexEngine benchmarks.

Configures benchmark defaults and shared input corpora.

Python 3.13+.
"""

from __future__ import annotations

import pytest

# One line of mixed prose: 5 unwrapped, 2 wrapped, 1 escaped hash, CJK and emoji.
_CORPUS_LINE = (
    "Shipping #release-2.0 today! See #<release notes> and \\#not-a-tag. "
    "Thanks #team, #<QA crew>, #标签。and #\U0001f680launch #v2.0\n"
)


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add HashtagLexEngine metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "HashtagLexEngine"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def corpus_line() -> str:
    """Single line holding every hashtag form."""
    return _CORPUS_LINE


@pytest.fixture(scope="session")
def large_corpus() -> str:
    """About 130 KB of text with 7000 hashtags."""
    return _CORPUS_LINE * 1000
