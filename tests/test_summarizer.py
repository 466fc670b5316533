"""
Unit tests for flow.summarizer
"""

import pytest

from flow.summarizer import extract_key_points, summarize
from flow.utils_text import split_sentences


class TestSummarize:
    """First-N-sentences summary"""

    def test_default_two_sentences(self):
        assert summarize("One. Two. Three.") == "One. Two."

    def test_custom_count(self):
        assert summarize("One. Two. Three.", 1) == "One."
        assert summarize("One. Two. Three.", 10) == "One. Two. Three."

    def test_normalizes_result(self):
        assert summarize("first one.   second one!  third") == "First one. Second one!"

    def test_no_punctuation_single_sentence(self):
        assert summarize("no punctuation here") == "No punctuation here"

    def test_zero_sentences_returns_input(self):
        assert summarize("") == ""
        assert summarize("   ") == "   "

    def test_scenario_passthrough(self):
        assert summarize("Hello world. This is a test!") == "Hello world. This is a test!"

    @pytest.mark.parametrize("n", [1, 2, 3])
    def test_at_most_n_sentences(self, n):
        text = "Alpha one. Beta two! Gamma three? Delta four. Epsilon five."
        out = summarize(text, n)
        assert len(split_sentences(out)) <= n
        assert out.endswith((".", "!", "?"))


class TestExtractKeyPoints:
    """Bullet list of the first N sentences"""

    def test_scenario(self):
        assert extract_key_points("Hello world. This is a test!") == "• Hello world.\n• This is a test!"

    def test_capitalizes_each_bullet(self):
        assert extract_key_points("a. b. c.", 2) == "• A.\n• B."

    def test_default_limit_is_five(self):
        text = " ".join(f"Sentence {i}." for i in range(1, 8))
        lines = extract_key_points(text).split("\n")
        assert len(lines) == 5
        assert lines[-1] == "• Sentence 5."

    @pytest.mark.parametrize("count,limit", [(1, 5), (3, 5), (5, 5), (7, 5), (4, 2)])
    def test_line_count(self, count, limit):
        text = " ".join(f"point {i}." for i in range(count))
        lines = extract_key_points(text, limit).split("\n")
        assert len(lines) == min(limit, count)
        assert all(line.startswith("• ") for line in lines)

    def test_zero_sentences_returns_input(self):
        assert extract_key_points("") == ""
        assert extract_key_points(" \n ") == " \n "
