"""
Tests for the term-frequency extractive summarizer.
"""

import pytest

from blog_summarizer.services.summarization_service import (
    ScoredSentence,
    build_frequency_table,
    clean_token,
    score_sentences,
    select_sentences,
    split_sentences,
    summarization_service,
    summarize,
    summary_length,
)

EXAMPLE_DOCUMENT = (
    "Cats are great. Dogs are great too. "
    "Cats and dogs are popular pets. The weather is nice today."
)

LONG_DOCUMENT = (
    "Python is a popular programming language for data science. "
    "Many data science teams use Python every single day! "
    "The weather was cold this morning. "
    "Libraries make Python programming faster for data teams? "
    "Some people prefer tea over coffee in the morning. "
    "Data pipelines are often written in Python by science teams. "
    "Short one. "
    "Programming languages evolve slowly over many years."
)


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------

class TestSplitSentences:

    def test_splits_on_terminal_punctuation(self):
        sentences = split_sentences(EXAMPLE_DOCUMENT)
        assert [s.strip() for s in sentences] == [
            "Cats are great",
            "Dogs are great too",
            "Cats and dogs are popular pets",
            "The weather is nice today",
        ]

    def test_runs_of_punctuation_are_one_boundary(self):
        text = "Wait what?!? This is a longer sentence here... And another long sentence!!!"
        assert split_sentences(text) == [
            " This is a longer sentence here",
            " And another long sentence",
        ]

    def test_drops_fragments_of_ten_characters_or_less(self):
        assert split_sentences("0123456789. abcdefghij!  ") == []
        assert split_sentences("Hi. Ok. No.") == []

    def test_keeps_fragment_of_eleven_characters(self):
        assert split_sentences("Hello world") == ["Hello world"]


# ---------------------------------------------------------------------------
# Term extraction
# ---------------------------------------------------------------------------

class TestFrequencyTable:

    @pytest.mark.parametrize("token, expected", [
        ("Hello,", "Hello"),
        ("don't", "dont"),
        ("snake_case!", "snake_case"),
        ("(2024)", "2024"),
        ("café", "caf"),
        ("...", ""),
    ])
    def test_clean_token_strips_non_word_characters(self, token, expected):
        assert clean_token(token) == expected

    def test_counts_lowercased_terms_longer_than_three(self):
        table = build_frequency_table("The cat, the CAT! Cats and dogs. DOGS")
        assert table == {"cats": 1, "dogs": 2}

    def test_example_document_counts(self):
        table = build_frequency_table(EXAMPLE_DOCUMENT)
        assert table == {
            "cats": 2,
            "great": 2,
            "dogs": 2,
            "popular": 1,
            "pets": 1,
            "weather": 1,
            "nice": 1,
            "today": 1,
        }

    def test_rebuilding_gives_the_same_table(self):
        assert build_frequency_table(LONG_DOCUMENT) == build_frequency_table(LONG_DOCUMENT)

    def test_empty_text(self):
        assert build_frequency_table("") == {}


# ---------------------------------------------------------------------------
# Scoring and selection
# ---------------------------------------------------------------------------

class TestScoring:

    def test_score_is_sum_of_table_lookups(self):
        scored = score_sentences([" Cats chase the dogs"], {"cats": 2, "dogs": 3, "chase": 1})
        assert scored == [ScoredSentence(text="Cats chase the dogs", index=0, score=6)]

    def test_short_and_unknown_tokens_score_zero(self):
        scored = score_sentences(["It is an odd day"], {"cats": 5})
        assert scored[0].score == 0

    def test_example_document_scores(self):
        sentences = split_sentences(EXAMPLE_DOCUMENT)
        scored = score_sentences(sentences, build_frequency_table(EXAMPLE_DOCUMENT))
        assert [s.score for s in scored] == [4, 4, 6, 3]


class TestSelection:

    @pytest.mark.parametrize("count, expected", [
        (0, 0),
        (1, 1),
        (3, 1),
        (4, 2),
        (7, 3),
        (10, 3),
        (16, 5),
        (17, 5),
        (100, 5),
    ])
    def test_summary_length(self, count, expected):
        assert summary_length(count) == expected

    def test_ties_keep_document_order(self):
        scored = [
            ScoredSentence("first", 0, 1),
            ScoredSentence("second", 1, 3),
            ScoredSentence("third", 2, 3),
            ScoredSentence("fourth", 3, 2),
        ]
        assert [s.text for s in select_sentences(scored)] == ["second", "third"]

    def test_nothing_selected_from_empty_input(self):
        assert select_sentences([]) == []


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------

class TestSummarize:

    def test_example_document(self):
        assert summarize(EXAMPLE_DOCUMENT) == "Cats and dogs are popular pets. Cats are great."

    def test_output_is_in_score_order_not_document_order(self):
        summary = summarize(EXAMPLE_DOCUMENT)
        assert summary.index("Cats and dogs") < summary.index("Cats are great")
        assert EXAMPLE_DOCUMENT.index("Cats and dogs") > EXAMPLE_DOCUMENT.index("Cats are great")

    def test_no_qualifying_sentences_gives_lone_period(self):
        assert summarize("Hi. Ok. No.") == "."

    def test_single_qualifying_sentence(self):
        assert summarize("Short. This sentence is long enough.") == "This sentence is long enough."

    def test_repeated_single_word_terminates(self):
        text = " ".join(["word"] * 50)
        assert summarize(text) == text + "."

    def test_selected_sentences_appear_verbatim(self):
        summary = summarize(LONG_DOCUMENT)
        assert summary.endswith(".")
        parts = summary[:-1].split(". ")
        assert 0 < len(parts) <= summary_length(len(split_sentences(LONG_DOCUMENT)))
        for part in parts:
            assert part in LONG_DOCUMENT
            assert len(part) > 10

    def test_deterministic(self):
        assert summarize(LONG_DOCUMENT) == summarize(LONG_DOCUMENT)

    def test_service_method_matches_module_function(self):
        assert summarization_service.extractive_summary(EXAMPLE_DOCUMENT) == summarize(EXAMPLE_DOCUMENT)
