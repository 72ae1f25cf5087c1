"""Tests for the tokenizer and similarity engine."""

import numpy as np
import pytest

from plagiarism_core import (
    InsufficientDocumentsError,
    tokenize,
    make_document,
    similarity,
    classify_similarity,
    compare_pair,
    compare_one_to_many,
    build_matrix,
)


def doc(name, words):
    return {
        "name": name,
        "tokens": list(words),
        "words": set(words),
        "word_count": len(words),
        "unique_words": len(set(words)),
    }


class TestTokenize:
    """Tests for tokenize."""

    def test_hello_world(self):
        tokens, words = tokenize("Hello World!")
        assert tokens == ["hello", "world"]
        assert words == {"hello", "world"}

    def test_empty_and_punctuation_only(self):
        assert tokenize("") == ([], set())
        assert tokenize("!!! 123 ... ???") == ([], set())

    def test_duplicates_kept_in_tokens_only(self):
        tokens, words = tokenize("the cat the hat")
        assert tokens == ["the", "cat", "the", "hat"]
        assert words == {"the", "cat", "hat"}

    def test_stripped_characters_join_words(self):
        tokens, _ = tokenize("don't re-use 3rd café")
        assert tokens == ["dont", "reuse", "rd", "caf"]

    def test_newlines_and_tabs_are_removed_not_substituted(self):
        tokens, _ = tokenize("foo\nbar\tbaz qux")
        assert tokens == ["foobarbaz", "qux"]

    def test_collapses_runs_of_spaces(self):
        tokens, _ = tokenize("   many    spaces   here  ")
        assert tokens == ["many", "spaces", "here"]

    def test_normalization_is_idempotent(self):
        text = "It's 2024: The QUICK brown fox -- jumps; over the lazy dog!\nAgain."
        tokens, words = tokenize(text)
        assert tokenize(" ".join(tokens))[1] == words

    def test_make_document_counts(self):
        d = make_document("a.txt", "one two two three")
        assert d["name"] == "a.txt"
        assert d["word_count"] == 4
        assert d["unique_words"] == 3


class TestSimilarity:
    """Tests for similarity."""

    def test_half_overlap(self):
        assert similarity({"the", "cat", "sat"}, {"the", "cat", "ran"}) == 50.0

    def test_empty_union_is_zero(self):
        assert similarity(set(), set()) == 0.0

    def test_empty_against_non_empty(self):
        _, empty = tokenize("")
        assert similarity(empty, {"word"}) == 0.0

    def test_self_similarity(self):
        words = {"alpha", "beta", "gamma"}
        assert similarity(words, words) == 100.0

    @pytest.mark.parametrize(
        "a,b",
        [
            ({"a", "b", "c"}, {"b", "c", "d", "e"}),
            ({"x"}, {"y"}),
            ({"a", "b"}, set()),
            ({"a", "b", "c", "d", "e", "f", "g"}, {"a"}),
        ],
    )
    def test_symmetric_and_bounded(self, a, b):
        assert similarity(a, b) == similarity(b, a)
        assert 0.0 <= similarity(a, b) <= 100.0


class TestClassifySimilarity:
    """Tests for the display buckets."""

    @pytest.mark.parametrize(
        "score,status,label",
        [
            (0.0, "low", "Low Similarity"),
            (29.99, "low", "Low Similarity"),
            (30.0, "medium", "Medium Similarity"),
            (59.99, "medium", "Medium Similarity"),
            (60.0, "high", "High Similarity"),
            (100.0, "high", "High Similarity"),
        ],
    )
    def test_boundaries(self, score, status, label):
        assert classify_similarity(score) == (status, label)


class TestCompare:
    """Tests for single-pair and one-to-many modes."""

    def test_compare_pair_stats(self):
        ref = doc("ref", ["the", "cat", "sat"])
        cand = doc("student.txt", ["the", "cat", "ran", "the"])
        result = compare_pair(ref, cand)
        assert result["file_name"] == "student.txt"
        assert result["similarity"] == 50.0
        assert result["word_count"] == 4
        assert result["unique_words"] == 3
        assert result["common_words"] == 2
        assert result["status"] == "medium"

    def test_one_to_many_sorted_and_stable(self):
        # Scores 40, 80, 80 in input order
        ref = doc("ref", ["a", "b", "c", "d"])
        c40 = doc("forty", ["a", "b", "e"])
        c80a = doc("eighty-1", ["a", "b", "c", "d", "q"])
        c80b = doc("eighty-2", ["a", "b", "c", "d", "r"])
        results = compare_one_to_many(ref, [c40, c80a, c80b])
        assert [r["file_name"] for r in results] == ["eighty-1", "eighty-2", "forty"]
        assert [r["similarity"] for r in results] == [80.0, 80.0, 40.0]

    def test_one_to_many_requires_a_candidate(self):
        failures = [{"file_name": "bad.pdf", "error": "broken"}]
        with pytest.raises(InsufficientDocumentsError) as exc:
            compare_one_to_many(doc("ref", ["a"]), [], failures)
        assert exc.value.required == 1
        assert exc.value.succeeded == 0
        assert "bad.pdf" in str(exc.value)


class TestBuildMatrix:
    """Tests for all-pairs matrix mode."""

    def test_three_documents(self):
        docs = [
            doc("doc0", ["a", "b", "c"]),
            doc("doc1", ["a", "b", "d"]),
            doc("doc2", ["x", "y", "z"]),
        ]
        result = build_matrix(docs)
        m = result["matrix"]

        assert result["file_names"] == ["doc0", "doc1", "doc2"]
        assert m[0, 1] == 50.0
        assert m[0, 2] == 0.0
        assert m[1, 2] == 0.0
        assert np.array_equal(m, m.T)
        assert list(np.diag(m)) == [100.0, 100.0, 100.0]

        averages = {d["file_name"]: d["average_similarity"] for d in result["documents"]}
        assert averages == {"doc0": 25.0, "doc1": 25.0, "doc2": 0.0}
        # stable on ties: doc0 before doc1
        assert [d["file_name"] for d in result["documents"]] == ["doc0", "doc1", "doc2"]

    def test_diagonal_is_100_even_for_empty_documents(self):
        result = build_matrix([doc("e1", []), doc("e2", [])])
        assert result["matrix"].tolist() == [[100.0, 0.0], [0.0, 100.0]]
        assert [d["average_similarity"] for d in result["documents"]] == [0.0, 0.0]

    def test_equal_non_trivial_averages_keep_input_order(self):
        texts = ["f", "c e", "c i j", "c h", "b c"]
        docs = [make_document(f"d{i}", t) for i, t in enumerate(texts)]
        result = build_matrix(docs)

        order = [d["file_name"] for d in result["documents"]]
        assert order == ["d1", "d3", "d4", "d2", "d0"]

        averages = {d["file_name"]: d["average_similarity"] for d in result["documents"]}
        assert averages["d1"] == averages["d3"] == averages["d4"]
        assert averages["d1"] == pytest.approx((25 + 100 / 3 + 100 / 3) / 4)
        assert averages["d2"] == 18.75

    def test_sorted_by_average_descending(self):
        docs = [
            doc("loner", ["q", "r"]),
            doc("twin1", ["a", "b"]),
            doc("twin2", ["a", "b"]),
        ]
        result = build_matrix(docs)
        assert [d["file_name"] for d in result["documents"]] == ["twin1", "twin2", "loner"]
        assert result["documents"][0]["average_similarity"] == 50.0
        assert result["documents"][0]["status"] == "medium"

    @pytest.mark.parametrize("count", [0, 1])
    def test_requires_two_documents(self, count):
        docs = [doc("only", ["a"])][:count]
        with pytest.raises(InsufficientDocumentsError) as exc:
            build_matrix(docs)
        assert exc.value.required == 2
        assert exc.value.succeeded == count

    def test_error_payload_lists_failures(self):
        failures = [{"file_name": "x.docx", "error": "unsupported file type '.docx'"}]
        with pytest.raises(InsufficientDocumentsError) as exc:
            build_matrix([doc("only", ["a"])], failures)
        payload = exc.value.to_dict()
        assert payload["error"] == "InsufficientDocuments"
        assert payload["succeeded"] == 1
        assert payload["failures"] == failures
