# plagiarism_core.py - Word-set tokenizer and Jaccard similarity engine

import math
import re
import numpy as np

from plagiarism_config import LOW_SIMILARITY_THRESHOLD, HIGH_SIMILARITY_THRESHOLD

NON_ALPHA = re.compile(r"[^a-z ]")
WHITESPACE = re.compile(r"\s+")


class InsufficientDocumentsError(ValueError):
    """Raised when a comparison mode has too few processable documents."""

    def __init__(self, required, succeeded, failures=None):
        self.required = required
        self.succeeded = succeeded
        self.failures = list(failures or [])
        msg = f"need at least {required} document(s), got {succeeded}"
        if self.failures:
            names = ", ".join(f["file_name"] for f in self.failures)
            msg += f" (failed: {names})"
        super().__init__(msg)

    def to_dict(self):
        return {
            "error": "InsufficientDocuments",
            "message": str(self),
            "required": self.required,
            "succeeded": self.succeeded,
            "failures": self.failures,
        }


# ------------------ TOKENIZER ------------------
def tokenize(text):
    """Lowercase, strip everything but a-z and spaces, split on whitespace."""
    cleaned = NON_ALPHA.sub("", text.lower())
    tokens = [t for t in WHITESPACE.split(cleaned) if t]
    return tokens, set(tokens)


def make_document(name, text):
    tokens, words = tokenize(text)
    return {
        "name": name,
        "tokens": tokens,
        "words": words,
        "word_count": len(tokens),
        "unique_words": len(words),
    }


# ------------------ SIMILARITY ------------------
def similarity(set1, set2):
    """Jaccard index as a percentage; 0.0 when both sets are empty."""
    union = len(set1 | set2)
    if union == 0:
        return 0.0
    return len(set1 & set2) / union * 100


def classify_similarity(score):
    if score < LOW_SIMILARITY_THRESHOLD:
        return "low", "Low Similarity"
    if score < HIGH_SIMILARITY_THRESHOLD:
        return "medium", "Medium Similarity"
    return "high", "High Similarity"


def compare_pair(reference, candidate):
    """Score one candidate document against the reference document."""
    score = similarity(reference["words"], candidate["words"])
    status, label = classify_similarity(score)
    return {
        "file_name": candidate["name"],
        "similarity": score,
        "word_count": candidate["word_count"],
        "unique_words": candidate["unique_words"],
        "common_words": len(reference["words"] & candidate["words"]),
        "status": status,
        "label": label,
    }


def compare_one_to_many(reference, candidates, failures=None):
    if not candidates:
        raise InsufficientDocumentsError(1, 0, failures)
    results = [compare_pair(reference, c) for c in candidates]
    # sorted() is stable, so tied scores keep their upload order
    return sorted(results, key=lambda r: r["similarity"], reverse=True)


def build_matrix(documents, failures=None):
    """
    All-pairs similarity matrix over a fixed document list.
    The diagonal is 100 by convention; each document's average
    excludes its own diagonal entry.
    """
    n = len(documents)
    if n < 2:
        raise InsufficientDocumentsError(2, n, failures)

    matrix = np.full((n, n), 100.0)
    for i in range(n):
        for j in range(i + 1, n):
            score = similarity(documents[i]["words"], documents[j]["words"])
            matrix[i, j] = score
            matrix[j, i] = score

    # fsum over the off-diagonal entries only: equal rows give equal averages
    averages = [
        math.fsum(float(matrix[i, j]) for j in range(n) if j != i) / (n - 1)
        for i in range(n)
    ]

    summaries = []
    for doc, avg in zip(documents, averages):
        status, label = classify_similarity(avg)
        summaries.append({
            "file_name": doc["name"],
            "average_similarity": float(avg),
            "word_count": doc["word_count"],
            "unique_words": doc["unique_words"],
            "status": status,
            "label": label,
        })
    summaries.sort(key=lambda s: s["average_similarity"], reverse=True)

    return {
        "file_names": [doc["name"] for doc in documents],
        "matrix": matrix,
        "documents": summaries,
    }
