# plagiarism_evaluation/dataset.py - Labeled test cases and corpus loading
import json

from plagiarism_extraction import list_corpus, load_documents
from plagiarism_core import similarity


def load_test_cases(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_corpus(folder):
    """Documents keyed by file name; unreadable files are reported and left out."""
    documents, failures = load_documents(list_corpus(folder))
    print(f"✅ Loaded {len(documents)} documents ({len(failures)} failed)")
    return {doc["name"]: doc for doc in documents}


def query_scores(query_file, documents):
    """(file name, similarity) for every other document in corpus order."""
    query = documents[query_file]["words"]
    return [
        (name, similarity(query, doc["words"]))
        for name, doc in documents.items()
        if name != query_file
    ]


def labeled_scores(test_cases, documents):
    """
    Flatten test cases into y_true / y_scores for the labeled pairs.
    Unlabeled documents are ignored.
    """
    y_true = []
    y_scores = []
    for case in test_cases:
        query_file = case["query_file"]
        relevant = set(case["relevant_docs"])
        irrelevant = set(case["irrelevant_docs"])

        if query_file not in documents:
            print(f"⚠️ Query file not found in corpus: {query_file}")
            continue

        for fname, score in query_scores(query_file, documents):
            if fname in relevant:
                y_true.append(1)
            elif fname in irrelevant:
                y_true.append(0)
            else:
                continue
            y_scores.append(score)
    return y_true, y_scores
