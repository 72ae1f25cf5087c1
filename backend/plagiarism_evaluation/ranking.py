# plagiarism_evaluation/ranking.py
import argparse
import numpy as np
from sklearn.metrics import average_precision_score

from plagiarism_evaluation.dataset import load_test_cases, load_corpus, query_scores


def ranking_evaluation(test_cases, documents):
    """Mean Average Precision and Mean Reciprocal Rank of the Jaccard ranking."""
    all_ap = []
    all_rr = []

    for case in test_cases:
        query_file = case["query_file"]
        relevant = set(case["relevant_docs"])

        if query_file not in documents:
            print(f"⚠️ Query file not found in corpus: {query_file}")
            continue

        # Stable sort by similarity descending
        ranked = sorted(query_scores(query_file, documents), key=lambda x: x[1], reverse=True)

        y_true = [1 if fname in relevant else 0 for fname, _ in ranked]
        y_score = [score for _, score in ranked]

        if sum(y_true) == 0:
            continue  # no labeled relevant docs

        all_ap.append(average_precision_score(y_true, y_score))
        all_rr.append(1 / (y_true.index(1) + 1))

    return {
        "queries": len(all_ap),
        "map": float(np.mean(all_ap)) if all_ap else 0.0,
        "mrr": float(np.mean(all_rr)) if all_rr else 0.0,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ranking metrics (MAP, MRR) for the Jaccard detector.")
    parser.add_argument("dataset", help="test case JSON file")
    parser.add_argument("corpus", help="folder with the corpus documents")
    args = parser.parse_args(argv)

    metrics = ranking_evaluation(load_test_cases(args.dataset), load_corpus(args.corpus))

    print("\n📊 Ranking Evaluation Results")
    print(f"Mean Average Precision (MAP)   : {metrics['map']:.4f}")
    print(f"Mean Reciprocal Rank (MRR)     : {metrics['mrr']:.4f}")


if __name__ == "__main__":
    main()
