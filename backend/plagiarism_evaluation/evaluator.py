# plagiarism_evaluation/evaluator.py
import argparse
from sklearn.metrics import accuracy_score, precision_score, recall_score, f1_score

from plagiarism_config import EVAL_SIM_THRESHOLD
from plagiarism_evaluation.dataset import load_test_cases, load_corpus, labeled_scores


def evaluate(test_cases, documents, threshold=EVAL_SIM_THRESHOLD):
    y_true, y_scores = labeled_scores(test_cases, documents)
    y_pred = [1 if s >= threshold else 0 for s in y_scores]

    print(f"📊 Evaluated {len(y_true)} labeled pairs from {len(test_cases)} test cases")

    return {
        "pairs": len(y_true),
        "threshold": threshold,
        "accuracy": accuracy_score(y_true, y_pred),
        "precision": precision_score(y_true, y_pred, zero_division=0),
        "recall": recall_score(y_true, y_pred, zero_division=0),
        "f1": f1_score(y_true, y_pred, zero_division=0),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Classification metrics for the Jaccard detector.")
    parser.add_argument("dataset", help="test case JSON file")
    parser.add_argument("corpus", help="folder with the corpus documents")
    parser.add_argument("--threshold", type=float, default=EVAL_SIM_THRESHOLD)
    args = parser.parse_args(argv)

    metrics = evaluate(load_test_cases(args.dataset), load_corpus(args.corpus), args.threshold)

    print("\n✅ Evaluation Results")
    print(f"Accuracy : {metrics['accuracy']:.4f}")
    print(f"Precision: {metrics['precision']:.4f}")
    print(f"Recall   : {metrics['recall']:.4f}")
    print(f"F1-score : {metrics['f1']:.4f}")


if __name__ == "__main__":
    main()
