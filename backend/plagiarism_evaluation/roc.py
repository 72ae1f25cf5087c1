# plagiarism_evaluation/roc.py
import argparse
import numpy as np
from sklearn.metrics import roc_curve, auc, confusion_matrix

from plagiarism_config import EVAL_SIM_THRESHOLD
from plagiarism_evaluation.dataset import load_test_cases, load_corpus, labeled_scores


def roc_evaluation(test_cases, documents, threshold=EVAL_SIM_THRESHOLD):
    """
    ROC curve and AUC over the labeled pairs, plus the confusion matrix
    at the given similarity threshold (percent).
    Both classes must be present among the labeled pairs.
    """
    y_true, y_scores = labeled_scores(test_cases, documents)
    y_true = np.array(y_true)
    y_scores = np.array(y_scores)

    fpr, tpr, thresholds = roc_curve(y_true, y_scores)
    y_pred = (y_scores >= threshold).astype(int)

    return {
        "fpr": fpr,
        "tpr": tpr,
        "thresholds": thresholds,
        "auc": float(auc(fpr, tpr)),
        "confusion_matrix": confusion_matrix(y_true, y_pred, labels=[0, 1]),
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="ROC / AUC for the Jaccard detector.")
    parser.add_argument("dataset", help="test case JSON file")
    parser.add_argument("corpus", help="folder with the corpus documents")
    parser.add_argument("--threshold", type=float, default=EVAL_SIM_THRESHOLD)
    args = parser.parse_args(argv)

    result = roc_evaluation(load_test_cases(args.dataset), load_corpus(args.corpus), args.threshold)
    thresholds, fpr, tpr = result["thresholds"], result["fpr"], result["tpr"]

    print("\n📊 ROC Curve Data (Sample 10 Thresholds):")
    print(f"{'Threshold':>10} | {'FPR':>6} | {'TPR':>6}")
    print("-" * 30)
    step = max(1, len(thresholds) // 10)
    for t, f, r in zip(thresholds[::step], fpr[::step], tpr[::step]):
        print(f"{t:10.4f} | {f:6.4f} | {r:6.4f}")

    print(f"\nAUC = {result['auc']:.4f}")

    print(f"\n📊 Confusion Matrix (threshold {args.threshold:g}%):")
    print(result["confusion_matrix"])


if __name__ == "__main__":
    main()
