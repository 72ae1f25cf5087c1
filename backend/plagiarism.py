# plagiarism.py - Command-line plagiarism check
import argparse
import json
import os
import sys

from plagiarism_config import DEFAULT_REFERENCE_FILE, DEFAULT_STUDENT_FILE
from plagiarism_extraction import ExtractionError, extract_text, load_documents
from plagiarism_core import (
    InsufficientDocumentsError,
    make_document,
    compare_one_to_many,
    build_matrix,
)


def as_sources(paths):
    return [(os.path.basename(p), p) for p in paths]


def print_results(results):
    print("\n📊 Similarity Scores for Plagiarism Check:")
    print(f"{'Document':<40} | {'Similarity':>10} | {'Words':>6} | {'Unique':>6} | {'Common':>6} | Status")
    print("-" * 100)
    for r in results:
        print(
            f"{r['file_name']:<40} | {r['similarity']:9.2f}% | {r['word_count']:>6} | "
            f"{r['unique_words']:>6} | {r['common_words']:>6} | {r['label']}"
        )


def print_matrix(result):
    names = result["file_names"]
    width = max(12, max(len(n) for n in names) + 2)
    print("\n📊 Similarity Matrix (%):")
    print(" " * width + "".join(f"{i:>9}" for i in range(len(names))))
    for i, (name, row) in enumerate(zip(names, result["matrix"])):
        print(f"{i:>2} {name:<{width - 3}}" + "".join(f"{v:9.2f}" for v in row))

    print("\n📈 Average Similarity:")
    print(f"{'Document':<40} | {'Average':>10} | {'Words':>6} | {'Unique':>6} | Status")
    print("-" * 90)
    for d in result["documents"]:
        print(
            f"{d['file_name']:<40} | {d['average_similarity']:9.2f}% | "
            f"{d['word_count']:>6} | {d['unique_words']:>6} | {d['label']}"
        )


def run_compare(reference_path, student_paths, as_json=False):
    ref_name = os.path.basename(reference_path)
    try:
        reference = make_document(ref_name, extract_text(reference_path, ref_name))
    except ExtractionError as e:
        print(f"❌ Error reading reference: {e}", file=sys.stderr)
        return 1

    documents, failures = load_documents(as_sources(student_paths))
    try:
        results = compare_one_to_many(reference, documents, failures)
    except InsufficientDocumentsError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps({"reference": ref_name, "results": results, "failures": failures}, indent=2))
    else:
        print_results(results)
    return 0


def run_matrix(paths, as_json=False):
    documents, failures = load_documents(as_sources(paths))
    try:
        result = build_matrix(documents, failures)
    except InsufficientDocumentsError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if as_json:
        payload = dict(result, matrix=result["matrix"].tolist(), failures=failures)
        print(json.dumps(payload, indent=2))
    else:
        print_matrix(result)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Estimate word overlap (Jaccard similarity) between documents."
    )
    parser.add_argument("files", nargs="*",
                        help="reference file followed by student files, or all files with --matrix")
    parser.add_argument("--matrix", action="store_true",
                        help="compare every file with every other file")
    parser.add_argument("--json", action="store_true", help="print results as JSON")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.matrix:
        return run_matrix(args.files, args.json)

    if len(args.files) == 1:
        print("❌ Need a reference file and at least one student file", file=sys.stderr)
        return 2
    if args.files:
        reference, students = args.files[0], args.files[1:]
    else:
        reference, students = DEFAULT_REFERENCE_FILE, [DEFAULT_STUDENT_FILE]
    return run_compare(reference, students, args.json)


if __name__ == "__main__":
    sys.exit(main())
