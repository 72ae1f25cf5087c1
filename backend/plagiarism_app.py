# plagiarism_app.py - Plagiarism Detection Backend (Jaccard word-set overlap)
import os
from flask import Flask, request, jsonify
from flask_cors import CORS
from werkzeug.utils import secure_filename

from plagiarism_config import (
    SUPPORTED_EXTENSIONS,
    LOW_SIMILARITY_THRESHOLD,
    HIGH_SIMILARITY_THRESHOLD,
    MAX_PDF_PAGES,
    MAX_CONTENT_LENGTH,
    HOST,
    PORT,
    DEBUG,
)
from plagiarism_extraction import ExtractionError, extract_text, load_documents
from plagiarism_core import (
    InsufficientDocumentsError,
    make_document,
    compare_one_to_many,
    build_matrix,
)

# --------- App ----------
app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = MAX_CONTENT_LENGTH
CORS(app)


@app.errorhandler(InsufficientDocumentsError)
def insufficient_documents(e):
    print(f"⚠️ {e}")
    return jsonify(e.to_dict()), 400


def safe_name(filename, fallback="upload"):
    """
    Sanitized display name that keeps the original extension, which
    secure_filename drops for names made only of non-ASCII characters.
    """
    stem, ext = os.path.splitext(filename)
    name = secure_filename(filename)
    if name and os.path.splitext(name)[1].lower() == ext.lower():
        return name
    ext = secure_filename(ext.lstrip("."))
    return (secure_filename(stem) or fallback) + (f".{ext}" if ext else "")


def uploaded(files):
    """(display name, stream) pairs for the uploaded files."""
    return [
        (safe_name(f.filename), f.stream)
        for f in files
        if f.filename
    ]


# --------- Endpoints ----------
@app.route("/compare", methods=["POST"])
def compare():
    """Compare one reference file against one or more student files."""
    ref = request.files.get("reference")
    if ref is None or not ref.filename:
        return jsonify({"error": "no reference file"}), 400

    ref_name = safe_name(ref.filename, fallback="reference")
    print(f"📄 Extracting reference: {ref_name}")
    try:
        ref_text = extract_text(ref.stream, ref_name)
    except ExtractionError as e:
        return jsonify({"error": "reference unreadable", "failures": [e.to_dict()]}), 422
    reference = make_document(ref_name, ref_text)

    students = uploaded(request.files.getlist("students"))
    print(f"📄 Extracting {len(students)} student file(s)...")
    documents, failures = load_documents(students)

    print("📊 Computing similarities...")
    results = compare_one_to_many(reference, documents, failures)

    print(f"✅ Top match: {results[0]['file_name']} ({results[0]['similarity']:.2f}%)")
    return jsonify({
        "reference": {
            "file_name": reference["name"],
            "word_count": reference["word_count"],
            "unique_words": reference["unique_words"],
        },
        "results": results,
        "failures": failures,
    })


@app.route("/matrix", methods=["POST"])
def matrix():
    """All-pairs similarity matrix over the uploaded files."""
    files = uploaded(request.files.getlist("files"))
    print(f"📄 Extracting {len(files)} file(s)...")
    documents, failures = load_documents(files)

    print("🧮 Computing similarity matrix...")
    result = build_matrix(documents, failures)

    print(f"✅ Matrix ready ({len(documents)}x{len(documents)})")
    return jsonify({
        "file_names": result["file_names"],
        "matrix": result["matrix"].tolist(),
        "documents": result["documents"],
        "failures": failures,
    })


@app.route("/health", methods=["GET"])
def health():
    """Health check."""
    return jsonify({
        "status": "healthy",
        "supported_extensions": list(SUPPORTED_EXTENSIONS),
        "max_pdf_pages": MAX_PDF_PAGES,
        "thresholds": {
            "low": LOW_SIMILARITY_THRESHOLD,
            "high": HIGH_SIMILARITY_THRESHOLD,
        },
    })


# --------- Run ----------
if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("🚀 PLAGIARISM DETECTOR (Jaccard)")
    print("=" * 60)
    print(f"📄 Formats: {', '.join(SUPPORTED_EXTENSIONS)}")
    print(f"🎯 Buckets: Low < {LOW_SIMILARITY_THRESHOLD:g} <= Medium < {HIGH_SIMILARITY_THRESHOLD:g} <= High")
    print("=" * 60)
    print(f"🌐 Starting server at http://{HOST}:{PORT}")
    print(f"📍 Health: http://{HOST}:{PORT}/health")
    print("=" * 60 + "\n")

    app.run(host=HOST, port=PORT, debug=DEBUG)
