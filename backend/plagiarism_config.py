# plagiarism_config.py - Shared settings for the plagiarism checker backend
import os

# --------- Config ----------
DEFAULT_REFERENCE_FILE = "original.txt"
DEFAULT_STUDENT_FILE = "student.txt"

SUPPORTED_EXTENSIONS = (".txt", ".pdf")
MAX_PDF_PAGES = 200
TEXT_ENCODING = "utf-8"

# Similarity buckets (percent)
LOW_SIMILARITY_THRESHOLD = 30.0
HIGH_SIMILARITY_THRESHOLD = 60.0

# Evaluation: a pair counts as plagiarised from the high bucket upwards
EVAL_SIM_THRESHOLD = HIGH_SIMILARITY_THRESHOLD

# --------- Server ----------
HOST = os.environ.get("PLAGIARISM_HOST", "0.0.0.0")
PORT = int(os.environ.get("PLAGIARISM_PORT", "5000"))
DEBUG = os.environ.get("PLAGIARISM_DEBUG", "0").lower() in ("1", "true", "yes")
MAX_CONTENT_LENGTH = int(os.environ.get("PLAGIARISM_MAX_CONTENT_LENGTH", str(32 * 1024 * 1024)))
