"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Finance ───────────────────────────────────────────────
CURRENCY: str = os.getenv("CURRENCY", "GHC")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Grading ───────────────────────────────────────────────
GRADES_INPUT_PATH: str = os.getenv("GRADES_INPUT_PATH", "students.txt")
GRADES_REPORT_PATH: str = os.getenv("GRADES_REPORT_PATH", "grades_report.txt")
REPORT_PREVIEW_LINES: int = int(os.getenv("REPORT_PREVIEW_LINES", "3"))

# ── Exports ───────────────────────────────────────────────
EXPORT_DIR: str = os.getenv("EXPORT_DIR", "exports")
