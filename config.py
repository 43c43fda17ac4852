"""Configuration settings for the Assessment Reporting System."""

import os
import logging
from typing import Final

# Debug flag: 1 = debug mode (verbose logging to the console), 0 = production mode
DEBUG: Final[int] = int(os.environ.get("ASSESSMENT_DEBUG", "0"))

# --- Data Files ---

# Directory holding the JSON dataset snapshot
DATA_DIR: Final[str] = os.environ.get("ASSESSMENT_DATA_DIR", "data")

STUDENTS_FILE: Final[str] = "students.json"
ASSESSMENTS_FILE: Final[str] = "assessments.json"
QUESTIONS_FILE: Final[str] = "questions.json"
RESPONSES_FILE: Final[str] = "student-responses.json"

# --- Logging Configuration ---

LOG_FILE: Final[str] = os.environ.get(
    "ASSESSMENT_LOG_FILE", os.path.join("logs", "assessment_reports.log")
)
# LOG_LEVEL is used for file logging, console logging is only enabled in DEBUG mode
LOG_LEVEL = logging.DEBUG if DEBUG else logging.INFO
# Structured log format: timestamp, level, logger, module.function:line, message
LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(module)s.%(funcName)s:%(lineno)d | %(message)s'

# Basic check
if __name__ == "__main__":
    print(f"Debug Mode: {'On' if DEBUG else 'Off'}")
    print(f"Log Level: {logging.getLevelName(LOG_LEVEL)}")
    print(f"Data Directory: {DATA_DIR}")
    print(f"Log File: {LOG_FILE}")
