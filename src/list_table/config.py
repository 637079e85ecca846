"""Shared configuration for list-table building and the command line."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

VALIDATION_MODES = ("strict", "warn", "off")

# Validation mode used when the caller does not pass one
DEFAULT_VALIDATION = os.getenv("LIST_TABLE_VALIDATION", "warn")

LOG_LEVEL = os.getenv("LIST_TABLE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Prefix on every warn-mode diagnostic line
LOG_PREFIX = "[ListTable]"
