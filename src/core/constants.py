"""Core constants used across radar modules.

This module centralizes schema labels, limits, and user-facing messages.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

MAX_RINGS = 4
NAME_HEADER = "name"
RING_HEADER = "ring"
QUADRANT_HEADER = "quadrant"
IS_NEW_HEADER = "isNew"
TOPIC_HEADER = "topic"
DESCRIPTION_HEADER = "description"
REQUIRED_HEADERS = (NAME_HEADER, RING_HEADER, QUADRANT_HEADER, IS_NEW_HEADER)
OPTIONAL_HEADERS = (DESCRIPTION_HEADER, TOPIC_HEADER)
IS_NEW_TRUE_LITERAL = "true"

DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
DEFAULT_FAQ_URL = (
    "https://info.thoughtworks.com/visualize-your-tech-strategy-guide.html#faq"
)
DEFAULT_SHEETS_BASE_URL = "https://docs.google.com/spreadsheets/d"
GOOGLE_DOMAIN_SUFFIX = "google.com"
CSV_REFERENCE_SUFFIX = "csv"
GOOGLE_SHEETS_TITLE_SUFFIX = " - Google Sheets"
SHEET_MISSING_STATUS_CODES = (403, 404)

MISSING_CONTENT_MESSAGE = "Document is missing content."
MISSING_HEADERS_MESSAGE = (
    "Document is missing one or more required headers or they are misspelled. "
    "Check that your document contains headers for "
    '"name", "ring", "quadrant", "isNew", "description".'
)
TOO_MANY_RINGS_MESSAGE = "More than 4 rings."
SHEET_NOT_FOUND_MESSAGE = (
    "Oops! We can't find the Google Sheet you've entered. Can you check the URL?"
)
LOADING_PROBLEM_PREFIX = "Oops! It seems like there are some problems with loading your data. "
FAQ_POINTER_TEMPLATE = "Please check FAQs for possible solutions: {faq_url}"
