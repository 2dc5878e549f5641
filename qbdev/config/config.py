"""
Static configuration data for the qbdev toolkit.
This includes the block table, check levels, scoring weights and the
markers used by the debugging transformer.
"""

# Each opener maps to the closer that ends it and the stack it lives on.
# Loops and procedures are validated on independent stacks.
BLOCK_CONFIG = {
    "FOR": {"closer": "NEXT", "stack": "loop", "category": "unmatched-next", "suggestion": "Add matching NEXT"},
    "WHILE": {"closer": "WEND", "stack": "loop", "category": "unmatched-wend", "suggestion": "Add matching WEND"},
    "DO": {"closer": "LOOP", "stack": "loop", "category": "unmatched-loop", "suggestion": "Add matching LOOP"},
    "SUB": {"closer": "END SUB", "stack": "procedure", "category": "unmatched-end-sub", "suggestion": "Add matching END SUB"},
    "FUNCTION": {
        "closer": "END FUNCTION",
        "stack": "procedure",
        "category": "unmatched-end-function",
        "suggestion": "Add matching END FUNCTION",
    },
}
CLOSER_TO_OPENER = {cfg["closer"]: opener for opener, cfg in BLOCK_CONFIG.items()}

UNCLOSED_LOOP_CATEGORY = "unclosed-loop"
UNCLOSED_PROCEDURE_CATEGORY = "unclosed-sub-function"

# --- Validation ---
CHECK_LEVELS = ("basic", "strict", "best-practices")
DEFAULT_CHECK_LEVEL = "basic"

MAX_LINE_LENGTH = 120
LONG_PROGRAM_LINES = 20

# Two and three letter keywords that are still worth a knowledge-base lookup.
SHORT_KEYWORD_ALLOWLIST = {"IF", "DO", "TO", "AS", "OR"}
MAX_KEYWORD_SUGGESTIONS = 5

# --- Scoring ---
SCORE_WEIGHTS = {"error": 10, "warning": 2, "info": 0}
COMMENT_RATIO_THRESHOLD = 0.1
COMMENT_BONUS = 5
MAX_SCORE = 100
MIN_SCORE = 0

# --- Execution mode detection ---
GRAPHICS_KEYWORDS = (
    "SCREEN",
    "CIRCLE",
    "LINE",
    "PSET",
    "POINT",
    "PAINT",
    "PUT",
    "GET",
    "_NEWIMAGE",
    "_PUTIMAGE",
    "_LOADIMAGE",
)

# --- Debugging transformer ---
DEBUG_BLOCK_BEGIN = "' === DEBUG BEGIN: {name} ==="
DEBUG_BLOCK_END = "' === DEBUG END: {name} ==="

FEATURE_NAMES = {
    "console": "Console Management",
    "flow_control": "Flow Control",
    "resource_tracking": "Resource Management",
    "graphics": "Graphics Context Management",
    "logging": "Logging System",
    "screenshots": "Screenshot System",
}

DEFAULT_LOG_DIR = "qb64pe-logs"
DEFAULT_SCREENSHOT_DIR = "qb64pe-screenshots"
DEFAULT_PROBLEM_LOG_DIR = ".qbdev/sessions"

# Lines that stay above the generated test wrapper.
FLOW_HEADER_PREFIXES = ("$", "'", "CONST ", "DIM SHARED", "DEFINT", "OPTION")
