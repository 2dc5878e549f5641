"""
Knowledge-base entries for legacy QBasic keywords kept for reference.
Most of them are deprecated or unsupported in QB64PE.
"""

KEYWORDS = {
    "GOSUB": {
        "type": "legacy",
        "category": "control_flow",
        "description": "Jumps to a subroutine label and returns with RETURN. Prefer SUB procedures.",
        "syntax": "GOSUB label",
        "related": ["RETURN", "SUB"],
        "version": "QBasic",
        "deprecated": True,
    },
    "DEF": {
        "type": "legacy",
        "category": "procedures",
        "description": "Defines a single-line DEF FN function. Use FUNCTION instead.",
        "syntax": "DEF FNname(parameters) = expression",
        "example": "DEF FN Square(x) = x * x",
        "related": ["FUNCTION"],
        "version": "QBasic",
        "deprecated": True,
    },
    "LET": {
        "type": "legacy",
        "category": "variables",
        "description": "Optional assignment keyword.",
        "syntax": "[LET] variable = expression",
        "version": "QBasic",
        "deprecated": True,
    },
    "REM": {"type": "statement", "category": "comments", "description": "Starts a comment.", "syntax": "REM comment", "version": "QBasic"},
    "TRON": {"type": "legacy", "category": "debugging", "description": "Enabled line tracing in QBasic. Not supported in QB64PE.", "syntax": "TRON", "related": ["TROFF", "$DEBUG"], "version": "QBasic", "deprecated": True, "availability": "None"},
    "TROFF": {"type": "legacy", "category": "debugging", "description": "Disabled line tracing in QBasic. Not supported in QB64PE.", "syntax": "TROFF", "related": ["TRON"], "version": "QBasic", "deprecated": True, "availability": "None"},
    "SETMEM": {"type": "legacy", "category": "memory", "description": "Changed the far heap size in QBasic. Not supported in QB64PE.", "syntax": "SETMEM(bytes)", "version": "QBasic", "deprecated": True, "availability": "None"},
    "FRE": {"type": "legacy", "category": "memory", "description": "Returned free memory in QBasic. Not supported in QB64PE.", "syntax": "FRE(value)", "version": "QBasic", "deprecated": True, "availability": "None"},
    "ERDEV": {"type": "legacy", "category": "devices", "description": "Returned device error codes. Not supported in QB64PE.", "syntax": "ERDEV", "version": "QBasic", "deprecated": True, "availability": "None"},
    "IOCTL": {"type": "legacy", "category": "devices", "description": "Sent control strings to device drivers. Not supported in QB64PE.", "syntax": "IOCTL #n, string$", "version": "QBasic", "deprecated": True, "availability": "None"},
    "FILEATTR": {"type": "legacy", "category": "file_io", "description": "Returned information about an open file. Not supported in QB64PE.", "syntax": "FILEATTR(n, attribute)", "version": "QBasic", "deprecated": True, "availability": "None"},
    "CHAIN": {"type": "legacy", "category": "system", "description": "Transfers control to another program. Limited on Linux and macOS.", "syntax": "CHAIN file$", "related": ["RUN", "SHELL"], "version": "QBasic", "availability": "Windows"},
    "RUN": {"type": "statement", "category": "system", "description": "Restarts the program or runs another one. Limited on Linux and macOS.", "syntax": "RUN [label | file$]", "related": ["CHAIN", "SHELL"], "version": "QBasic", "availability": "Windows"},
    "PEN": {"type": "legacy", "category": "devices", "description": "Light pen support. Not supported in QB64PE.", "syntax": "PEN {ON | OFF | STOP}", "related": ["_MOUSEINPUT"], "version": "QBasic", "deprecated": True, "availability": "None"},
}
