"""
Knowledge-base entries for built-in functions and file I/O.
"""

KEYWORDS = {
    # --- Strings ---
    "LEN": {
        "type": "function",
        "category": "strings",
        "description": "Returns the number of characters in a string or bytes in a variable.",
        "syntax": "length& = LEN(value)",
        "parameters": [{"name": "value", "type": "any", "description": "String or variable to measure."}],
        "returns": "LONG",
        "related": ["LEFT$", "MID$"],
        "version": "QBasic",
    },
    "LEFT$": {
        "type": "function",
        "category": "strings",
        "description": "Returns the leftmost characters of a string.",
        "syntax": "part$ = LEFT$(text$, count%)",
        "parameters": [{"name": "text$", "type": "STRING"}, {"name": "count%", "type": "INTEGER"}],
        "returns": "STRING",
        "related": ["RIGHT$", "MID$", "INSTR"],
        "version": "QBasic",
    },
    "RIGHT$": {
        "type": "function",
        "category": "strings",
        "description": "Returns the rightmost characters of a string.",
        "syntax": "part$ = RIGHT$(text$, count%)",
        "returns": "STRING",
        "related": ["LEFT$", "MID$"],
        "version": "QBasic",
    },
    "MID$": {
        "type": "function",
        "category": "strings",
        "description": "Returns or replaces a portion of a string.",
        "syntax": "part$ = MID$(text$, start%[, length%])",
        "returns": "STRING",
        "related": ["LEFT$", "RIGHT$", "INSTR"],
        "version": "QBasic",
    },
    "INSTR": {
        "type": "function",
        "category": "strings",
        "description": "Returns the position of a substring, or 0 when it is absent.",
        "syntax": "position% = INSTR([start%,] text$, search$)",
        "returns": "LONG",
        "related": ["MID$", "_INSTRREV"],
        "version": "QBasic",
    },
    "LTRIM$": {
        "type": "function",
        "category": "strings",
        "description": "Removes leading spaces from a string.",
        "syntax": "result$ = LTRIM$(text$)",
        "returns": "STRING",
        "related": ["RTRIM$", "_TRIM$"],
        "version": "QBasic",
    },
    "RTRIM$": {
        "type": "function",
        "category": "strings",
        "description": "Removes trailing spaces from a string.",
        "syntax": "result$ = RTRIM$(text$)",
        "returns": "STRING",
        "related": ["LTRIM$"],
        "version": "QBasic",
    },
    "UCASE$": {"type": "function", "category": "strings", "description": "Converts a string to uppercase.", "syntax": "result$ = UCASE$(text$)", "returns": "STRING", "related": ["LCASE$"], "version": "QBasic"},
    "LCASE$": {"type": "function", "category": "strings", "description": "Converts a string to lowercase.", "syntax": "result$ = LCASE$(text$)", "returns": "STRING", "related": ["UCASE$"], "version": "QBasic"},
    "CHR$": {"type": "function", "category": "strings", "description": "Returns the character for an ASCII code.", "syntax": "char$ = CHR$(code%)", "returns": "STRING", "related": ["ASC"], "version": "QBasic"},
    "ASC": {"type": "function", "category": "strings", "description": "Returns the ASCII code of a character.", "syntax": "code% = ASC(text$[, position%])", "returns": "INTEGER", "related": ["CHR$"], "version": "QBasic"},
    "STR$": {"type": "function", "category": "strings", "description": "Converts a number to its string form.", "syntax": "text$ = STR$(number)", "returns": "STRING", "related": ["VAL"], "version": "QBasic"},
    "VAL": {"type": "function", "category": "strings", "description": "Converts a string to a number.", "syntax": "number = VAL(text$)", "returns": "DOUBLE", "related": ["STR$"], "version": "QBasic"},
    "SPACE$": {"type": "function", "category": "strings", "description": "Returns a string of spaces.", "syntax": "text$ = SPACE$(count%)", "returns": "STRING", "related": ["STRING$"], "version": "QBasic"},
    "STRING$": {"type": "function", "category": "strings", "description": "Returns a string of repeated characters.", "syntax": "text$ = STRING$(count%, char)", "returns": "STRING", "related": ["SPACE$"], "version": "QBasic"},
    "INKEY$": {
        "type": "function",
        "category": "input",
        "description": "Returns the next key in the keyboard buffer without waiting.",
        "syntax": "key$ = INKEY$",
        "returns": "STRING",
        "related": ["INPUT", "_KEYHIT", "SLEEP"],
        "version": "QBasic",
    },
    "DATE$": {"type": "function", "category": "time", "description": "Returns the current date as mm-dd-yyyy.", "syntax": "today$ = DATE$", "returns": "STRING", "related": ["TIME$", "TIMER"], "version": "QBasic"},
    "TIME$": {"type": "function", "category": "time", "description": "Returns the current time as hh:mm:ss.", "syntax": "now$ = TIME$", "returns": "STRING", "related": ["DATE$", "TIMER"], "version": "QBasic"},
    "TIMER": {"type": "function", "category": "time", "description": "Returns the seconds elapsed since midnight.", "syntax": "seconds! = TIMER", "returns": "SINGLE", "related": ["TIME$", "_DELAY"], "version": "QBasic"},
    # --- Math ---
    "ABS": {"type": "function", "category": "math", "description": "Returns the absolute value of a number.", "syntax": "result = ABS(number)", "related": ["SGN"], "version": "QBasic"},
    "SGN": {"type": "function", "category": "math", "description": "Returns the sign of a number (-1, 0 or 1).", "syntax": "result% = SGN(number)", "related": ["ABS"], "version": "QBasic"},
    "INT": {"type": "function", "category": "math", "description": "Rounds a number down to the nearest integer.", "syntax": "result = INT(number)", "related": ["FIX", "CINT"], "version": "QBasic"},
    "FIX": {"type": "function", "category": "math", "description": "Truncates the fractional part of a number.", "syntax": "result = FIX(number)", "related": ["INT"], "version": "QBasic"},
    "CINT": {"type": "function", "category": "math", "description": "Rounds a number to the nearest INTEGER.", "syntax": "result% = CINT(number)", "related": ["INT", "CLNG"], "version": "QBasic"},
    "CLNG": {"type": "function", "category": "math", "description": "Rounds a number to the nearest LONG.", "syntax": "result& = CLNG(number)", "related": ["CINT"], "version": "QBasic"},
    "SQR": {"type": "function", "category": "math", "description": "Returns the square root of a number.", "syntax": "root = SQR(number)", "version": "QBasic"},
    "SIN": {"type": "function", "category": "math", "description": "Returns the sine of an angle in radians.", "syntax": "value = SIN(radians)", "related": ["COS", "TAN"], "version": "QBasic"},
    "COS": {"type": "function", "category": "math", "description": "Returns the cosine of an angle in radians.", "syntax": "value = COS(radians)", "related": ["SIN", "TAN"], "version": "QBasic"},
    "TAN": {"type": "function", "category": "math", "description": "Returns the tangent of an angle in radians.", "syntax": "value = TAN(radians)", "related": ["SIN", "COS", "ATN"], "version": "QBasic"},
    "ATN": {"type": "function", "category": "math", "description": "Returns the arctangent of a number in radians.", "syntax": "radians = ATN(number)", "related": ["TAN", "_ATAN2"], "version": "QBasic"},
    "RND": {"type": "function", "category": "math", "description": "Returns a random number between 0 and 1.", "syntax": "value! = RND", "related": ["RANDOMIZE"], "version": "QBasic"},
    "_ATAN2": {"type": "function", "category": "math", "description": "Returns the angle of a vector (y, x) in radians.", "syntax": "radians = _ATAN2(y, x)", "related": ["ATN"], "version": "QB64"},
    "_PI": {"type": "function", "category": "math", "description": "Returns pi, optionally multiplied by a value.", "syntax": "value# = _PI[(multiplier)]", "version": "QB64"},
    "_ROUND": {"type": "function", "category": "math", "description": "Rounds a number to the nearest integer.", "syntax": "result = _ROUND(number)", "related": ["CINT"], "version": "QB64"},
    "_INSTRREV": {"type": "function", "category": "strings", "description": "Returns the position of the last occurrence of a substring.", "syntax": "position = _INSTRREV([start,] text$, search$)", "related": ["INSTR"], "version": "QB64"},
    # --- File I/O ---
    "OPEN": {
        "type": "statement",
        "category": "file_io",
        "description": "Opens a file or device for input, output, append, binary or random access.",
        "syntax": 'OPEN file$ FOR {INPUT | OUTPUT | APPEND | BINARY | RANDOM} AS #fileNumber',
        "example": 'f = FREEFILE\nOPEN "data.txt" FOR OUTPUT AS #f',
        "related": ["CLOSE", "FREEFILE", "PRINT", "INPUT"],
        "version": "QBasic",
        "tags": ["file"],
    },
    "CLOSE": {
        "type": "statement",
        "category": "file_io",
        "description": "Closes one or all open files.",
        "syntax": "CLOSE [#fileNumber[, #fileNumber]...]",
        "related": ["OPEN", "FREEFILE"],
        "version": "QBasic",
        "tags": ["file"],
    },
    "FREEFILE": {
        "type": "function",
        "category": "file_io",
        "description": "Returns the next unused file handle number.",
        "syntax": "fileNumber% = FREEFILE",
        "returns": "INTEGER",
        "related": ["OPEN", "CLOSE"],
        "version": "QBasic",
        "tags": ["file", "handle"],
    },
    "EOF": {"type": "function", "category": "file_io", "description": "Returns true at the end of an open file.", "syntax": "atEnd% = EOF(fileNumber)", "related": ["OPEN", "LOF"], "version": "QBasic"},
    "LOF": {"type": "function", "category": "file_io", "description": "Returns the length of an open file in bytes.", "syntax": "bytes& = LOF(fileNumber)", "related": ["EOF"], "version": "QBasic"},
    "OUTPUT": {"type": "statement", "category": "file_io", "description": "OPEN mode that creates or truncates a file for writing.", "syntax": "OPEN file$ FOR OUTPUT AS #n", "related": ["OPEN", "APPEND"], "version": "QBasic"},
    "APPEND": {"type": "statement", "category": "file_io", "description": "OPEN mode that writes to the end of a file.", "syntax": "OPEN file$ FOR APPEND AS #n", "related": ["OPEN", "OUTPUT"], "version": "QBasic"},
    "BINARY": {"type": "statement", "category": "file_io", "description": "OPEN mode for byte level access.", "syntax": "OPEN file$ FOR BINARY AS #n", "related": ["OPEN", "GET", "PUT"], "version": "QBasic"},
    "RANDOM": {"type": "statement", "category": "file_io", "description": "OPEN mode for fixed length records.", "syntax": "OPEN file$ FOR RANDOM AS #n LEN = size", "related": ["OPEN"], "version": "QBasic"},
    "KILL": {"type": "statement", "category": "file_io", "description": "Deletes a file.", "syntax": "KILL file$", "related": ["_FILEEXISTS"], "version": "QBasic"},
    "SHELL": {"type": "statement", "category": "system", "description": "Runs an operating system command.", "syntax": "SHELL [_HIDE] [_DONTWAIT] command$", "related": ["CHAIN", "RUN"], "version": "QBasic"},
    "_FILEEXISTS": {"type": "function", "category": "file_io", "description": "Returns true when a file exists.", "syntax": "exists% = _FILEEXISTS(file$)", "related": ["_DIREXISTS", "OPEN"], "version": "QB64"},
    "_DIREXISTS": {"type": "function", "category": "file_io", "description": "Returns true when a directory exists.", "syntax": "exists% = _DIREXISTS(path$)", "related": ["_FILEEXISTS", "MKDIR"], "version": "QB64"},
    "MKDIR": {"type": "statement", "category": "file_io", "description": "Creates a directory.", "syntax": "MKDIR path$", "related": ["_DIREXISTS"], "version": "QBasic"},
    # --- QB64 Runtime ---
    "_DELAY": {
        "type": "statement",
        "category": "timing",
        "description": "Pauses the program for a number of seconds without waiting for a key.",
        "syntax": "_DELAY seconds!",
        "example": "_DELAY 0.5",
        "related": ["SLEEP", "_LIMIT"],
        "version": "QB64",
        "tags": ["wait"],
    },
    "_LIMIT": {"type": "statement", "category": "timing", "description": "Limits a loop to a number of iterations per second.", "syntax": "_LIMIT framesPerSecond!", "related": ["_DELAY"], "version": "QB64"},
    "_KEYHIT": {"type": "function", "category": "input", "description": "Returns the code of the key being pressed or released.", "syntax": "code& = _KEYHIT", "related": ["INKEY$", "_KEYDOWN"], "version": "QB64"},
    "_KEYDOWN": {"type": "function", "category": "input", "description": "Returns true while a key is held down.", "syntax": "held% = _KEYDOWN(code&)", "related": ["_KEYHIT"], "version": "QB64"},
    "_MOUSEINPUT": {"type": "function", "category": "input", "description": "Reads the next mouse event, returning true while events remain.", "syntax": "DO WHILE _MOUSEINPUT: LOOP", "related": ["_MOUSEX", "_MOUSEY", "_MOUSEBUTTON"], "version": "QB64"},
    "_MOUSEX": {"type": "function", "category": "input", "description": "Returns the mouse column or pixel x position.", "syntax": "x% = _MOUSEX", "related": ["_MOUSEINPUT", "_MOUSEY"], "version": "QB64"},
    "_MOUSEY": {"type": "function", "category": "input", "description": "Returns the mouse row or pixel y position.", "syntax": "y% = _MOUSEY", "related": ["_MOUSEINPUT", "_MOUSEX"], "version": "QB64"},
    "_MOUSEBUTTON": {"type": "function", "category": "input", "description": "Returns true while a mouse button is pressed.", "syntax": "pressed% = _MOUSEBUTTON(button%)", "related": ["_MOUSEINPUT"], "version": "QB64"},
    "_OS$": {"type": "function", "category": "system", "description": "Returns the operating system and architecture the program was compiled for.", "syntax": "os$ = _OS$", "version": "QB64"},
    "_TITLE": {"type": "statement", "category": "window", "description": "Sets the program window title.", "syntax": "_TITLE text$", "related": ["_CONSOLETITLE"], "version": "QB64"},
    "_CONSOLE": {
        "type": "statement",
        "category": "console",
        "description": "Shows or hides the console window at runtime.",
        "syntax": "_CONSOLE {ON | OFF}",
        "related": ["$CONSOLE", "_DEST"],
        "version": "QB64",
        "tags": ["console"],
    },
    "_ECHO": {"type": "statement", "category": "console", "description": "Prints text to the console window from a graphics program.", "syntax": "_ECHO text$", "related": ["$CONSOLE", "_CONSOLE"], "version": "QB64PE"},
    "_CONSOLETITLE": {"type": "statement", "category": "console", "description": "Sets the console window title.", "syntax": "_CONSOLETITLE text$", "related": ["_TITLE"], "version": "QB64", "availability": "Windows"},
    "_SCREENPRINT": {"type": "statement", "category": "window", "description": "Simulates keyboard input into the active window.", "syntax": "_SCREENPRINT text$", "version": "QB64", "availability": "Windows"},
    "_ACCEPTFILEDROP": {"type": "statement", "category": "window", "description": "Enables files to be dropped onto the program window.", "syntax": "_ACCEPTFILEDROP [{ON | OFF}]", "related": ["_TOTALDROPPEDFILES"], "version": "QB64", "availability": "Windows"},
    "_TOTALDROPPEDFILES": {"type": "function", "category": "window", "description": "Returns the number of files dropped onto the window.", "syntax": "count& = _TOTALDROPPEDFILES", "related": ["_ACCEPTFILEDROP"], "version": "QB64", "availability": "Windows"},
}
