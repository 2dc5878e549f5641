"""
Knowledge-base entries for metacommands (compiler directives starting with `$`).
"""

KEYWORDS = {
    "$CONSOLE": {
        "type": "metacommand",
        "category": "console",
        "description": "Creates a console window for the program. $CONSOLE:ONLY hides the graphics window.",
        "syntax": "$CONSOLE[:ONLY]",
        "example": "$CONSOLE\n_DEST _CONSOLE\nPRINT \"Visible in the console\"",
        "related": ["_CONSOLE", "_DEST", "$SCREENHIDE"],
        "version": "QB64",
        "tags": ["console", "directive"],
    },
    "$DYNAMIC": {
        "type": "metacommand",
        "category": "arrays",
        "description": "Makes following arrays dynamic so they can be resized with REDIM.",
        "syntax": "'$DYNAMIC",
        "related": ["$STATIC", "REDIM"],
        "version": "QBasic",
    },
    "$STATIC": {
        "type": "metacommand",
        "category": "arrays",
        "description": "Makes following arrays static.",
        "syntax": "'$STATIC",
        "related": ["$DYNAMIC"],
        "version": "QBasic",
    },
    "$INCLUDE": {
        "type": "metacommand",
        "category": "modules",
        "description": "Inserts the contents of another source file.",
        "syntax": "'$INCLUDE: 'file.bi'",
        "version": "QBasic",
    },
    "$IF": {
        "type": "metacommand",
        "category": "preprocessor",
        "description": "Starts a conditional compilation block.",
        "syntax": "$IF condition THEN",
        "related": ["$ELSE", "$END"],
        "version": "QB64",
    },
    "$ELSE": {"type": "metacommand", "category": "preprocessor", "description": "Alternative branch of a $IF block.", "syntax": "$ELSE", "related": ["$IF"], "version": "QB64"},
    "$END": {"type": "metacommand", "category": "preprocessor", "description": "Closes a $IF block.", "syntax": "$END IF", "related": ["$IF"], "version": "QB64"},
    "$LET": {"type": "metacommand", "category": "preprocessor", "description": "Defines a preprocessor variable.", "syntax": "$LET name = value", "related": ["$IF"], "version": "QB64"},
    "$SCREENHIDE": {"type": "metacommand", "category": "window", "description": "Starts the program with its window hidden.", "syntax": "$SCREENHIDE", "related": ["$SCREENSHOW", "$CONSOLE"], "version": "QB64"},
    "$SCREENSHOW": {"type": "metacommand", "category": "window", "description": "Shows the program window.", "syntax": "$SCREENSHOW", "related": ["$SCREENHIDE"], "version": "QB64"},
    "$RESIZE": {"type": "metacommand", "category": "window", "description": "Controls whether the user can resize the program window.", "syntax": "$RESIZE:{ON | OFF | STRETCH | SMOOTH}", "version": "QB64"},
    "$NOPREFIX": {"type": "metacommand", "category": "compatibility", "description": "Allows QB64 keywords to be used without the leading underscore.", "syntax": "$NOPREFIX", "version": "QB64"},
    "$EXEICON": {"type": "metacommand", "category": "build", "description": "Embeds an icon in the compiled executable.", "syntax": "$EXEICON:'icon.ico'", "version": "QB64", "availability": "Windows"},
    "$VERSIONINFO": {"type": "metacommand", "category": "build", "description": "Embeds version information in the compiled executable.", "syntax": "$VERSIONINFO:key=value", "version": "QB64", "availability": "Windows"},
    "$CHECKING": {"type": "metacommand", "category": "build", "description": "Enables or disables runtime error checking.", "syntax": "$CHECKING:{ON | OFF}", "version": "QB64"},
    "$DEBUG": {"type": "metacommand", "category": "build", "description": "Enables the integrated debugger for the program.", "syntax": "$DEBUG", "version": "QB64PE"},
    "$COLOR": {"type": "metacommand", "category": "graphics", "description": "Adds named colour constants to the program.", "syntax": "$COLOR:{0 | 32}", "related": ["_RGB32", "COLOR"], "version": "QB64PE"},
    "$EMBED": {"type": "metacommand", "category": "build", "description": "Embeds a file in the executable for use with _EMBEDDED$.", "syntax": "$EMBED:'file','handle'", "version": "QB64PE"},
    "$UNSTABLE": {"type": "metacommand", "category": "build", "description": "Enables unstable language features.", "syntax": "$UNSTABLE:feature", "version": "QB64PE"},
}
