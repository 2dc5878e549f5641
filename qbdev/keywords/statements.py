"""
Knowledge-base entries for core statements, control flow and declarations.
"""

KEYWORDS = {
    # --- Console I/O ---
    "PRINT": {
        "type": "statement",
        "category": "console",
        "description": "Writes text and numeric values to the current output page or console.",
        "syntax": "PRINT [expression][{;|,}expression]...",
        "example": 'PRINT "Hello, world!"',
        "related": ["PRINT USING", "WRITE", "LOCATE", "CLS"],
        "version": "QBasic",
        "tags": ["output", "text"],
    },
    "INPUT": {
        "type": "statement",
        "category": "console",
        "description": "Reads a line of keyboard input into one or more variables.",
        "syntax": 'INPUT ["prompt"{;|,}] variable[, variable]...',
        "example": 'INPUT "Your name"; name$',
        "related": ["LINE INPUT", "INKEY$", "_KEYHIT"],
        "version": "QBasic",
        "tags": ["input", "keyboard"],
    },
    "CLS": {
        "type": "statement",
        "category": "console",
        "description": "Clears the current screen page or viewport.",
        "syntax": "CLS [method][, bgColor]",
        "related": ["SCREEN", "COLOR"],
        "version": "QBasic",
    },
    "LOCATE": {
        "type": "statement",
        "category": "console",
        "description": "Moves the text cursor to a row and column.",
        "syntax": "LOCATE [row][, column][, cursor]",
        "related": ["PRINT", "CSRLIN", "POS"],
        "version": "QBasic",
    },
    "COLOR": {
        "type": "statement",
        "category": "console",
        "description": "Sets the foreground and background colours used for text and graphics.",
        "syntax": "COLOR [foreground][, background]",
        "related": ["_RGB32", "SCREEN"],
        "version": "QBasic",
    },
    "WRITE": {
        "type": "statement",
        "category": "console",
        "description": "Writes comma separated values, quoting strings.",
        "syntax": "WRITE [#fileNumber,] expression[, expression]...",
        "related": ["PRINT", "INPUT"],
        "version": "QBasic",
    },
    "SLEEP": {
        "type": "statement",
        "category": "timing",
        "description": "Pauses the program for a number of seconds or until a key is pressed.",
        "syntax": "SLEEP [seconds]",
        "example": "SLEEP 2",
        "related": ["_DELAY", "_LIMIT", "INKEY$"],
        "version": "QBasic",
        "tags": ["wait", "blocking"],
    },
    "BEEP": {
        "type": "statement",
        "category": "sound",
        "description": "Sounds a short tone through the speaker.",
        "syntax": "BEEP",
        "related": ["SOUND", "PLAY"],
        "version": "QBasic",
    },
    # --- Control Flow ---
    "IF": {
        "type": "statement",
        "category": "control_flow",
        "description": "Executes statements depending on a condition.",
        "syntax": "IF condition THEN statements [ELSE statements]",
        "related": ["THEN", "ELSE", "ELSEIF", "END IF", "SELECT CASE"],
        "version": "QBasic",
    },
    "THEN": {
        "type": "statement",
        "category": "control_flow",
        "description": "Separates the condition of an IF statement from its body.",
        "syntax": "IF condition THEN",
        "related": ["IF", "ELSE"],
        "version": "QBasic",
    },
    "ELSE": {
        "type": "statement",
        "category": "control_flow",
        "description": "Introduces the branch executed when an IF condition is false.",
        "syntax": "ELSE",
        "related": ["IF", "ELSEIF"],
        "version": "QBasic",
    },
    "ELSEIF": {
        "type": "statement",
        "category": "control_flow",
        "description": "Tests an additional condition inside an IF block.",
        "syntax": "ELSEIF condition THEN",
        "related": ["IF", "ELSE"],
        "version": "QBasic",
    },
    "END": {
        "type": "statement",
        "category": "control_flow",
        "description": "Ends the program, or closes an IF, SUB, FUNCTION, SELECT or TYPE block.",
        "syntax": "END [IF | SUB | FUNCTION | SELECT | TYPE]",
        "related": ["SYSTEM", "STOP"],
        "version": "QBasic",
    },
    "SELECT": {
        "type": "statement",
        "category": "control_flow",
        "description": "Opens a SELECT CASE block that branches on the value of an expression.",
        "syntax": "SELECT CASE expression",
        "related": ["CASE", "END"],
        "version": "QBasic",
    },
    "CASE": {
        "type": "statement",
        "category": "control_flow",
        "description": "Defines one branch of a SELECT CASE block.",
        "syntax": "CASE value[, value] | CASE IS comparison | CASE ELSE",
        "related": ["SELECT"],
        "version": "QBasic",
    },
    "FOR": {
        "type": "statement",
        "category": "loops",
        "description": "Starts a counted loop closed by NEXT.",
        "syntax": "FOR counter = start TO stop [STEP increment]",
        "example": "FOR i = 1 TO 10\n    PRINT i\nNEXT i",
        "related": ["NEXT", "TO", "STEP", "EXIT"],
        "version": "QBasic",
        "tags": ["loop"],
    },
    "TO": {
        "type": "statement",
        "category": "loops",
        "description": "Separates the bounds of a FOR loop, array dimension or CASE range.",
        "syntax": "start TO stop",
        "related": ["FOR", "DIM"],
        "version": "QBasic",
    },
    "STEP": {
        "type": "statement",
        "category": "loops",
        "description": "Sets the increment of a FOR loop counter.",
        "syntax": "FOR counter = start TO stop STEP increment",
        "related": ["FOR"],
        "version": "QBasic",
    },
    "NEXT": {
        "type": "statement",
        "category": "loops",
        "description": "Closes a FOR loop and advances its counter.",
        "syntax": "NEXT [counter]",
        "related": ["FOR"],
        "version": "QBasic",
        "tags": ["loop"],
    },
    "WHILE": {
        "type": "statement",
        "category": "loops",
        "description": "Starts a loop that repeats while a condition is true, closed by WEND.",
        "syntax": "WHILE condition",
        "related": ["WEND", "DO"],
        "version": "QBasic",
        "tags": ["loop"],
    },
    "WEND": {
        "type": "statement",
        "category": "loops",
        "description": "Closes a WHILE loop.",
        "syntax": "WEND",
        "related": ["WHILE"],
        "version": "QBasic",
        "tags": ["loop"],
    },
    "DO": {
        "type": "statement",
        "category": "loops",
        "description": "Starts a loop closed by LOOP, optionally with a WHILE or UNTIL condition.",
        "syntax": "DO [{WHILE | UNTIL} condition]",
        "related": ["LOOP", "WHILE", "UNTIL", "EXIT"],
        "version": "QBasic",
        "tags": ["loop"],
    },
    "LOOP": {
        "type": "statement",
        "category": "loops",
        "description": "Closes a DO loop, optionally with a WHILE or UNTIL condition.",
        "syntax": "LOOP [{WHILE | UNTIL} condition]",
        "related": ["DO"],
        "version": "QBasic",
        "tags": ["loop"],
    },
    "UNTIL": {
        "type": "statement",
        "category": "loops",
        "description": "Repeats a DO loop until a condition becomes true.",
        "syntax": "DO UNTIL condition | LOOP UNTIL condition",
        "related": ["DO", "LOOP", "WHILE"],
        "version": "QBasic",
    },
    "EXIT": {
        "type": "statement",
        "category": "control_flow",
        "description": "Leaves a FOR, DO, WHILE, SUB or FUNCTION block early.",
        "syntax": "EXIT {FOR | DO | WHILE | SUB | FUNCTION}",
        "related": ["FOR", "DO", "SUB", "FUNCTION"],
        "version": "QBasic",
    },
    "GOTO": {
        "type": "statement",
        "category": "control_flow",
        "description": "Jumps unconditionally to a line label or number.",
        "syntax": "GOTO label",
        "related": ["GOSUB", "ON"],
        "version": "QBasic",
    },
    "RETURN": {
        "type": "statement",
        "category": "control_flow",
        "description": "Returns from a GOSUB subroutine.",
        "syntax": "RETURN [label]",
        "related": ["GOSUB"],
        "version": "QBasic",
    },
    "SYSTEM": {
        "type": "statement",
        "category": "control_flow",
        "description": "Ends the program immediately and closes its window.",
        "syntax": "SYSTEM [exitCode]",
        "related": ["END", "_DELAY"],
        "version": "QBasic",
        "tags": ["exit"],
    },
    "STOP": {
        "type": "statement",
        "category": "control_flow",
        "description": "Halts the program.",
        "syntax": "STOP",
        "related": ["END", "SYSTEM"],
        "version": "QBasic",
    },
    "ON": {
        "type": "statement",
        "category": "control_flow",
        "description": "Introduces event trapping or computed jumps (ON ERROR, ON TIMER, ON n GOTO).",
        "syntax": "ON {ERROR | TIMER(n) | expression} ...",
        "related": ["ERROR", "RESUME", "GOTO"],
        "version": "QBasic",
    },
    "ERROR": {
        "type": "statement",
        "category": "error_handling",
        "description": "Raises a runtime error, or names the error trap in ON ERROR.",
        "syntax": "ERROR code | ON ERROR GOTO label",
        "related": ["ON", "RESUME", "ERR"],
        "version": "QBasic",
    },
    "RESUME": {
        "type": "statement",
        "category": "error_handling",
        "description": "Continues execution after an error trap.",
        "syntax": "RESUME [NEXT | label]",
        "related": ["ON", "ERROR"],
        "version": "QBasic",
    },
    # --- Procedures ---
    "SUB": {
        "type": "statement",
        "category": "procedures",
        "description": "Defines a procedure that does not return a value, closed by END SUB.",
        "syntax": "SUB name [(parameters)]",
        "example": "SUB Greet (who AS STRING)\n    PRINT \"Hi \"; who\nEND SUB",
        "related": ["FUNCTION", "CALL", "END"],
        "version": "QBasic",
    },
    "FUNCTION": {
        "type": "statement",
        "category": "procedures",
        "description": "Defines a procedure returning a value, typed by its name sigil, closed by END FUNCTION.",
        "syntax": "FUNCTION name[sigil] [(parameters)]",
        "example": "FUNCTION Square% (x AS INTEGER)\n    Square% = x * x\nEND FUNCTION",
        "related": ["SUB", "END"],
        "version": "QBasic",
    },
    "CALL": {
        "type": "statement",
        "category": "procedures",
        "description": "Invokes a SUB procedure.",
        "syntax": "CALL name[(arguments)]",
        "related": ["SUB"],
        "version": "QBasic",
    },
    "DECLARE": {
        "type": "statement",
        "category": "procedures",
        "description": "Declares a procedure. Only needed in QB64PE for DECLARE LIBRARY blocks.",
        "syntax": "DECLARE LIBRARY [\"header\"]",
        "related": ["SUB", "FUNCTION"],
        "version": "QBasic",
    },
    # --- Declarations ---
    "DIM": {
        "type": "statement",
        "category": "variables",
        "description": "Declares variables and arrays with an explicit type.",
        "syntax": "DIM [SHARED] name[(bounds)] AS type",
        "example": "DIM SHARED score AS LONG",
        "related": ["REDIM", "SHARED", "AS", "CONST"],
        "version": "QBasic",
    },
    "REDIM": {
        "type": "statement",
        "category": "variables",
        "description": "Resizes a dynamic array.",
        "syntax": "REDIM [_PRESERVE] [SHARED] name(bounds) AS type",
        "related": ["DIM", "$DYNAMIC"],
        "version": "QBasic",
    },
    "SHARED": {
        "type": "statement",
        "category": "variables",
        "description": "Makes a DIM variable visible to every SUB and FUNCTION.",
        "syntax": "DIM SHARED name AS type",
        "related": ["DIM"],
        "version": "QBasic",
    },
    "AS": {
        "type": "statement",
        "category": "variables",
        "description": "Introduces the type of a declaration or the handle number of OPEN.",
        "syntax": "name AS type",
        "related": ["DIM", "OPEN"],
        "version": "QBasic",
    },
    "CONST": {
        "type": "statement",
        "category": "variables",
        "description": "Defines a named constant.",
        "syntax": "CONST name = value",
        "related": ["DIM"],
        "version": "QBasic",
    },
    "TYPE": {
        "type": "statement",
        "category": "variables",
        "description": "Defines a user-defined record type, closed by END TYPE.",
        "syntax": "TYPE name",
        "related": ["DIM", "END"],
        "version": "QBasic",
    },
    "OPTION": {
        "type": "statement",
        "category": "variables",
        "description": "Sets compiler options such as OPTION BASE or OPTION _EXPLICIT.",
        "syntax": "OPTION {BASE n | _EXPLICIT}",
        "related": ["DIM"],
        "version": "QBasic",
    },
    "DEFINT": {
        "type": "statement",
        "category": "variables",
        "description": "Sets INTEGER as the default type for variables starting with the given letters.",
        "syntax": "DEFINT letterRange",
        "related": ["DIM"],
        "version": "QBasic",
    },
    "DATA": {
        "type": "statement",
        "category": "variables",
        "description": "Stores constant values read by READ.",
        "syntax": "DATA value[, value]...",
        "related": ["READ", "RESTORE"],
        "version": "QBasic",
    },
    "READ": {
        "type": "statement",
        "category": "variables",
        "description": "Reads the next values from DATA statements.",
        "syntax": "READ variable[, variable]...",
        "related": ["DATA", "RESTORE"],
        "version": "QBasic",
    },
    "RESTORE": {
        "type": "statement",
        "category": "variables",
        "description": "Resets the DATA pointer.",
        "syntax": "RESTORE [label]",
        "related": ["DATA", "READ"],
        "version": "QBasic",
    },
    "RANDOMIZE": {
        "type": "statement",
        "category": "math",
        "description": "Seeds the random number generator.",
        "syntax": "RANDOMIZE [USING] seed",
        "related": ["RND", "TIMER"],
        "version": "QBasic",
    },
    # --- Types ---
    "INTEGER": {"type": "type", "category": "types", "description": "16-bit signed integer type (sigil %).", "syntax": "AS INTEGER", "version": "QBasic"},
    "LONG": {"type": "type", "category": "types", "description": "32-bit signed integer type (sigil &).", "syntax": "AS LONG", "version": "QBasic"},
    "SINGLE": {"type": "type", "category": "types", "description": "Single precision floating point type (sigil !).", "syntax": "AS SINGLE", "version": "QBasic"},
    "DOUBLE": {"type": "type", "category": "types", "description": "Double precision floating point type (sigil #).", "syntax": "AS DOUBLE", "version": "QBasic"},
    "STRING": {"type": "type", "category": "types", "description": "Variable or fixed length text type (sigil $).", "syntax": "AS STRING [* length]", "version": "QBasic"},
    "_INTEGER64": {"type": "type", "category": "types", "description": "64-bit signed integer type (sigil &&).", "syntax": "AS _INTEGER64", "version": "QB64"},
    "_UNSIGNED": {"type": "type", "category": "types", "description": "Makes an integer type unsigned.", "syntax": "AS _UNSIGNED LONG", "version": "QB64"},
    "_BYTE": {"type": "type", "category": "types", "description": "8-bit signed integer type (sigil %%).", "syntax": "AS _BYTE", "version": "QB64"},
    "_FLOAT": {"type": "type", "category": "types", "description": "Extended precision floating point type (sigil ##).", "syntax": "AS _FLOAT", "version": "QB64"},
    # --- Operators ---
    "AND": {"type": "operator", "category": "logic", "description": "Bitwise and logical conjunction.", "syntax": "a AND b", "related": ["OR", "NOT", "XOR"], "version": "QBasic"},
    "OR": {"type": "operator", "category": "logic", "description": "Bitwise and logical disjunction.", "syntax": "a OR b", "related": ["AND", "NOT", "XOR"], "version": "QBasic"},
    "NOT": {"type": "operator", "category": "logic", "description": "Bitwise and logical negation.", "syntax": "NOT a", "related": ["AND", "OR"], "version": "QBasic"},
    "XOR": {"type": "operator", "category": "logic", "description": "Bitwise exclusive or.", "syntax": "a XOR b", "related": ["AND", "OR"], "version": "QBasic"},
    "MOD": {"type": "operator", "category": "math", "description": "Integer remainder of a division.", "syntax": "a MOD b", "version": "QBasic"},
    "USING": {"type": "statement", "category": "console", "description": "Formats output of PRINT USING with a template string.", "syntax": "PRINT USING template$; values", "related": ["PRINT"], "version": "QBasic"},
    "LPRINT": {"type": "statement", "category": "console", "description": "Sends text to the printer.", "syntax": "LPRINT [expression]", "related": ["PRINT", "_PRINTIMAGE"], "version": "QBasic"},
    "BASE": {"type": "statement", "category": "variables", "description": "Sets the default lower array bound in OPTION BASE.", "syntax": "OPTION BASE {0 | 1}", "related": ["OPTION", "DIM"], "version": "QBasic"},
    "LIBRARY": {"type": "statement", "category": "procedures", "description": "Declares external C or dynamic library procedures in a DECLARE LIBRARY block.", "syntax": "DECLARE LIBRARY [\"header\"]", "related": ["DECLARE"], "version": "QB64"},
    "_PRESERVE": {"type": "statement", "category": "variables", "description": "Keeps existing array contents when resizing with REDIM.", "syntax": "REDIM _PRESERVE name(bounds)", "related": ["REDIM"], "version": "QB64"},
    "IS": {"type": "operator", "category": "control_flow", "description": "Comparison form used in CASE IS.", "syntax": "CASE IS > value", "related": ["CASE"], "version": "QBasic"},
    # --- Constants ---
    "_TRUE": {"type": "constant", "category": "logic", "description": "Boolean true constant (-1).", "syntax": "_TRUE", "related": ["_FALSE"], "version": "QB64PE"},
    "_FALSE": {"type": "constant", "category": "logic", "description": "Boolean false constant (0).", "syntax": "_FALSE", "related": ["_TRUE"], "version": "QB64PE"},
}
