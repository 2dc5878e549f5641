"""
BASIC support blocks injected by the debugging transformer.

Every builder returns a list of lines wrapped in DEBUG BEGIN/END markers so
the transformer can recognise its own output on a later run and never
rewrite it. None of the blocks may mention the console metacommand
literally; the console pass owns that directive.
"""

import re
from typing import List

from ..config.config import DEBUG_BLOCK_BEGIN, DEBUG_BLOCK_END, DEFAULT_LOG_DIR, DEFAULT_SCREENSHOT_DIR, FEATURE_NAMES

DEBUG_MARKER_REGEX = re.compile(r"^\s*' === DEBUG (BEGIN|END): (.+?) ===\s*$")


def begin_marker(feature: str) -> str:
    return DEBUG_BLOCK_BEGIN.format(name=FEATURE_NAMES[feature])


def debug_block(feature: str, body: List[str]) -> List[str]:
    return [begin_marker(feature)] + body + [DEBUG_BLOCK_END.format(name=FEATURE_NAMES[feature])]


def debug_block_mask(lines: List[str]) -> List[bool]:
    """Marks every line that belongs to an injected block, markers included."""
    mask = []
    depth = 0
    for line in lines:
        match = DEBUG_MARKER_REGEX.match(line)
        if match and match.group(1) == "BEGIN":
            depth += 1
            mask.append(True)
        elif match and depth > 0:
            depth -= 1
            mask.append(True)
        else:
            mask.append(depth > 0)
    return mask


def _format_delay(timeout_seconds: int) -> str:
    return f"{timeout_seconds / 10:g}"


def console_block(timeout_seconds: int, auto_exit: bool) -> List[str]:
    exit_wait = (
        [
            "    IF DEBUG_MODE = 1 THEN",
            '        PRINT "Auto-exiting in " + STR$(AUTO_TEST_DELAY) + " seconds..."',
            "        _DELAY AUTO_TEST_DELAY",
            "    ELSE",
            '        PRINT "Press any key to exit..."',
            "        SLEEP",
            "    END IF",
        ]
        if auto_exit
        else ['    PRINT "Press any key to exit..."', "    SLEEP"]
    )
    body = [
        "$IF WIN THEN",
        "_CONSOLE ON",
        "$END IF",
        "",
        "CONST DEBUG_MODE = 1",
        f"CONST AUTO_TEST_DELAY = {_format_delay(timeout_seconds)}",
        "",
        "SUB DebugPause (message AS STRING)",
        "    IF DEBUG_MODE = 1 THEN",
        '        PRINT message + " (auto-continuing in " + STR$(AUTO_TEST_DELAY) + "s...)"',
        "        _DELAY AUTO_TEST_DELAY",
        "    ELSE",
        "        PRINT message",
        "        SLEEP",
        "    END IF",
        "END SUB",
        "",
        "SUB DebugExit (message AS STRING)",
        "    PRINT message",
        *exit_wait,
        "    SYSTEM",
        "END SUB",
    ]
    return debug_block("console", body)


def resource_block() -> List[str]:
    body = [
        "DIM SHARED ResourceManager_FileHandles(100) AS INTEGER",
        "DIM SHARED ResourceManager_ImageHandles(100) AS LONG",
        "DIM SHARED ResourceManager_FileCount AS INTEGER",
        "DIM SHARED ResourceManager_ImageCount AS INTEGER",
        "",
        "SUB ResourceManager_Init",
        "    ResourceManager_FileCount = 0",
        "    ResourceManager_ImageCount = 0",
        "END SUB",
        "",
        "FUNCTION ResourceManager_GetFileHandle%",
        "    DIM handle AS INTEGER",
        "    handle = FREEFILE",
        "    IF ResourceManager_FileCount < 100 THEN",
        "        ResourceManager_FileHandles(ResourceManager_FileCount) = handle",
        "        ResourceManager_FileCount = ResourceManager_FileCount + 1",
        "    END IF",
        "    ResourceManager_GetFileHandle% = handle",
        "END FUNCTION",
        "",
        "SUB ResourceManager_RegisterImage (handle AS LONG)",
        "    IF ResourceManager_ImageCount < 100 THEN",
        "        ResourceManager_ImageHandles(ResourceManager_ImageCount) = handle",
        "        ResourceManager_ImageCount = ResourceManager_ImageCount + 1",
        "    END IF",
        "END SUB",
        "",
        "SUB ResourceManager_Cleanup",
        "    DIM i AS INTEGER",
        "    ' Close any open file handles",
        "    FOR i = 0 TO ResourceManager_FileCount - 1",
        "        IF ResourceManager_FileHandles(i) > 0 THEN",
        "            CLOSE #ResourceManager_FileHandles(i)",
        "        END IF",
        "    NEXT i",
        "    ' Free any image handles",
        "    FOR i = 0 TO ResourceManager_ImageCount - 1",
        "        IF ResourceManager_ImageHandles(i) < -1 THEN",
        "            _FREEIMAGE ResourceManager_ImageHandles(i)",
        "        END IF",
        "    NEXT i",
        '    PRINT "Resource cleanup completed"',
        "END SUB",
        "",
        "CALL ResourceManager_Init",
    ]
    return debug_block("resource_tracking", body)


def graphics_block(register_images: bool) -> List[str]:
    # Image registration needs the resource block to be present.
    register = ["        CALL ResourceManager_RegisterImage(img)"] if register_images else []
    body = [
        "DIM SHARED GraphicsManager_CurrentDest AS LONG",
        "DIM SHARED GraphicsManager_StackPointer AS INTEGER",
        "DIM SHARED GraphicsManager_DestStack(10) AS LONG",
        "",
        "SUB GraphicsManager_Init",
        "    GraphicsManager_CurrentDest = 0",
        "    GraphicsManager_StackPointer = 0",
        "END SUB",
        "",
        "SUB GraphicsManager_PushDest (newDest AS LONG)",
        "    IF GraphicsManager_StackPointer < 10 THEN",
        "        GraphicsManager_DestStack(GraphicsManager_StackPointer) = _DEST",
        "        GraphicsManager_StackPointer = GraphicsManager_StackPointer + 1",
        "    END IF",
        "    GraphicsManager_CurrentDest = newDest",
        "    _DEST newDest",
        "END SUB",
        "",
        "SUB GraphicsManager_PopDest",
        "    IF GraphicsManager_StackPointer > 0 THEN",
        "        GraphicsManager_StackPointer = GraphicsManager_StackPointer - 1",
        "        _DEST GraphicsManager_DestStack(GraphicsManager_StackPointer)",
        "        GraphicsManager_CurrentDest = _DEST",
        "    END IF",
        "END SUB",
        "",
        "FUNCTION GraphicsManager_CreateImage& (width AS INTEGER, height AS INTEGER)",
        "    DIM img AS LONG",
        "    img = _NEWIMAGE(width, height, 32)",
        "    IF img < -1 THEN",
        *register,
        '        PRINT "Created image handle: " + STR$(img) + " (" + STR$(width) + "x" + STR$(height) + ")"',
        "    ELSE",
        '        PRINT "ERROR: Failed to create image (" + STR$(width) + "x" + STR$(height) + ")"',
        "    END IF",
        "    GraphicsManager_CreateImage& = img",
        "END FUNCTION",
        "",
        "SUB GraphicsManager_SafePSET (x AS INTEGER, y AS INTEGER, clr AS LONG)",
        "    IF x >= 0 AND y >= 0 AND x < _WIDTH AND y < _HEIGHT THEN",
        "        PSET (x, y), clr",
        "    END IF",
        "END SUB",
        "",
        "CALL GraphicsManager_Init",
    ]
    return debug_block("graphics", body)


def logging_block(timestamp: str, verbose_output: bool) -> List[str]:
    body = [
        "DIM SHARED LogFile AS STRING",
        "DIM SHARED LogEnabled AS INTEGER",
        "",
        "SUB LogInit",
        f'    LogFile = "{DEFAULT_LOG_DIR}/debug_{timestamp}.log"',
        f"    LogEnabled = {1 if verbose_output else 0}",
        "    IF LogEnabled THEN",
        "        OPEN LogFile FOR OUTPUT AS #98",
        '        PRINT #98, "=== QB64PE DEBUG SESSION STARTED ==="',
        '        PRINT #98, "Date: " + DATE$ + " Time: " + TIME$',
        '        PRINT #98, "Platform: " + _OS$',
        '        PRINT #98, "======================================="',
        "        CLOSE #98",
        "    END IF",
        "END SUB",
        "",
        "SUB LogMessage (category AS STRING, message AS STRING)",
        "    IF LogEnabled THEN",
        "        OPEN LogFile FOR APPEND AS #98",
        '        PRINT #98, TIME$ + " [" + category + "] " + message',
        "        CLOSE #98",
        "    END IF",
        "",
        "    DIM oldDest AS LONG",
        "    oldDest = _DEST",
        "    _DEST _CONSOLE",
        "    SELECT CASE UCASE$(category)",
        '        CASE "ERROR"',
        "            COLOR 12, 0",
        '        CASE "WARNING"',
        "            COLOR 14, 0",
        '        CASE "SUCCESS"',
        "            COLOR 10, 0",
        '        CASE "INFO"',
        "            COLOR 11, 0",
        "        CASE ELSE",
        "            COLOR 7, 0",
        "    END SELECT",
        '    PRINT "[" + category + "] " + message',
        "    COLOR 7, 0",
        "    _DEST oldDest",
        "END SUB",
        "",
        "CALL LogInit",
    ]
    return debug_block("logging", body)


def screenshot_block(timestamp: str, log_screenshots: bool) -> List[str]:
    log_call = ['        CALL LogMessage("SCREENSHOT", "Saved: " + filename + " (" + label + ")")'] if log_screenshots else []
    body = [
        "DIM SHARED ScreenshotCounter AS INTEGER",
        "DIM SHARED ScreenshotBase AS STRING",
        "",
        "SUB ScreenshotInit",
        "    ScreenshotCounter = 0",
        f'    ScreenshotBase = "{DEFAULT_SCREENSHOT_DIR}/debug_{timestamp}"',
        "END SUB",
        "",
        "SUB TakeDebugScreenshot (label AS STRING)",
        "    IF _DEST <> _CONSOLE THEN",
        "        ScreenshotCounter = ScreenshotCounter + 1",
        "        DIM filename AS STRING",
        '        filename = ScreenshotBase + "_" + label + "_" + RIGHT$("000" + LTRIM$(STR$(ScreenshotCounter)), 3) + ".png"',
        "        _SAVEIMAGE filename",
        *log_call,
        "    END IF",
        "END SUB",
        "",
        "SUB AutoScreenshot",
        '    CALL TakeDebugScreenshot("auto")',
        "END SUB",
        "",
        "CALL ScreenshotInit",
    ]
    return debug_block("screenshots", body)
