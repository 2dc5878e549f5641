import pytest
from textwrap import dedent

from qbdev.config.config import FEATURE_NAMES
from qbdev.core.classes import DebugModeConfig, ExecutionMode
from qbdev.debugging import scaffolds
from qbdev.debugging.transformer import (
    CodeTransformer,
    console_pass,
    flow_control_pass,
    graphics_pass,
    logging_pass,
    resource_tracking_pass,
    screenshot_pass,
    transform_code,
)


def only(**options) -> DebugModeConfig:
    """A config with every feature switched off except the ones given."""
    flags = {
        "enable_console": False,
        "enable_logging": False,
        "enable_screenshots": False,
        "enable_flow_control": False,
        "enable_resource_tracking": False,
    }
    flags.update(options)
    return DebugModeConfig(**flags)


def outside_blocks(code: str):
    """The lines of a rewritten program that are not part of an injected block."""
    lines = code.splitlines()
    return [line for line, inside in zip(lines, scaffolds.debug_block_mask(lines)) if not inside]


# --- 1. Console pass ---


def test_console_pass_adds_directive_and_block():
    code, changes = console_pass("PRINT 1", DebugModeConfig())
    lines = code.splitlines()
    assert lines[0] == "$CONSOLE"
    assert lines[1] == scaffolds.begin_marker("console")
    assert outside_blocks(code) == ["$CONSOLE", "", "PRINT 1"]
    assert changes == ["Added $CONSOLE directive for console visibility", "Injected console management system"]


def test_console_off_is_normalized_not_duplicated():
    code, changes = console_pass("$CONSOLE:OFF\nPRINT 1", DebugModeConfig())
    assert [line for line in code.splitlines() if line.strip() == "$CONSOLE"] == ["$CONSOLE"]
    assert "$CONSOLE:OFF" not in code
    assert changes[0] == "Normalized $CONSOLE:OFF to $CONSOLE"
    assert "Added $CONSOLE directive for console visibility" not in changes


def test_blocking_prompt_becomes_a_pause():
    code, changes = console_pass('PRINT "Press any key to continue"\n\nSLEEP\nPRINT 2', DebugModeConfig())
    assert outside_blocks(code) == ["$CONSOLE", "", 'CALL DebugPause("Press any key to continue...")', "PRINT 2"]
    assert "Replaced blocking SLEEP statements with conditional pauses" in changes


def test_bare_end_becomes_debug_exit():
    source = "PRINT 1\nIF done THEN\n    END\nEND IF\nEND"
    code, changes = console_pass(source, DebugModeConfig())
    assert outside_blocks(code)[2:] == [
        "PRINT 1",
        "IF done THEN",
        '    CALL DebugExit("Program completed")',
        "END IF",
        'CALL DebugExit("Program completed")',
    ]
    assert "Replaced END statements with explicit debugging exit" in changes

    code, changes = console_pass(source, DebugModeConfig(auto_exit=False))
    assert outside_blocks(code)[-1] == "END"
    assert "Replaced END statements with explicit debugging exit" not in changes


@pytest.mark.parametrize("timeout, delay", [(30, "3"), (5, "0.5"), (45, "4.5")])
def test_pause_lasts_a_tenth_of_the_timeout(timeout, delay):
    assert f"CONST AUTO_TEST_DELAY = {delay}" in scaffolds.console_block(timeout, True)


# --- 2. Flow control pass ---


def test_main_code_is_wrapped():
    source = dedent(
        """
        $CONSOLE
        CONST N = 3
        PRINT N
        SUB Helper
            PRINT 2
        END SUB
        """
    ).strip("\n")
    expected = dedent(
        """
        $CONSOLE
        CONST N = 3
        CALL AutoTestWrapper

        SUB AutoTestWrapper
            PRINT "Starting automated test session..."
            CALL OriginalMainProgram
            PRINT "Test session completed successfully"
            SYSTEM
        END SUB

        SUB OriginalMainProgram
            PRINT N
        END SUB

        SUB Helper
            PRINT 2
        END SUB
        """
    ).strip("\n")
    code, changes = flow_control_pass(source, only(enable_flow_control=True))
    assert code == expected
    assert changes == ["Wrapped main execution in automated test framework", "Added timeout and flow control management"]


def test_wrapper_uses_console_helpers_when_present():
    config = DebugModeConfig()
    code, _ = console_pass("PRINT 1", config)
    code, _ = flow_control_pass(code, config)
    assert '    CALL DebugPause("Starting automated test session...")' in code.splitlines()
    assert '    CALL DebugExit("Test session completed successfully")' in code.splitlines()


@pytest.mark.parametrize(
    "source",
    [
        pytest.param("$CONSOLE\nSUB Helper\nEND SUB", id="no_main_code"),
        pytest.param("CALL AutoTestWrapper\nSUB AutoTestWrapper\nEND SUB", id="already_wrapped"),
    ],
)
def test_flow_control_leaves_code_alone(source):
    assert flow_control_pass(source, DebugModeConfig()) == (source, [])


# --- 3. Resource tracking pass ---


def test_file_handles_are_tracked_and_cleaned_up():
    code, changes = resource_tracking_pass('f = FREEFILE\nOPEN "log.txt" FOR OUTPUT AS #f\nSYSTEM')
    assert outside_blocks(code) == [
        "",
        "f = ResourceManager_GetFileHandle%",
        'OPEN "log.txt" FOR OUTPUT AS #f',
        "CALL ResourceManager_Cleanup",
        "SYSTEM",
    ]
    # The tracked allocator itself still calls FREEFILE.
    assert "    handle = FREEFILE" in code.splitlines()
    assert changes == [
        "Added resource management system",
        "Replaced FREEFILE with tracked resource allocation",
        "Added resource cleanup before program exit",
    ]


def test_cleanup_keeps_the_exit_indentation():
    code, _ = resource_tracking_pass('IF done THEN\n    END\nEND IF\nCALL DebugExit("bye")')
    assert outside_blocks(code)[1:] == [
        "IF done THEN",
        "    CALL ResourceManager_Cleanup",
        "    END",
        "END IF",
        "CALL ResourceManager_Cleanup",
        'CALL DebugExit("bye")',
    ]


# --- 4. Graphics pass ---


def test_images_and_pixels_are_guarded():
    code, changes = graphics_pass("SCREEN _NEWIMAGE(640, 480, 32)\nPSET (10, 20), 15\nPSET (x, y), c ' dot")
    assert outside_blocks(code) == [
        "",
        "SCREEN GraphicsManager_CreateImage&(640, 480)",
        "CALL GraphicsManager_SafePSET(10, 20, 15)",
        "CALL GraphicsManager_SafePSET(x, y, c) ' dot",
    ]
    assert changes == [
        "Added graphics context management system",
        "Replaced _NEWIMAGE with tracked image creation",
        "Replaced PSET with bounds-checked version",
    ]


def test_images_are_registered_only_with_resource_tracking():
    register = "        CALL ResourceManager_RegisterImage(img)"
    code, _ = graphics_pass("SCREEN 12")
    assert register not in code.splitlines()

    code, _ = resource_tracking_pass("SCREEN 12")
    code, _ = graphics_pass(code)
    assert register in code.splitlines()


def test_valid_image_handles_are_negative():
    assert "    IF img < -1 THEN" in scaffolds.graphics_block(False)


# --- 5. Logging and screenshots ---


def test_file_opens_are_logged():
    code, changes = logging_pass('OPEN "data.txt" FOR INPUT AS #1\nCLOSE #1', only(enable_logging=True, verbose_output=False), "T")
    assert outside_blocks(code) == [
        "",
        'OPEN "data.txt" FOR INPUT AS #1',
        'CALL LogMessage("FILE", "Opened file: " + "data.txt")',
        "CLOSE #1",
    ]
    lines = code.splitlines()
    assert '    LogFile = "qb64pe-logs/debug_T.log"' in lines
    assert "    LogEnabled = 0" in lines
    assert changes == ["Added comprehensive logging system", "Added file operation logging"]


def test_screenshots_follow_drawing_statements():
    code, changes = screenshot_pass("SCREEN 12\nCIRCLE (1, 1), 5\nLINE INPUT a$\nLINE (0, 0)-(5, 5)", "T")
    assert outside_blocks(code) == [
        "",
        "SCREEN 12",
        "CIRCLE (1, 1), 5",
        "CALL AutoScreenshot",
        "LINE INPUT a$",
        "LINE (0, 0)-(5, 5)",
        "CALL AutoScreenshot",
    ]
    assert 'CALL LogMessage("SCREENSHOT"' not in code
    assert changes == ["Added automated screenshot system", "Added automatic screenshots after graphics operations"]


@pytest.mark.parametrize(
    "line",
    [
        pytest.param("LINE$ = \"abc\"", id="string_variable"),
        pytest.param("LINES = 3", id="longer_identifier"),
        pytest.param("CIRCLEX = 1", id="circle_prefix"),
    ],
)
def test_screenshots_skip_lookalike_identifiers(line):
    code, changes = screenshot_pass(f"SCREEN 12\n{line}", "T")
    assert outside_blocks(code) == ["", "SCREEN 12", line]
    assert changes == ["Added automated screenshot system"]


def test_screenshots_are_logged_when_logging_is_present():
    code, _ = logging_pass("SCREEN 12", DebugModeConfig(), "T")
    code, _ = screenshot_pass(code, "T")
    assert 'CALL LogMessage("SCREENSHOT"' in code


# --- 6. Scaffolds ---


@pytest.mark.parametrize(
    "feature, block",
    [
        pytest.param("console", scaffolds.console_block(30, True), id="console_auto_exit"),
        pytest.param("console", scaffolds.console_block(30, False), id="console_interactive"),
        pytest.param("resource_tracking", scaffolds.resource_block(), id="resources"),
        pytest.param("graphics", scaffolds.graphics_block(True), id="graphics"),
        pytest.param("logging", scaffolds.logging_block("T", True), id="logging"),
        pytest.param("screenshots", scaffolds.screenshot_block("T", True), id="screenshots"),
    ],
)
def test_scaffold_blocks(feature, block):
    assert block[0] == scaffolds.begin_marker(feature)
    assert all(scaffolds.debug_block_mask(block))
    assert not any("$CONSOLE" in line.upper() for line in block)


def test_debug_block_mask():
    block = scaffolds.debug_block("logging", ["PRINT 1"])
    lines = ["A"] + block + ["B"]
    assert scaffolds.debug_block_mask(lines) == [False, True, True, True, False]


# --- 7. Transformer ---


def test_pass_selection_depends_on_mode():
    names = lambda transformer: [name for name, _ in transformer.passes()]
    assert names(CodeTransformer()) == ["console", "flow_control", "resource_tracking", "logging"]
    assert names(CodeTransformer(mode=ExecutionMode.GRAPHICS)) == list(FEATURE_NAMES)
    assert names(CodeTransformer(DebugModeConfig(enable_screenshots=False), ExecutionMode.MIXED)) == [
        "console",
        "flow_control",
        "resource_tracking",
        "graphics",
        "logging",
    ]


def test_graphics_program_enables_every_feature():
    result = transform_code("SCREEN 12\nCIRCLE (320, 240), 100")
    assert result.features_enabled == list(FEATURE_NAMES.values())


def test_everything_disabled_is_a_no_op():
    result = CodeTransformer(only()).transform("PRINT 1")
    assert result.rewritten_code == "PRINT 1"
    assert result.applied_changes == []
    assert result.features_enabled == []


@pytest.mark.parametrize("source, ends_with", [("PRINT 1\n", "END SUB\n"), ("PRINT 1", "END SUB")])
def test_trailing_newline_is_preserved(source, ends_with):
    rewritten = CodeTransformer(timestamp="T").transform(source).rewritten_code
    assert rewritten.endswith(ends_with)
    assert not rewritten.endswith("\n\n")


GRAPHICS_PROGRAM = """\
SCREEN _NEWIMAGE(640, 480, 32)
f = FREEFILE
OPEN "out.txt" FOR OUTPUT AS #f
PSET (10, 10), 15
CIRCLE (320, 240), 100
PRINT "Press any key to continue"
SLEEP
END
"""

CONSOLE_PROGRAM = """\
PRINT "Working"
f = FREEFILE
OPEN "data.txt" FOR INPUT AS #f
CLOSE #f
SYSTEM
"""


@pytest.mark.parametrize(
    "source, mode",
    [
        pytest.param(GRAPHICS_PROGRAM, ExecutionMode.GRAPHICS, id="graphics"),
        pytest.param(CONSOLE_PROGRAM, ExecutionMode.CONSOLE, id="console"),
    ],
)
def test_transforming_twice_changes_nothing(source, mode):
    transformer = CodeTransformer(mode=mode, timestamp="T")
    first = transformer.transform(source)
    second = transformer.transform(first.rewritten_code)
    assert second.rewritten_code == first.rewritten_code
    assert second.applied_changes == []
    assert [line.strip() for line in first.rewritten_code.splitlines()].count("$CONSOLE") == 1
