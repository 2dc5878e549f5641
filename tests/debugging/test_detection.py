import pytest

from qbdev.core.classes import ExecutionMode, IssueSeverity, IssueType
from qbdev.debugging.detection import detect_execution_mode, detect_issues


@pytest.mark.parametrize(
    "code, mode",
    [
        pytest.param('PRINT "hi"', ExecutionMode.CONSOLE, id="plain_console"),
        pytest.param("SCREEN 12\nCIRCLE (320, 240), 100", ExecutionMode.GRAPHICS, id="graphics"),
        pytest.param("$CONSOLE\nSCREEN _NEWIMAGE(640, 480, 32)", ExecutionMode.MIXED, id="mixed"),
        pytest.param("POINTS = 3\nPRINT POINTS", ExecutionMode.CONSOLE, id="keyword_prefix_in_a_name"),
        pytest.param("x = MY_NEWIMAGE(1)", ExecutionMode.CONSOLE, id="keyword_suffix_in_a_name"),
    ],
)
def test_detect_execution_mode(code, mode):
    assert detect_execution_mode(code) == mode


def issue_types(code):
    return [issue.type for issue in detect_issues(code)]


# --- 1. Console visibility ---


def test_console_program_without_directive():
    issues = detect_issues('PRINT "hi"')
    assert len(issues) == 1
    issue = issues[0]
    assert issue.id == "console_visibility_1"
    assert issue.type == IssueType.CONSOLE_VISIBILITY
    assert issue.severity == IssueSeverity.HIGH
    assert issue.auto_fixable
    assert not issue.resolved


def test_console_directive_or_graphics_mode_is_fine():
    assert issue_types('$CONSOLE\nPRINT "hi"') == []
    assert issue_types("SCREEN 12\nCIRCLE (320, 240), 100") == []


# --- 2. Blocking waits ---


def test_press_any_key_followed_by_sleep():
    issues = detect_issues('$CONSOLE\nPRINT "Press any key to continue"\nSLEEP')
    assert [(i.type, i.line) for i in issues] == [(IssueType.FLOW_CONTROL, 2)]
    assert issues[0].description == 'Program contains blocking "Press any key" prompts that prevent automation'


def test_prompt_without_sleep_does_not_block():
    assert issue_types('$CONSOLE\nPRINT "Press any key to continue"\nPRINT "done"') == []


# --- 3. File handles ---


@pytest.mark.parametrize(
    "count, severity",
    [(1, IssueSeverity.LOW), (2, IssueSeverity.MEDIUM), (4, IssueSeverity.MEDIUM), (5, IssueSeverity.HIGH)],
)
def test_file_handle_severity_scales_with_count(count, severity):
    code = "$CONSOLE\n" + "\n".join(f"f{n} = FREEFILE" for n in range(count))
    issues = detect_issues(code)
    assert len(issues) == 1
    assert issues[0].type == IssueType.FILE_HANDLE
    assert issues[0].severity == severity
    assert issues[0].description == f"Code uses {count} file handles without tracking or cleanup"
    assert issues[0].line == 2


# --- 4. Graphics context ---


def test_images_without_cleanup():
    issues = detect_issues("img& = _NEWIMAGE(64, 64, 32)\nSCREEN _NEWIMAGE(640, 480, 32)")
    assert [i.type for i in issues] == [IssueType.GRAPHICS_CONTEXT]
    assert issues[0].description == "Code creates 2 images without proper cleanup"
    assert issues[0].line == 1


def test_freed_images_are_fine():
    assert issue_types("img& = _NEWIMAGE(64, 64, 32)\n_FREEIMAGE img&") == []


# --- 5. Premature exit ---


def test_system_without_delay():
    issues = detect_issues('$CONSOLE\nPRINT "done"\nSYSTEM')
    assert [(i.type, i.severity, i.line) for i in issues] == [(IssueType.PROCESS_MANAGEMENT, IssueSeverity.LOW, 3)]


def test_delay_before_system_allows_observation():
    assert issue_types('$CONSOLE\nPRINT "done"\n_DELAY 2\nSYSTEM') == []


def test_issue_ids_count_per_type():
    code = 'PRINT "Press any key"\nSLEEP\nf = FREEFILE\nSYSTEM'
    issues = detect_issues(code)
    assert [i.id for i in issues] == ["console_visibility_1", "flow_control_1", "file_handle_1", "process_management_1"]
