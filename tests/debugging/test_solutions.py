import pytest

from qbdev.config.config import FEATURE_NAMES
from qbdev.core.classes import DetectedIssue, IssueSeverity, IssueType, SolutionStrategy
from qbdev.debugging.solutions import SOLUTION_TABLE, generate_solutions, solution_for


def make_issue(issue_type: IssueType, n: int = 1) -> DetectedIssue:
    return DetectedIssue(id=f"{issue_type.value}_{n}", type=issue_type, severity=IssueSeverity.MEDIUM, description="test")


def test_every_issue_type_has_a_solution():
    assert set(SOLUTION_TABLE) == set(IssueType)
    for entry in SOLUTION_TABLE.values():
        assert entry["implementation"] in FEATURE_NAMES


@pytest.mark.parametrize(
    "issue_type, strategy, priority, implementation",
    [
        (IssueType.CONSOLE_VISIBILITY, SolutionStrategy.CODE_INJECTION, 1, "console"),
        (IssueType.FLOW_CONTROL, SolutionStrategy.TEMPLATE_REPLACEMENT, 1, "flow_control"),
        (IssueType.FILE_HANDLE, SolutionStrategy.CODE_INJECTION, 2, "resource_tracking"),
        (IssueType.GRAPHICS_CONTEXT, SolutionStrategy.CODE_INJECTION, 2, "graphics"),
        (IssueType.PROCESS_MANAGEMENT, SolutionStrategy.CODE_INJECTION, 3, "console"),
    ],
)
def test_solution_for_issue(issue_type, strategy, priority, implementation):
    solution = solution_for(make_issue(issue_type))
    assert solution.issue_id == f"{issue_type.value}_1"
    assert solution.strategy == strategy
    assert solution.priority == priority
    assert solution.implementation == implementation
    assert solution.code_changes


def test_solutions_are_ordered_by_priority():
    issues = [make_issue(IssueType.PROCESS_MANAGEMENT), make_issue(IssueType.FILE_HANDLE), make_issue(IssueType.CONSOLE_VISIBILITY)]
    assert [s.priority for s in generate_solutions(issues)] == [1, 2, 3]


def test_equal_priorities_keep_detection_order():
    issues = [make_issue(IssueType.FLOW_CONTROL), make_issue(IssueType.GRAPHICS_CONTEXT), make_issue(IssueType.CONSOLE_VISIBILITY)]
    solutions = generate_solutions(issues)
    assert [s.issue_id for s in solutions] == ["flow_control_1", "console_visibility_1", "graphics_context_1"]


def test_no_issues_no_solutions():
    assert generate_solutions([]) == []
