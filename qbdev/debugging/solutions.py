from typing import List

from ..core.classes import DetectedIssue, IssueType, Solution, SolutionStrategy

# One remediation per issue type. "implementation" names the transformer
# feature that carries the fix out.
SOLUTION_TABLE = {
    IssueType.CONSOLE_VISIBILITY: {
        "strategy": SolutionStrategy.CODE_INJECTION,
        "priority": 1,
        "description": "Inject console management system with $CONSOLE directive and Windows console activation",
        "implementation": "console",
        "code_changes": [
            "Add $CONSOLE metacommand",
            "Add _CONSOLE ON for Windows compatibility",
            "Add DEBUG_MODE constant for flow control",
        ],
        "rationale": "QB64PE programs need explicit console activation to ensure output visibility",
    },
    IssueType.FLOW_CONTROL: {
        "strategy": SolutionStrategy.TEMPLATE_REPLACEMENT,
        "priority": 1,
        "description": "Replace blocking user input with conditional automation-friendly pauses",
        "implementation": "flow_control",
        "code_changes": [
            "Replace SLEEP with conditional DebugPause function",
            "Add automated timeout for DEBUG_MODE",
            "Maintain interactive behavior for non-debug use",
        ],
        "rationale": "Automated systems need timeout mechanisms to prevent indefinite hanging",
    },
    IssueType.FILE_HANDLE: {
        "strategy": SolutionStrategy.CODE_INJECTION,
        "priority": 2,
        "description": "Implement resource management system to track and cleanup file handles",
        "implementation": "resource_tracking",
        "code_changes": [
            "Add ResourceManager system",
            "Replace FREEFILE with tracked allocation",
            "Add cleanup on program exit",
        ],
        "rationale": "Proper resource management prevents file locking and compilation errors",
    },
    IssueType.GRAPHICS_CONTEXT: {
        "strategy": SolutionStrategy.CODE_INJECTION,
        "priority": 2,
        "description": "Add graphics context management with automatic cleanup and bounds checking",
        "implementation": "graphics",
        "code_changes": [
            "Add GraphicsManager system",
            "Track image handles for cleanup",
            "Add bounds checking for graphics operations",
        ],
        "rationale": "Graphics programs need careful resource management to prevent memory leaks and crashes",
    },
    IssueType.PROCESS_MANAGEMENT: {
        "strategy": SolutionStrategy.CODE_INJECTION,
        "priority": 3,
        "description": "Add process management with delays and controlled exit",
        "implementation": "console",
        "code_changes": [
            "Add delays before SYSTEM calls",
            "Add cleanup routines",
            "Add debug output for process state",
        ],
        "rationale": "Controlled program termination allows proper observation and cleanup",
    },
}


def solution_for(issue: DetectedIssue) -> Solution:
    entry = SOLUTION_TABLE[issue.type]
    return Solution(issue_id=issue.id, **entry)


def generate_solutions(issues: List[DetectedIssue]) -> List[Solution]:
    """
    Maps each issue to its remediation and orders the result by priority.
    The sort is stable, so issues of equal priority keep their input order.
    """
    solutions = [solution_for(issue) for issue in issues]
    return sorted(solutions, key=lambda s: s.priority)
