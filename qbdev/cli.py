import argparse
import json
import logging
import os
import sys
import time

from .config.config import CHECK_LEVELS, DEFAULT_CHECK_LEVEL, DEFAULT_PROBLEM_LOG_DIR
from .core.classes import DebugModeConfig, ValidationReport
from .debugging.engine import DebuggingEngine
from .debugging.session_log import ProblemLogWriter
from .exceptions import ErrorCode, QBDevError
from .keywords.database import load_default_database
from .utils import SEVERITY_COLORS, ReportEncoder, TerminalColors
from .validation.validator import validate

VALIDATION_STAGES = ("structure", "syntax", "compatibility", "keywords", "score")


def _read_source(path):
    if not path:
        return sys.stdin.read(), None
    abs_path = os.path.abspath(path)
    try:
        with open(abs_path, "r", encoding="utf-8") as f:
            return f.read(), abs_path
    except FileNotFoundError:
        raise QBDevError(ErrorCode.INPUT_FILE_NOT_FOUND, path=path)
    except (OSError, UnicodeDecodeError) as e:
        raise QBDevError(ErrorCode.INPUT_NOT_READABLE, path=path, details=str(e))


def _print_report(report: ValidationReport, display_name: str):
    print(f"--- Validating {display_name} ({report.check_level}) ---")
    for finding in report.findings:
        color = SEVERITY_COLORS[finding.severity.value]
        print(f"{color}{finding.line}:{finding.column}  {finding.severity.value:<7} [{finding.category}] {finding.message}{TerminalColors.RESET}")
        if finding.suggestion:
            print(f"    -> {finding.suggestion}")
        if finding.suggestions:
            print(f"    -> Did you mean: {', '.join(finding.suggestions)}")

    if report.suggestions:
        print("\nSuggestions:")
        for suggestion in report.suggestions:
            print(f"  - {suggestion}")

    print(f"\nErrors: {len(report.errors)}  Warnings: {len(report.warnings)}  Info: {len(report.infos)}  Score: {report.score}/100")
    if report.is_valid:
        print(f"\n{TerminalColors.GREEN}--- Validation Passed ---{TerminalColors.RESET}")
    else:
        print(f"\n{TerminalColors.RED}--- Validation Failed ---{TerminalColors.RESET}")


def run_validate(args) -> int:
    source, file_path = _read_source(args.input_file)
    keyword_db = load_default_database(args.keywords_db)
    report = validate(source, args.level, keyword_db=keyword_db, file_path=file_path, dump_stages=args.dump or [])

    if args.json:
        print(json.dumps(report, indent=2, cls=ReportEncoder))
    else:
        _print_report(report, args.input_file or "stdin")
    return 0 if report.is_valid else 1


def run_enhance(args) -> int:
    source, file_path = _read_source(args.input_file)
    config = DebugModeConfig(
        enable_console=not args.no_console,
        enable_logging=not args.no_logging,
        enable_screenshots=not args.no_screenshots,
        enable_flow_control=not args.no_flow_control,
        enable_resource_tracking=not args.no_resource_tracking,
        timeout_seconds=args.timeout,
        auto_exit=not args.no_auto_exit,
    )
    engine = DebuggingEngine(log_writer=ProblemLogWriter(args.session_log, enabled=not args.no_session_log))
    project_path = os.path.dirname(file_path) if file_path else None
    result = engine.enhance_for_debugging(source, config, project_path=project_path)

    if args.output_file:
        raw_output_path = args.output_file
    elif args.input_file:
        base, ext = os.path.splitext(args.input_file)
        raw_output_path = f"{base}_debug{ext or '.bas'}"
    else:
        # No file to derive a name from: the enhanced program goes to stdout.
        sys.stdout.write(result.transform.rewritten_code)
        return 0

    output_file_path = os.path.abspath(raw_output_path)
    os.makedirs(os.path.dirname(output_file_path), exist_ok=True)
    with open(output_file_path, "w", encoding="utf-8") as f:
        f.write(result.transform.rewritten_code)

    print(f"--- Enhancing {args.input_file or 'stdin'} ({result.execution_mode.value} mode) ---")
    for issue in result.issues:
        print(f"{TerminalColors.YELLOW}[{issue.severity.value}] {issue.type.value}: {issue.description}{TerminalColors.RESET}")
    for change in result.transform.applied_changes:
        print(f"  + {change}")
    print(f"\nFeatures: {', '.join(result.transform.features_enabled) or 'none'}")
    print(f"Lines: {result.summary.original_lines} -> {result.summary.enhanced_lines}")
    print(f"\n{TerminalColors.GREEN}--- Enhancement Successful (session {result.session_id}) ---{TerminalColors.RESET}")
    print(f"Enhanced program written to {output_file_path}")
    return 0


def run_keywords(args) -> int:
    keyword_db = load_default_database(args.keywords_db)
    matches = keyword_db.search(args.query, args.max_results)
    if not matches:
        print(f"No keywords match '{args.query}'.")
        return 1
    for match in matches:
        info = match.keyword
        print(f"{TerminalColors.CYAN}{info.name:<16}{TerminalColors.RESET} {match.relevance:>3}  {info.type:<11} {info.description}")
        if args.verbose and info.syntax:
            print(f"{'':<21}{info.syntax}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate QB64PE programs and prepare them for automated runs.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--keywords-db", default=None, help="Path to a JSON keyword database. Defaults to the built-in one.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Check a program for structure, syntax, compatibility and keyword problems.")
    validate_parser.add_argument("input_file", nargs="?", default=None, help="The .bas file to check. Omit to read from stdin.")
    validate_parser.add_argument("-l", "--level", choices=CHECK_LEVELS, default=DEFAULT_CHECK_LEVEL, help="How strict the checks are.")
    validate_parser.add_argument(
        "--dump",
        action="append",
        choices=VALIDATION_STAGES,
        help="Save the result of a stage as JSON next to the input file. Can be repeated.",
    )
    validate_parser.add_argument("--json", action="store_true", help="Print the full report as JSON.")
    validate_parser.set_defaults(handler=run_validate)

    enhance_parser = subparsers.add_parser("enhance", help="Rewrite a program so it can run unattended.")
    enhance_parser.add_argument("input_file", nargs="?", default=None, help="The .bas file to rewrite. Omit to read from stdin.")
    enhance_parser.add_argument("-o", "--output", dest="output_file", help="Where to write the enhanced program.")
    enhance_parser.add_argument("--no-console", action="store_true", help="Skip console management.")
    enhance_parser.add_argument("--no-logging", action="store_true", help="Skip the logging system.")
    enhance_parser.add_argument("--no-screenshots", action="store_true", help="Skip automatic screenshots.")
    enhance_parser.add_argument("--no-flow-control", action="store_true", help="Do not wrap the main program.")
    enhance_parser.add_argument("--no-resource-tracking", action="store_true", help="Skip file and image handle tracking.")
    enhance_parser.add_argument("--timeout", type=int, default=30, help="Timeout in seconds; pauses last a tenth of it.")
    enhance_parser.add_argument("--no-auto-exit", action="store_true", help="Wait for a key press before exiting.")
    enhance_parser.add_argument("--session-log", default=DEFAULT_PROBLEM_LOG_DIR, help="Directory for the JSON session records.")
    enhance_parser.add_argument("--no-session-log", action="store_true", help="Do not write a session record.")
    enhance_parser.set_defaults(handler=run_enhance)

    keywords_parser = subparsers.add_parser("keywords", help="Search the keyword knowledge base.")
    keywords_parser.add_argument("query", help="Keyword name, prefix or description words.")
    keywords_parser.add_argument("-n", "--max-results", type=int, default=10, help="Maximum number of matches.")
    keywords_parser.set_defaults(handler=run_keywords)

    return parser


def main(argv=None):
    start_time = time.perf_counter()
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    reading_stdin = args.command != "keywords" and not args.input_file
    if reading_stdin and sys.stdin.isatty():
        parser.error("input_file is required when not reading from a pipe.")

    show_timing = not getattr(args, "json", False) and not (args.command == "enhance" and reading_stdin and not args.output_file)
    exit_code = 0
    try:
        exit_code = args.handler(args)

    # --- Error Handling ---
    except QBDevError as e:
        print(f"\n{TerminalColors.RED}--- ERROR ---\n{e}{TerminalColors.RESET}", file=sys.stderr)
        exit_code = 1
    except Exception as e:
        print(f"\n{TerminalColors.RED}--- UNEXPECTED ERROR ---{TerminalColors.RESET}", file=sys.stderr)
        print("This may be a bug in qbdev. Please report it.", file=sys.stderr)
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        exit_code = 1

    finally:
        # --- Execution Time ---
        if show_timing:
            duration = time.perf_counter() - start_time
            print(f"\n{TerminalColors.CYAN}--- Total Execution Time: {duration:.4f} seconds ---{TerminalColors.RESET}")

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
