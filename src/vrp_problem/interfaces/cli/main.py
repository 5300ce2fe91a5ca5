import argparse
import logging
from pathlib import Path
from typing import Optional, List
import importlib
import colorlog

from vrp_problem.ingestion.reader import ProblemFormatError

try:
    # Prefer package-defined version
    from vrp_problem import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover
    _PACKAGE_VERSION = None  # type: ignore[assignment]
    try:
        # Fallback to installed package metadata
        from importlib.metadata import version as _pkg_version, PackageNotFoundError

        _PACKAGE_VERSION = _pkg_version("vrp-problem-tools")  # type: ignore[assignment]
    except PackageNotFoundError:
        _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _report_path(option, problem_path: Path, suffix: str) -> Path:
    """Resolve where a report for `problem_path` goes.

    `option` is True for the default location (next to the problem file)
    or a directory path given on the command line.
    """
    if option is True:
        report_dir = problem_path.parent
    else:
        report_dir = Path(option)
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir / f"{problem_path.stem}_validation.{suffix}"


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate one or more problem documents.

    Each file is validated independently. Files that cannot be loaded emit
    errors and are skipped; the remaining files are still validated.

    Returns:
        0 if all validations passed without errors
        1 if no problem file could be validated
        2 if any validation errors were found
    """
    registry = importlib.import_module("vrp_problem.validation.registry")

    paths = [Path(p) for p in args.paths]
    max_workers = getattr(args, "parallel", None)

    # Track results for end-of-run summary
    validation_results: List[dict] = []
    total_errors = 0
    successful_validations = 0

    for path in paths:
        logging.info("Validating %s...", path)

        try:
            report = registry.validate_file(path, max_workers=max_workers)
        except FileNotFoundError as e:
            logging.error("%s", e)
            validation_results.append({"path": path, "status": "MISSING", "reason": str(e)})
            continue
        except (ProblemFormatError, OSError) as e:
            logging.error("Failed to load %s: %s", path, e)
            validation_results.append({"path": path, "status": "ERROR", "reason": str(e)})
            continue

        error_count = report.get_error_count()
        if report.has_errors():
            total_errors += error_count
            logging.warning("Validation failed for %s: %d errors", path, error_count)
        else:
            logging.info("Validation passed for %s", path)

        # Print console report
        registry.print_report(report)

        # Generate markdown report if requested
        if getattr(args, "report", False):
            report_path = _report_path(args.report, path, "md")
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(report.to_markdown())
            logging.info("Markdown report saved: %s", report_path)

        # Generate JSON report if requested
        if getattr(args, "report_json", False):
            report_path = _report_path(args.report_json, path, "json")
            with open(report_path, "w", encoding="utf-8") as f:
                f.write(report.to_json())
            logging.info("JSON report saved: %s", report_path)

        successful_validations += 1
        validation_results.append({
            "path": path,
            "status": "FAIL" if report.has_errors() else "OK",
            "errors": error_count,
        })

    # Print summary if multiple files
    if len(paths) > 1 and validation_results:
        logging.info("Validation Summary:")
        for entry in validation_results:
            if entry["status"] == "OK":
                logging.info("%s: PASSED", entry["path"])
            elif entry["status"] == "FAIL":
                logging.info("%s: FAILED (%d errors)", entry["path"], entry["errors"])
            else:
                logging.info("%s: %s (%s)", entry["path"], entry["status"], entry["reason"])

    if successful_validations == 0:
        logging.error("No problem files were validated.")
        return 1

    if total_errors > 0:
        logging.error("Validation found %d errors across all problem files.", total_errors)
        return 2

    return 0


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="vrp-problem",
        description=f"VRP Problem Tools (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate problem definitions before solving")
    p_validate.add_argument(
        "paths",
        nargs="+",
        help="Problem documents to validate (.json, .yaml or .yml)",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed Markdown report (one per file). Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed JSON report (one per file). Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--parallel",
        type=_positive_int,
        default=None,
        metavar="N",
        help="Run validation checks on N worker threads (output order is unchanged)",
    )
    p_validate.set_defaults(func=cmd_validate)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
