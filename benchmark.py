"""Command line entry point for comparing paginated API endpoints."""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pagebench.benchmark import (
    BenchmarkExecutionError,
    BenchmarkRunner,
    ConfigResolver,
    ConfigurationError,
    DependencyMissingError,
    LivenessError,
    VisualizationGenerator,
)
from pagebench.const import (
    EXIT_CONFIGURATION_ERROR,
    EXIT_DEPENDENCY_MISSING,
    EXIT_LIVENESS_ERROR,
    EXIT_OK,
    EXIT_RUNTIME_FAILURE,
    OUTPUT_FORMAT_JSON,
    OUTPUT_FORMATS,
)
from pagebench.shared.logging import LoggingManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare latency, payload size and full pagination traversal of paginated API endpoints.",
        epilog="Endpoints and query expressions are configured through PAGEBENCH_* environment "
               "variables or pagebench.json.",
    )
    parser.add_argument("--format", choices=OUTPUT_FORMATS, help="Report format (default: table)")
    parser.add_argument("--export-dir", type=Path, help="Write CSV and JSON results into this directory")
    parser.add_argument("--plots", action="store_true", help="Also render PNG graphs into the export directory")
    parser.add_argument("--load-only", action="store_true",
                        help="Only regenerate graphs from an existing export directory, no requests")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = ConfigResolver.load_settings()
    except ConfigurationError as e:
        LoggingManager.setup_logging(stream=sys.stderr)
        print(f"ERROR: {e.message}", file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR

    updates = {
        "output_format": args.format,
        "export_dir": args.export_dir,
        "log_level": args.log_level,
        "plots": args.plots or None,
    }
    settings = settings.model_copy(update={k: v for k, v in updates.items() if v is not None})

    # Logs go to stderr when stdout carries the JSON report
    log_stream = sys.stderr if settings.output_format == OUTPUT_FORMAT_JSON else sys.stdout
    LoggingManager.setup_logging(settings.log_level, stream=log_stream)
    logger = LoggingManager.get_logger("pagebench")

    if args.load_only:
        if settings.export_dir is None:
            print("ERROR: --load-only needs --export-dir or PAGEBENCH_EXPORT_DIR", file=sys.stderr)
            return EXIT_CONFIGURATION_ERROR
        VisualizationGenerator().generate_visualizations(settings.export_dir)
        return EXIT_OK

    try:
        config = ConfigResolver().resolve(settings)
        runner = BenchmarkRunner(
            config,
            output_format=settings.output_format,
            export_dir=settings.export_dir,
            plots=settings.plots,
        )
        runner.run()
    except ConfigurationError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        for suggestion in e.suggestions:
            print("", file=sys.stderr)
            print(suggestion, file=sys.stderr)
        return EXIT_CONFIGURATION_ERROR
    except DependencyMissingError as e:
        logger.error(f"Missing dependency: {e}")
        return EXIT_DEPENDENCY_MISSING
    except LivenessError as e:
        logger.error(str(e))
        return EXIT_LIVENESS_ERROR
    except BenchmarkExecutionError as e:
        logger.error(f"Phase '{e.phase or 'unknown'}' failed for endpoint '{e.endpoint_key or '-'}': {e}")
        return EXIT_RUNTIME_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
