# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for the html_accessibility_checker package.

This module provides a command-line interface for auditing HTML files and for
running the upload endpoint.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from html_accessibility_checker import __version__
from html_accessibility_checker.api import audit_html_accessibility
from html_accessibility_checker.audit.report_generator import generate_report
from html_accessibility_checker.utils.config import (
    config_manager,
    load_config_file,
    save_config,
)
from html_accessibility_checker.utils.logging_helper import (
    ConfigurationError,
    HTMLAccessibilityError,
    setup_logger,
)

# Set up module-level logger
logger = setup_logger(__name__)


def configure_logging(debug: bool = False, quiet: bool = False) -> None:
    """Configure logging based on debug and quiet flags."""
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    # No root handler: package loggers have their own stderr handler
    logging.getLogger().setLevel(level)
    logger.setLevel(level)

    # Loggers created at import time keep their own level
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("html_accessibility_checker"):
            logging.getLogger(name).setLevel(level)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments shared by all commands."""
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only output reports, suppress other output",
    )
    parser.add_argument("--config", "-c", help="Path to configuration file")
    parser.add_argument(
        "--save-config",
        metavar="CONFIG_PATH",
        help="Save current configuration to the specified file path",
    )


def _add_audit_arguments(parser: argparse.ArgumentParser) -> None:
    """Add accessibility audit arguments to the audit command parser."""
    _add_common_arguments(parser)

    parser.add_argument("--input", "-i", required=True, help="Input HTML file path")
    parser.add_argument(
        "--output",
        "-o",
        help="Report file path. If not provided, the report is printed",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=["json", "text"],
        default=None,
        help="Output format for the audit report (default: from configuration)",
    )
    parser.add_argument(
        "--generative",
        action="store_true",
        default=None,
        help="Suggest fixes with a Bedrock model instead of the static rules table",
    )
    parser.add_argument("--model-id", help="Bedrock model ID for generated fixes")
    parser.add_argument("--profile", help="AWS profile name to use for credentials")


def _add_serve_arguments(parser: argparse.ArgumentParser) -> None:
    """Add upload server arguments to the serve command parser."""
    _add_common_arguments(parser)

    parser.add_argument("--host", help="Interface to bind (default: from configuration)")
    parser.add_argument(
        "--port", type=int, help="Port to listen on (default: from configuration)"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="html-a11y-check",
        description="Audit HTML documents for accessibility issues.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    audit_parser = subparsers.add_parser(
        "audit", help="Audit an HTML file for accessibility issues"
    )
    _add_audit_arguments(audit_parser)

    serve_parser = subparsers.add_parser(
        "serve", help="Run the HTML upload endpoint"
    )
    _add_serve_arguments(serve_parser)

    parser.add_argument(
        "--version", action="version", version=f"HTML Accessibility Checker v{__version__}"
    )

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    """
    Parse command-line arguments and load the configuration file.

    Args:
        argv: Arguments to parse instead of ``sys.argv``

    Returns:
        Dictionary of parsed arguments

    Raises:
        ConfigurationError: If the configuration file cannot be loaded
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return {"command": None}

    configure_logging(debug=args.debug, quiet=args.quiet)

    args_dict = vars(args)

    if args_dict.get("config"):
        config_path = args_dict["config"]
        logger.info(f"Loading configuration from {config_path}")
        config_manager.load_user_config(load_config_file(config_path))

    return args_dict


def _audit_options(args: Dict[str, Any]) -> Dict[str, Any]:
    """Collect the audit options given on the command line."""
    options = {}
    if args.get("generative") is not None:
        options["use_generative_fixes"] = args["generative"]
    if args.get("model_id"):
        options["model_id"] = args["model_id"]
    if args.get("profile"):
        options["profile"] = args["profile"]
    return options


def save_configuration_from_args(args: Dict[str, Any]) -> None:
    """
    Save the resolved configuration, with command-line overrides, to a file.

    Args:
        args: Dictionary of command-line arguments
    """
    config_path = args.get("save_config")
    if not config_path:
        return

    file_format = "json" if config_path.lower().endswith(".json") else "yaml"

    config = {
        section: config_manager.get_config(section=section)
        for section in ("audit", "remediate", "server")
    }

    options = _audit_options(args)
    if "use_generative_fixes" in options:
        config["audit"]["use_generative_fixes"] = options.pop("use_generative_fixes")
    config["remediate"].update(options)
    if args.get("format"):
        config["audit"]["report_format"] = args["format"]
    if args.get("host"):
        config["server"]["host"] = args["host"]
    if args.get("port"):
        config["server"]["port"] = args["port"]

    save_config(config, config_path, file_format=file_format)


def run_audit_command(args: Dict[str, Any]) -> int:
    """Run the accessibility audit command."""
    try:
        report_format = args.get("format") or config_manager.get_config(
            section="audit"
        ).get("report_format", "json")

        logger.info(f"Auditing HTML for accessibility: {args['input']}")

        report = audit_html_accessibility(
            html_path=args["input"],
            options=_audit_options(args),
            output_path=args.get("output"),
            report_format=report_format,
        )

        if args.get("output"):
            if not args.get("quiet"):
                print(
                    f"Accessibility score: {report.formatted_score} "
                    f"({len(report.issues)} issues). Report saved to {args['output']}"
                )
        else:
            print(generate_report(report, report_format=report_format))

        return 0

    except HTMLAccessibilityError as e:
        logger.error(f"Error in accessibility audit: {e}")
        if not args.get("quiet"):
            print(f"Error: {e}")
        return 1


def run_serve_command(args: Dict[str, Any]) -> int:
    """Run the upload endpoint until interrupted."""
    from html_accessibility_checker.server import run_server

    server_config = config_manager.get_config(section="server")
    host = args.get("host") or server_config["host"]
    port = args.get("port") or server_config["port"]

    try:
        run_server(host=host, port=int(port))
    except OSError as e:
        logger.error(f"Error starting server: {e}")
        if not args.get("quiet"):
            print(f"Error: {e}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        args = parse_arguments(argv)

        if args["command"] is None:
            return 1

        save_configuration_from_args(args)

        if args["command"] == "audit":
            return run_audit_command(args)
        elif args["command"] == "serve":
            return run_serve_command(args)

        print(f"Unknown command: {args['command']}")
        return 1

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        print(f"Error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
