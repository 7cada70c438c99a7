"""Command-line interface for Better SVG.

WHY: Developers want to optimize icon components from the terminal or a
pre-commit hook, and to inspect what the JSX ⇄ SVG conversion produces
when a round trip goes wrong.

HOW: argparse with subcommands:
  detect   : print "jsx" or "svg" for a file
  to-svg   : print the forward conversion
  to-jsx   : print the reverse conversion
  optimize : run every inline <svg> through an optimizer behind the
             JSX round trip; write to stdout, --output, or --in-place
  serve    : start the HTTP API with uvicorn
FILE may be "-" to read stdin.

RULES:
- Converted text goes to stdout; status messages go to stderr
- File extension is validated against SUPPORTED_EXTENSIONS before reading
- Errors print "Error: ..." to stderr and exit with status 1
- --in-place and --output are mutually exclusive; --in-place needs a file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from better_svg import __version__, config
from better_svg.core.detect import is_jsx_svg
from better_svg.core.document import format_bytes, optimize_document
from better_svg.core.transcode import convert_jsx_to_svg, convert_svg_to_jsx
from better_svg.optimizers import OPTIMIZERS, OptimizerError, get_optimizer

STDIN_MARKER = "-"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _read_input(source: str) -> str:
    """Read markup from a file path or from stdin when ``source`` is "-".

    RULES:
    - Unsupported extensions are rejected before the file is opened
    - Files are decoded as UTF-8
    """
    if source == STDIN_MARKER:
        return sys.stdin.read()

    path = Path(source)
    ext = path.suffix.lower()
    if ext not in config.SUPPORTED_EXTENSIONS:
        _fail("Unsupported file type '{}'. Supported: {}".format(
            ext, ", ".join(sorted(config.SUPPORTED_EXTENSIONS)),
        ))
    if not path.is_file():
        _fail("File not found: {}".format(path))
    return path.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def _cmd_detect(args: argparse.Namespace) -> None:
    text = _read_input(args.input_file)
    print("jsx" if is_jsx_svg(text) else "svg")


def _cmd_to_svg(args: argparse.Namespace) -> None:
    sys.stdout.write(convert_jsx_to_svg(_read_input(args.input_file)))


def _cmd_to_jsx(args: argparse.Namespace) -> None:
    sys.stdout.write(convert_svg_to_jsx(_read_input(args.input_file)))


def _cmd_optimize(args: argparse.Namespace) -> None:
    """Optimize every inline SVG in the input and write the result.

    RULES:
    - Output goes to --output, back to the input file (--in-place), or stdout
    - A size summary is printed to stderr
    """
    if args.in_place and args.input_file == STDIN_MARKER:
        _fail("--in-place needs a file, not stdin")

    text = _read_input(args.input_file)

    try:
        optimizer = get_optimizer(args.optimizer)
    except ValueError as e:
        _fail(str(e))

    _status("Optimizing with {}...".format(optimizer.name))
    try:
        result = optimize_document(text, optimizer)
    except OptimizerError as e:
        detail = " ({})".format(e.stderr) if e.stderr else ""
        _fail("{}{}".format(e, detail))

    if args.in_place:
        Path(args.input_file).write_text(result.text, encoding="utf-8")
        _status("  Saved: {}".format(args.input_file))
    elif args.output:
        Path(args.output).write_text(result.text, encoding="utf-8")
        _status("  Saved: {}".format(args.output))
    else:
        sys.stdout.write(result.text)

    _status("  {} SVG block(s): {} -> {}".format(
        result.blocks,
        format_bytes(result.bytes_before),
        format_bytes(result.bytes_after),
    ))


def _cmd_serve(args: argparse.Namespace) -> None:
    import uvicorn

    from better_svg.server.app import app

    uvicorn.run(app, host=args.host, port=args.port)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running anything.
    """
    parser = argparse.ArgumentParser(
        prog="better-svg",
        description="Optimize JSX-flavoured SVG with SVGO and convert between "
                    "JSX SVG and plain SVG.",
    )
    parser.add_argument(
        "--version", action="version", version="%(prog)s {}".format(__version__),
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    detect = subparsers.add_parser("detect", help="Print 'jsx' or 'svg' for a file.")
    detect.add_argument("input_file", help="File to inspect, or '-' for stdin.")
    detect.set_defaults(handler=_cmd_detect)

    to_svg = subparsers.add_parser("to-svg", help="Convert JSX SVG to plain SVG.")
    to_svg.add_argument("input_file", help="File to convert, or '-' for stdin.")
    to_svg.set_defaults(handler=_cmd_to_svg)

    to_jsx = subparsers.add_parser("to-jsx", help="Convert plain SVG back to JSX SVG.")
    to_jsx.add_argument("input_file", help="File to convert, or '-' for stdin.")
    to_jsx.set_defaults(handler=_cmd_to_jsx)

    optimize = subparsers.add_parser(
        "optimize", help="Optimize every inline SVG, keeping JSX syntax intact.",
    )
    optimize.add_argument("input_file", help="File to optimize, or '-' for stdin.")
    optimize.add_argument(
        "--optimizer",
        default=config.DEFAULT_OPTIMIZER,
        choices=sorted(OPTIMIZERS),
        help="Optimizer backend (default: %(default)s).",
    )
    destination = optimize.add_mutually_exclusive_group()
    destination.add_argument(
        "-o", "--output", default=None, help="Write the result to this path.",
    )
    destination.add_argument(
        "--in-place", action="store_true", help="Overwrite the input file.",
    )
    optimize.set_defaults(handler=_cmd_optimize)

    serve = subparsers.add_parser("serve", help="Run the HTTP API.")
    serve.add_argument("--host", default=config.API_HOST, help="Bind host (default: %(default)s).")
    serve.add_argument(
        "--port", type=int, default=config.API_PORT, help="Bind port (default: %(default)s).",
    )
    serve.set_defaults(handler=_cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``better-svg`` console script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    # A bad BETTER_SVG_LOG_LEVEL arrives as the default and skips choices
    if args.log_level not in LOG_LEVELS:
        _fail("Unknown log level '{}'. Available: {}".format(
            args.log_level, ", ".join(LOG_LEVELS),
        ))
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.handler(args)


if __name__ == "__main__":
    main()
