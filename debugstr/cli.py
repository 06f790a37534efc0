"""
debugstr — render a string as an escaped, indexed debug table
"""

import argparse
import json
import sys

from debugstr import config
from debugstr.commands import cmd_inspect, cmd_render
from debugstr.exceptions import CliError

HELP_TEXT = """\
Usage: debugstr <command> [args...]

Global flags:
  --format table          Output as readable text (default)
  --format json           Output as JSON
  --quiet, -q             Suppress warnings
  --verbose, -v           Enable debug event logging on stderr
  --version               Show version number

Commands:
  render <text>           - Show every character above its index
    -w, --width <n>         Maximum line length, at least 25 (default: 80,
                            or DEBUGSTR_MAX_LINE_LENGTH)
    --json                  Parse <text> as a JSON string literal
                            (e.g. '"A\\r\\nB"')
  inspect <text>          - List code unit, escape token and Unicode name
    --json                  Parse <text> as a JSON string literal
  version                 - Show version number
"""


# ---------------------------------------------------------------------------
# Global flag extraction (before argparse, so --format works after subcommand)
# ---------------------------------------------------------------------------


def _extract_global_flags(argv):
    """Extract global flags from argv regardless of position.

    Returns (format_str, quiet, verbose, remaining_argv).
    Handles --version directly.
    """
    fmt = "table"
    quiet = False
    verbose = False
    remaining = []
    i = 0
    while i < len(argv):
        if argv[i] == "--version":
            print(f"debugstr {config.VERSION}")
            sys.exit(0)
        elif argv[i] in ("--quiet", "-q"):
            quiet = True
            i += 1
            continue
        elif argv[i] in ("--verbose", "-v"):
            verbose = True
            i += 1
            continue
        elif argv[i] == "--format" and i + 1 < len(argv):
            fmt = argv[i + 1]
            if fmt not in config.VALID_FORMATS:
                raise CliError(f"[ERROR] Invalid format '{fmt}'. Use: json, table")
            i += 2
            continue
        else:
            remaining.append(argv[i])
        i += 1
    if quiet and verbose:
        raise CliError("[ERROR] --quiet and --verbose are mutually exclusive.")
    return fmt, quiet, verbose, remaining


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _SubcommandParser(argparse.ArgumentParser):
    """Subparser that raises CliError instead of printing full help text."""

    def error(self, message):
        raise CliError(f"[ERROR] {message}")


def _line_length(value):
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("must be an integer") from exc


def build_parser():
    parser = _SubcommandParser(
        prog="debugstr",
        description="Render a string as an escaped, indexed debug table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    sub = parser.add_subparsers(dest="command", parser_class=_SubcommandParser)

    # --- render ---
    p = sub.add_parser("render")
    p.add_argument("text")
    p.add_argument("--width", "-w", type=_line_length)
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_render)

    # --- inspect ---
    p = sub.add_parser("inspect")
    p.add_argument("text")
    p.add_argument("--json", action="store_true")
    p.set_defaults(func=cmd_inspect)

    # --- version (bare word) ---
    sub.add_parser("version").set_defaults(func=None)

    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------


def _emit_cli_error(err, fmt):
    msg = str(err)
    if fmt == "json":
        payload = {
            "ok": False,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "error": {
                "type": type(err).__name__,
                "message": msg,
                "exit_code": getattr(err, "exit_code", 1),
            },
        }
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        return
    print(msg, file=sys.stderr)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(HELP_TEXT)
        sys.exit(0)

    fmt = "table"
    try:
        # Extract global flags from anywhere in argv
        fmt, quiet, verbose, remaining_argv = _extract_global_flags(argv)
        config.RUNTIME_QUIET = quiet
        config.RUNTIME_VERBOSE = verbose
        if verbose:
            config.LOG_ENABLED = True

        if not remaining_argv:
            print(HELP_TEXT)
            sys.exit(0)

        parser = build_parser()
        ns = parser.parse_args(remaining_argv)
        ns.format = fmt  # inject global format flag

        if ns.show_help or not ns.command:
            print(HELP_TEXT)
            sys.exit(0)

        if ns.command == "version":
            print(f"debugstr {config.VERSION}")
            sys.exit(0)

        handler = getattr(ns, "func", None)
        if handler:
            handler(ns)
        else:
            raise CliError(f"[ERROR] Unknown command: {ns.command}")

    except CliError as e:
        _emit_cli_error(e, fmt)
        sys.exit(e.exit_code)


if __name__ == "__main__":
    main()
