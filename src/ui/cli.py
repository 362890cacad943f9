"""CLI shell over the operation registry: run, encode/decode, analyze."""
from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from common.config import DEFAULT_PROFILE, check_input_limit, error_mode_from_policy, load_runtime_config
from common.errors import ErrorCode, StringityError
from common.models import RuntimeConfig
from common.serialization import format_text_report, serialize_text_report
from core.metrics import build_text_report
from core.operations import CODEC_PAIRS, OPERATIONS, codec_pair, list_operations, roundtrip, run_operation

OPERATION_KINDS = ("encode", "decode", "metric", "transform", "digest")


def read_input_text(args: argparse.Namespace, runtime: RuntimeConfig) -> str:
    """Resolve input from the positional text, ``--file``, or stdin (in that order)."""

    if getattr(args, "text", None) is not None:
        text = args.text
    elif getattr(args, "file", None):
        path = Path(args.file)
        errors = error_mode_from_policy(runtime.global_settings.error_policy)
        try:
            text = path.read_text(encoding=runtime.global_settings.encoding, errors=errors)
        except FileNotFoundError as exc:
            raise StringityError(ErrorCode.INPUT_ERROR, f"Input file '{path}' not found") from exc
        except UnicodeDecodeError as exc:
            raise StringityError(
                ErrorCode.INPUT_ERROR,
                f"Input file '{path}' is not valid {runtime.global_settings.encoding}: {exc.reason}",
            ) from exc
    else:
        text = sys.stdin.read()

    check_input_limit(text, runtime.profile)
    return text


def build_options(args: argparse.Namespace, runtime: RuntimeConfig) -> Dict[str, Any]:
    level = getattr(args, "level", None)
    seed = getattr(args, "seed", None)
    if seed is None:
        seed = runtime.profile.shuffle_seed
    return {
        "level": level if level is not None else runtime.profile.compression_level,
        "rng": random.Random(seed) if seed is not None else None,
    }


def command_list(args: argparse.Namespace) -> None:
    for name in list_operations(args.kind):
        operation = OPERATIONS[name]
        print(f"{name:<28} {operation.kind:<9} {operation.description}")


def command_run(args: argparse.Namespace) -> None:
    runtime: RuntimeConfig = args.runtime
    text = read_input_text(args, runtime)
    print(run_operation(args.operation, text, options=build_options(args, runtime)))


def command_encode(args: argparse.Namespace) -> None:
    runtime: RuntimeConfig = args.runtime
    encoder, _ = codec_pair(args.codec)
    text = read_input_text(args, runtime)
    print(run_operation(encoder.name, text, options=build_options(args, runtime)))


def command_decode(args: argparse.Namespace) -> None:
    runtime: RuntimeConfig = args.runtime
    _, decoder = codec_pair(args.codec)
    text = read_input_text(args, runtime)
    if args.text is None:
        # Trailing newline from files and stdin is not part of the payload.
        text = text.rstrip("\r\n")
    print(run_operation(decoder.name, text))


def command_roundtrip(args: argparse.Namespace) -> None:
    runtime: RuntimeConfig = args.runtime
    text = read_input_text(args, runtime)
    encoded, decoded = roundtrip(args.codec, text, options=build_options(args, runtime))
    print(encoded)
    if decoded != text:
        print(f"[roundtrip] {args.codec}: MISMATCH (decoded {decoded!r})")
        raise SystemExit(1)
    print(f"[roundtrip] {args.codec}: OK")


def command_analyze(args: argparse.Namespace) -> None:
    runtime: RuntimeConfig = args.runtime
    text = read_input_text(args, runtime)
    report = build_text_report(text)
    output_format = args.format or runtime.profile.output_format
    if output_format == "json":
        rendered = json.dumps(serialize_text_report(report), indent=2, ensure_ascii=False)
    else:
        rendered = format_text_report(report)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n", encoding="utf-8")
        print(f"Wrote {output_format} report for {report.characters} character(s) to {output_path}")
        return
    print(rendered)


def build_parser() -> argparse.ArgumentParser:
    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Profile from config/defaults.json (e.g., default, fast, reproducible)",
    )
    shared.add_argument("--config", help="Path to an alternative configuration JSON")

    parser = argparse.ArgumentParser(
        prog="stringity", description="Text codecs, metrics and transforms"
    )
    subparsers = parser.add_subparsers(dest="command")

    list_cmd = subparsers.add_parser("list", parents=[shared], help="List available operations")
    list_cmd.add_argument("--kind", choices=OPERATION_KINDS, help="Only show operations of this kind")
    list_cmd.set_defaults(func=command_list)

    run = subparsers.add_parser("run", parents=[shared], help="Run a named operation")
    run.add_argument("operation", help="Operation name (see 'stringity list')")
    _add_source_arguments(run)
    _add_tuning_arguments(run)
    run.set_defaults(func=command_run)

    for name, handler, help_text in (
        ("encode", command_encode, "Encode text with a reversible codec"),
        ("decode", command_decode, "Decode a codec representation back to text"),
        ("roundtrip", command_roundtrip, "Encode then decode and verify the input survives"),
    ):
        sub = subparsers.add_parser(name, parents=[shared], help=help_text)
        sub.add_argument("codec", choices=sorted(CODEC_PAIRS), help="Codec name")
        _add_source_arguments(sub)
        _add_tuning_arguments(sub)
        sub.set_defaults(func=handler)

    analyze = subparsers.add_parser("analyze", parents=[shared], help="Print every text metric")
    _add_source_arguments(analyze)
    analyze.add_argument("--format", choices=["text", "json"], help="Override the profile output format")
    analyze.add_argument("--output", help="Write the report to this path instead of stdout")
    analyze.set_defaults(func=command_analyze)

    return parser


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("text", nargs="?", help="Input text (omit to read --file or stdin)")
    parser.add_argument("--file", help="Read input text from this file")


def _add_tuning_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--level", type=int, choices=range(0, 10), metavar="0-9", help="Compression level override")
    parser.add_argument("--seed", type=int, help="Seed for shuffle (overrides the profile)")


def configure_logging(runtime: RuntimeConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, runtime.global_settings.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        config_path = Path(args.config) if args.config else None
        args.runtime = load_runtime_config(args.profile, config_path=config_path)
        configure_logging(args.runtime)
        args.func(args)
    except StringityError as exc:
        raise SystemExit(f"error: {exc}") from exc


if __name__ == "__main__":
    main()
