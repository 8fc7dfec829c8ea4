"""
Command-line entrypoint.  Use from the project root:

  python -m content_profile transcript.txt --context "Air date: March 3"
  cat transcript.txt | python -m content_profile - --output-dir out/

The model output is echoed as it streams in.  The raw output is saved as
``content-profile-YYYY-MM-DD.json`` and, when it parses, the RTF document as
``<slug>.rtf`` in the output directory.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Settings
from .exports import write_export
from .pipeline import ContentProfiler

logger = logging.getLogger(__name__)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _echo(fragment: str) -> None:
    sys.stdout.write(fragment)
    sys.stdout.flush()


def build_profiler(settings: Settings) -> ContentProfiler:
    return ContentProfiler(settings=settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="content_profile",
        description="Generate a content profile (title, tags, summary, description) from a transcript",
    )
    parser.add_argument("transcript", help="Transcript file, or '-' to read from stdin")
    context = parser.add_mutually_exclusive_group()
    context.add_argument("--context", help="Additional context for the model")
    context.add_argument("--context-file", help="Read additional context from a file")
    parser.add_argument("--system-prompt-file", help="Instruction template to use instead of the default")
    parser.add_argument("--user-prompt-file", help="Task template to use instead of the default")
    parser.add_argument("--output-dir", default=".", help="Where to save the exports (default: current directory)")
    parser.add_argument("--model", help="Model name (default: $GENAI_MODEL or the built-in default)")
    parser.add_argument("--quiet", action="store_true", help="Do not echo the model output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(levelname)s: %(name)s  %(message)s",
    )

    settings = Settings.from_env()
    if args.model:
        settings = dataclasses.replace(settings, model_name=args.model)

    transcript = _read_text(args.transcript)
    if args.context_file:
        context = _read_text(args.context_file)
    else:
        context = args.context or ""
    system_prompt = _read_text(args.system_prompt_file) if args.system_prompt_file else None
    user_prompt = _read_text(args.user_prompt_file) if args.user_prompt_file else None

    result = build_profiler(settings).generate(
        transcript,
        context,
        system_prompt,
        user_prompt,
        on_fragment=None if args.quiet else _echo,
    )
    if result.raw and not args.quiet:
        sys.stdout.write("\n")

    raw_path = write_export(result.raw_export(), args.output_dir) if result.raw else None
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    document = result.document_export()
    if document is None:
        print(f"Invalid JSON format; only the raw output was saved to {raw_path}.", file=sys.stderr)
        return 0
    path = write_export(document, args.output_dir)
    logger.info("Document saved to %s", path)
    return 0
