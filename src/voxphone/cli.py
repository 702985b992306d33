"""CLI entrypoint for voxphone."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from voxphone.config import configure_logging, load_config
from voxphone.core import run_phonemize
from voxphone.errors import PhonemizerError
from voxphone.io import to_json, write_json
from voxphone.models import PhonemizeRequest, VocabularyResponse
from voxphone.vocab import get_vocabulary


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="voxphone",
        description="Text to phoneme conversion for speech synthesis.",
    )
    subparsers = parser.add_subparsers(dest="command")

    phonemize = subparsers.add_parser("phonemize", help="Convert text to phonemes")
    phonemize.add_argument("text", help="Text to phonemize")
    phonemize.add_argument(
        "--language",
        default=None,
        help="Language tag: a, b, e, f, h, i or p (default from config)",
    )
    phonemize.add_argument(
        "--backend",
        choices=["espeak", "passthrough"],
        default=None,
        help="Phonemization backend (default from config)",
    )
    phonemize.add_argument(
        "--no-normalize",
        action="store_true",
        help="Skip text normalization before phonemization",
    )
    phonemize.add_argument(
        "--ids",
        action="store_true",
        help="Include vocabulary token ids in the output",
    )
    phonemize.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON path. If omitted, prints to stdout.",
    )

    subparsers.add_parser("vocab", help="Print the symbol vocabulary as JSON")

    serve = subparsers.add_parser("serve", help="Run the voxphone HTTP API")
    serve.add_argument("--host", default=None, help="Override API host")
    serve.add_argument("--port", type=int, default=None, help="Override API port")

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    config = load_config()
    configure_logging(config.log_level)

    if args.command == "phonemize":
        request = PhonemizeRequest(
            text=args.text,
            language=args.language or config.default_language,
            backend=args.backend or config.default_backend,
            normalize=not args.no_normalize,
            include_ids=args.ids,
        )
        try:
            response = run_phonemize(request)
        except PhonemizerError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        if args.output:
            write_json(response, args.output)
            print(f"Wrote phonemes JSON to {args.output}")
            return 0
        print(to_json(response))
        return 0

    if args.command == "vocab":
        vocabulary = get_vocabulary()
        summary = VocabularyResponse(size=len(vocabulary), symbols=dict(vocabulary.symbols))
        print(to_json(summary))
        return 0

    if args.command == "serve":
        try:
            import uvicorn
        except ModuleNotFoundError:
            print(
                "`voxphone serve` requires uvicorn. Install project dependencies first.",
                file=sys.stderr,
            )
            return 1

        host = args.host or config.api_host
        port = args.port or config.api_port
        uvicorn.run(
            "voxphone.api:app",
            host=host,
            port=port,
            workers=config.workers,
            reload=False,
        )
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
