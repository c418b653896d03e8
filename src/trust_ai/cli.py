"""Command-line interface for TrustAI."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from trust_ai.config import Settings, describe_credentials
from trust_ai.pipeline import analyze
from trust_ai.providers import list_providers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trust-ai",
        description="Score the authenticity of a company's online reviews with AI.",
    )
    parser.add_argument(
        "url",
        nargs="?",
        help="Review page to analyze (e.g., https://www.trustpilot.com/review/example.com)",
    )
    parser.add_argument(
        "-p", "--provider",
        choices=list_providers(),
        default=None,
        help="AI provider to use (default: from .env DEFAULT_PROVIDER)",
    )
    parser.add_argument(
        "--check-key",
        action="store_true",
        help="Report whether an OpenAI key is configured (prefix and length only) and exit",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Load credentials from this file instead of ./.env",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    settings = Settings.from_env(args.env_file)

    if args.check_key:
        print(json.dumps(describe_credentials(settings), indent=2))
        return 0

    if not args.url:
        parser.error("the following arguments are required: url")

    outcome = analyze(args.url, provider_name=args.provider, settings=settings)
    if outcome.is_synthetic:
        print(f"Synthetic result ({outcome.fallback_reason})", file=sys.stderr)
    else:
        print("Result based on live page and model output", file=sys.stderr)

    output = json.dumps(outcome.result.to_wire(), indent=2, ensure_ascii=False)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Output written to {args.output}")
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
