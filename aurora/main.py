import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import LOG_FORMAT, LOG_LEVEL, MAX_REFERENCES
from .exceptions import AuroraError
from .processing.orchestrator import Aurora


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    # Suppress HTTP request logging from OpenAI/httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aurora",
        description="Ask Aurora a question about autism",
    )
    parser.add_argument("question", nargs="?", help="Question to ask")
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument(
        "--max-references",
        type=int,
        default=MAX_REFERENCES,
        help="Maximum number of references to attach",
    )
    parser.add_argument("--status", action="store_true", help="Show service status and exit")
    parser.add_argument(
        "--info", action="store_true", help="Describe the assistant and its scope, then exit"
    )
    parser.add_argument(
        "--topics", action="store_true", help="List suggested topics and exit"
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: INFO)")
    return parser


def print_result(result) -> None:
    print(result.answer)
    if result.references:
        print("\nReferences:")
        for ref in result.references:
            print(f"  - {ref.title} ({ref.organization}) {ref.url}")
    print(f"\nStatus: {result.status.display_name} | Confidence: {result.confidence:.2f}")


async def run(args: argparse.Namespace) -> int:
    aurora = Aurora.from_env()

    if args.status:
        print(json.dumps(aurora.get_status(), indent=2))
        return 0

    if args.info:
        print(json.dumps(aurora.get_info(), indent=2))
        return 0

    if args.topics:
        for topic in aurora.get_suggested_topics():
            print(f"{topic['title']}: {topic['description']}")
            for example in topic["examples"]:
                print(f"  - {example}")
        return 0

    try:
        aurora.validate_question(args.question)
    except AuroraError as e:
        print(f"Error: {e!s}", file=sys.stderr)
        return 2

    result = await aurora.process_question(args.question, max_references=args.max_references)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_result(result)
    return 0


def main() -> None:
    """Run the Aurora command line interface."""
    # Load environment variables from .env file
    # Find the .env file relative to this script, then the working directory
    load_dotenv(Path(__file__).parent.parent / ".env")
    load_dotenv()

    args = build_parser().parse_args()
    configure_logging(args.log_level)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
