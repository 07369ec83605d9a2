"""Command line entry point: ``inputid clean`` and ``inputid generate``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bs4 import BeautifulSoup
from dotenv import load_dotenv

from .core.modes import DocumentMode
from .core.normalizer import normalize
from .exceptions import InputIdError
from .input_id import InputId
from .options import validate_fallback, validate_separator
from .utils.config import Config
from .utils.logger import setup_logger


PARSERS = ("lxml", "html.parser")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="inputid", description="Generate HTML form control ids"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to an inputid.yml configuration file",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    clean_parser = subparsers.add_parser("clean", help="Sanitize a candidate id")
    clean_parser.add_argument("text", help="Raw candidate string")
    clean_parser.add_argument(
        "--legacy",
        action="store_true",
        help="Apply pre-HTML5 rules (ASCII only, must start with a letter)",
    )
    clean_parser.add_argument("--fallback", help="Fallback token (default: f)")
    clean_parser.add_argument("--separator", help='Separator: "_", "-" or ""')

    generate_parser = subparsers.add_parser(
        "generate", help="Generate an id for an element of an HTML document"
    )
    generate_parser.add_argument("document", type=Path, help="HTML file")
    generate_parser.add_argument(
        "--selector", help="CSS selector of the element the id is generated for"
    )
    generate_parser.add_argument("--name")
    generate_parser.add_argument("--value")
    generate_parser.add_argument("--type")
    generate_parser.add_argument("--prefix")
    generate_parser.add_argument("--fallback")
    generate_parser.add_argument("--separator")
    generate_parser.add_argument(
        "--unique",
        dest="force_uniqueness",
        action="store_const",
        const=True,
        default=None,
        help="Avoid ids already present in the document",
    )
    generate_parser.add_argument(
        "--no-unique",
        dest="force_uniqueness",
        action="store_const",
        const=False,
        help="Only sanitize, ignoring ids present in the document",
    )
    generate_parser.add_argument(
        "--parser", choices=PARSERS, default="lxml", help="BeautifulSoup tree builder"
    )

    return parser.parse_args(argv)


def load_cli_config(config_path: Optional[Path]) -> Config:
    if config_path is not None:
        return Config.from_file(config_path)
    return Config()


def run_clean(args: argparse.Namespace, config: Config) -> str:
    separator = args.separator if args.separator is not None else config.separator
    fallback = args.fallback if args.fallback is not None else config.fallback
    separator = validate_separator("_" if separator is None else separator)
    fallback = validate_fallback("f" if fallback is None else fallback)
    mode = DocumentMode.LEGACY if args.legacy else DocumentMode.STRICT
    return normalize(args.text, mode, fallback, separator)


def run_generate(args: argparse.Namespace, config: Config) -> str:
    logger = logging.getLogger(__name__)
    markup = args.document.read_text(encoding="utf-8")
    soup = BeautifulSoup(markup, args.parser)

    element = None
    if args.selector:
        element = soup.select_one(args.selector)
        if element is None:
            raise ValueError(f"No element matches selector {args.selector!r}")
        logger.info("Generating id for <%s> matched by %r", element.name, args.selector)

    input_id = InputId(
        element,
        owner_document=soup,
        name=args.name,
        value=args.value,
        type=args.type,
        prefix=args.prefix,
        separator=args.separator,
        fallback=args.fallback,
        force_uniqueness=args.force_uniqueness,
        config=config,
    )
    return input_id.to_string()


COMMANDS = {
    "clean": run_clean,
    "generate": run_generate,
}


def main(argv: Optional[List[str]] = None) -> None:
    logger: Optional[logging.Logger] = None

    try:
        args = parse_args(argv)
        load_dotenv()
        config = load_cli_config(args.config)
        logger = setup_logger(config.logging or {"level": "WARNING"})
        if args.config is not None:
            logger.info("Loaded configuration from %s", args.config)

        command = COMMANDS.get(args.command)
        if command is None:  # pragma: no cover - argparse rejects unknown commands
            raise ValueError(f"Unknown command: {args.command}")
        print(command(args, config))
    except InputIdError as exc:
        _fallback_logger(logger).error("Invalid options: %s", exc)
        raise SystemExit(1)
    except (OSError, ValueError):
        _fallback_logger(logger).exception("inputid failed")
        raise SystemExit(1)


def _fallback_logger(logger: Optional[logging.Logger]) -> logging.Logger:
    if logger is not None and logger.handlers:
        return logger
    logging.basicConfig(level=logging.ERROR, stream=sys.stderr)
    return logging.getLogger(__name__)


if __name__ == "__main__":
    main()
