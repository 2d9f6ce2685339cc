import argparse
import logging
import sys
from typing import List, Optional

from ..application.services.content_id_service import ContentIdService
from ..domain.errors import DecodeError
from ..domain.ports.content_hasher_port import HashAlgorithm
from ..infrastructure.container import ContainerConfig, EntropyConfig, HashingConfig
from ..infrastructure.di import AppInjector

logger = logging.getLogger(__name__)


def _read_content(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def run_hash(service: ContentIdService, paths: List[str]) -> int:
    """Print the content ID of each file."""
    for path in paths:
        content_id = service.identify(_read_content(path))
        print(f"{content_id}  {path}")
    return 0


def run_random(service: ContentIdService, count: int) -> int:
    """Print ``count`` random content IDs."""
    for _ in range(count):
        print(service.generate())
    return 0


def run_check(service: ContentIdService, texts: List[str]) -> int:
    """Report whether each argument is a valid content ID."""
    exit_code = 0
    for text in texts:
        try:
            service.parse(text)
        except DecodeError as err:
            print(f"{text}: {err}", file=sys.stderr)
            exit_code = 1
        else:
            print(f"{text}: ok")
    return exit_code


def run_decode(service: ContentIdService, texts: List[str]) -> int:
    """Print the hexadecimal payload of each content ID."""
    exit_code = 0
    for text in texts:
        try:
            content_id = service.parse(text)
        except DecodeError as err:
            print(f"{text}: {err}", file=sys.stderr)
            exit_code = 1
        else:
            print(content_id.to_hex())
    return exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocid",
        description="Ocean Content IDs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ocid hash package.tar            # Content ID of a file
  cat manifest.toml | ocid hash -  # Content ID of stdin
  ocid random -n 3                 # Three random IDs
  ocid check <id> <id>             # Validate IDs
  ocid decode <id>                 # Show the raw payload as hex
        """
    )

    parser.add_argument(
        "--algorithm",
        type=str,
        choices=[algorithm.value for algorithm in HashAlgorithm],
        default=HashAlgorithm.BLAKE3.value,
        help="Hash algorithm for 'hash' (default: blake3)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Log level (default: warning)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    hash_parser = subparsers.add_parser("hash", help="Hash files into IDs")
    hash_parser.add_argument("paths", nargs="+", help="Files, or '-' for stdin")

    random_parser = subparsers.add_parser("random", help="Generate random IDs")
    random_parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=1,
        help="Number of IDs (default: 1)"
    )
    random_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output; not for production use"
    )

    check_parser = subparsers.add_parser("check", help="Validate IDs")
    check_parser.add_argument("ids", nargs="+")

    decode_parser = subparsers.add_parser("decode", help="Decode IDs to hex")
    decode_parser.add_argument("ids", nargs="+")

    return parser


def build_config(args: argparse.Namespace) -> ContainerConfig:
    return ContainerConfig(
        hashing=HashingConfig(algorithm=HashAlgorithm(args.algorithm)),
        entropy=EntropyConfig(seed=getattr(args, "seed", None)),
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    service = AppInjector(config=build_config(args)).get_service()
    logger.debug("Running '%s'", args.command)

    if args.command == "hash":
        return run_hash(service, args.paths)
    if args.command == "random":
        return run_random(service, args.count)
    if args.command == "check":
        return run_check(service, args.ids)
    if args.command == "decode":
        return run_decode(service, args.ids)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
