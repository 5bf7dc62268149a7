"""CLI entry point for geh."""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from geh import __version__, logger
from geh.dependencies import ensure_cli_dependencies_for_background, ensure_cli_dependencies_for_links
from geh.exceptions import PackageError
from geh.logging import configure_logging
from geh.settings import get_settings
from geh.typing.enums import CompositingMode
from geh.typing.models import BackgroundRequest

if TYPE_CHECKING:
    from geh.settings import Settings
    from geh.typing.protocol import DocumentSource


def _mode_from_cli(value: str) -> CompositingMode:
    """Convert `--mode` CLI value into a compositing mode.

    Args:
        value (str): CLI value, case-insensitive.

    Raises:
        argparse.ArgumentTypeError: If value is not supported.

    Returns:
        CompositingMode: Selected mode.
    """
    try:
        return CompositingMode.from_str(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="geh", description="Set background images and list linked images")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    links_parser = subparsers.add_parser("links", help="Print the image URLs referenced by an HTML document")
    links_parser.add_argument("source", help="Local HTML file or http(s) URL")
    links_parser.add_argument("--uri", default=None, help="Origin URI of a local file")

    background_parser = subparsers.add_parser("background", help="Set an image as the root window background")
    background_parser.add_argument("source", help="Local image file or http(s) URL")
    background_parser.add_argument(
        "-m",
        "--mode",
        type=_mode_from_cli,
        default=None,
        help=f"One of: {', '.join(mode.value for mode in CompositingMode)}",
    )
    background_parser.add_argument("-c", "--color", default=None, help="Color around the image")

    return parser


def _print_image_links(documents: DocumentSource, source: str, uri: str | None) -> int:
    """Print the image links of one document, one per line.

    Returns:
        int: Number of links printed.
    """
    from geh.extraction import extract_image_urls  # noqa: PLC0415

    urls = extract_image_urls(documents.open_document(source, uri=uri))
    for url in urls:
        sys.stdout.write(f"{url}\n")
    return len(urls)


def _run_links(args: argparse.Namespace, settings: Settings) -> int:
    """Print image links of a document, one per line."""
    ensure_cli_dependencies_for_links()
    from geh.fetch import DocumentFetcher  # noqa: PLC0415

    with DocumentFetcher(settings) as fetcher:
        _print_image_links(fetcher, args.source, args.uri)
    return 0


def _build_background_request(args: argparse.Namespace, settings: Settings, image_path: str) -> BackgroundRequest:
    """Build background request from CLI arguments, falling back to settings.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings.
        image_path (str): Local image path.

    Returns:
        BackgroundRequest: Request object.
    """
    return BackgroundRequest(
        image_path=image_path,
        color=args.color or settings.background_color,
        mode=args.mode or settings.background_mode,
    )


def _run_background(args: argparse.Namespace, settings: Settings) -> int:
    """Set the root window background."""
    ensure_cli_dependencies_for_background()
    from geh.background.setter import set_background  # noqa: PLC0415
    from geh.fetch import DocumentFetcher  # noqa: PLC0415

    with DocumentFetcher(settings) as fetcher:
        document = fetcher.open_document(args.source)
        request = _build_background_request(args, settings, str(document.path))
        result = set_background(request, settings)
    if not result.success:
        logger.warning("Failed to set background", extra={"source": args.source})
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        int: Exit code (0 for success, 1 for error).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "links": _run_links,
        "background": _run_background,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        return handler(args, settings)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1
    except KeyboardInterrupt:
        logger.info("Aborted by user")
        return 130
    except Exception:
        logger.exception("Unexpected error", extra={"command": args.command})
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
