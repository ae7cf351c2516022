import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .errors import JsonTreeError
from .json_tree import JsonTree
from .loader import DEFAULT_TIMEOUT, load_json

THEMES = ("light", "dark")
METRICS = ("wcwidth", "fixed", "none")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="jsontree", description="Render a JSON document as an SVG tree diagram")
    parser.add_argument("source", help="JSON file path, '-' for stdin, or an http(s) URL")
    parser.add_argument("-o", "--output", help="Write the SVG to this file instead of stdout")
    parser.add_argument("--theme", choices=THEMES, default="light", help="Color theme")
    parser.add_argument(
        "--metrics",
        choices=METRICS,
        default="wcwidth",
        help="Text measurement used to size node boxes",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Timeout for fetching URL sources (seconds)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    console = Console(stderr=True)
    _configure_logging(args.verbose, console)

    try:
        value = load_json(args.source, timeout=args.timeout)
        tree = JsonTree(value, style=args.theme, metrics=args.metrics)
        layout = tree.layout()
        svg = tree.render(layout)
        if args.output:
            Path(args.output).write_text(svg, encoding="utf-8")
        else:
            sys.stdout.write(svg)
    except (JsonTreeError, OSError) as exc:
        console.print(f"[bold red]error:[/bold red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        return 1

    if args.output:
        console.print(
            f"[green]Wrote[/green] {escape(args.output)} "
            f"({len(layout.nodes)} nodes, {len(layout.edges)} edges, "
            f"{layout.width:g}x{layout.height:g})",
            highlight=False,
            soft_wrap=True,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
