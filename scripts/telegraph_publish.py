#!/usr/bin/env python3
"""
Publish a Markdown or HTML file as a Telegraph page.

Usage:
    python scripts/telegraph_publish.py article.md --title "My Post"
    python scripts/telegraph_publish.py page.html --title "My Post" --mode html
    python scripts/telegraph_publish.py article.md --title "Draft" --dry-run

Local images referenced from the content (![alt](./img.png) or
<img src="img.png">) are uploaded to Telegraph first and their references
rewritten to the uploaded URLs.

Authentication (in priority order):
1. --token, or TELEGRAPH_ACCESS_TOKEN env var
2. A new account created with --short-name (its token is printed so it can be
   reused)

Environment variables:
- TELEGRAPH_ACCESS_TOKEN: Access token of an existing account
- TELEGRAPH_API_ROOT: API root, e.g. https://api.graph.org where telegra.ph is blocked
"""

import argparse
import asyncio
import json
import logging
import re
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

load_dotenv(Path(__file__).parent.parent / ".env")

from telepage.api import Telegraph, TelegraphError  # noqa: E402
from telepage.content import ContentError, ParseMode, dump_nodes, parse  # noqa: E402
from telepage.logging import configure_logging, end_run, start_run  # noqa: E402

logger = logging.getLogger(__name__)

# ![alt](path) in Markdown, src="path" in HTML
MARKDOWN_IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\(([^)\s]+)\)")
HTML_IMAGE_PATTERN = re.compile(r"""(<img\b[^>]*?\bsrc=["'])([^"']+)(["'])""", re.IGNORECASE)

MODE_BY_SUFFIX = {
    ".md": ParseMode.MARKDOWN,
    ".markdown": ParseMode.MARKDOWN,
    ".html": ParseMode.HTML,
    ".htm": ParseMode.HTML,
}


def detect_mode(path: Path, explicit: str | None) -> ParseMode:
    """Pick the parse mode from --mode, else from the file suffix (default Markdown)."""
    if explicit:
        return ParseMode(explicit)
    return MODE_BY_SUFFIX.get(path.suffix.lower(), ParseMode.MARKDOWN)


def find_local_images(text: str, mode: ParseMode, base_dir: Path) -> list[str]:
    """Find image references that point at existing local files.

    Returns:
        References exactly as written in the source, in order of appearance
    """
    if mode is ParseMode.MARKDOWN:
        references = [m.group(2) for m in MARKDOWN_IMAGE_PATTERN.finditer(text)]
    else:
        references = [m.group(2) for m in HTML_IMAGE_PATTERN.finditer(text)]

    local = []
    for reference in references:
        if "://" in reference or reference in local:
            continue
        if (base_dir / reference).is_file():
            local.append(reference)
        else:
            logger.warning(f"Local image not found: {reference}")
    return local


def replace_image_urls(text: str, mode: ParseMode, url_mapping: dict[str, str]) -> str:
    """Replace local image references with uploaded URLs."""
    if mode is ParseMode.MARKDOWN:

        def replace_markdown(match: re.Match) -> str:
            url = url_mapping.get(match.group(2))
            return f"![{match.group(1)}]({url})" if url else match.group(0)

        return MARKDOWN_IMAGE_PATTERN.sub(replace_markdown, text)

    def replace_html(match: re.Match) -> str:
        url = url_mapping.get(match.group(2))
        return f"{match.group(1)}{url}{match.group(3)}" if url else match.group(0)

    return HTML_IMAGE_PATTERN.sub(replace_html, text)


async def publish(args: argparse.Namespace) -> int:
    source = args.file.read_text(encoding="utf-8")
    mode = detect_mode(args.file, args.mode)

    if args.dry_run:
        content = parse(source, mode)
        output = content if isinstance(content, str) else dump_nodes(content)
        print(json.dumps(output, ensure_ascii=False, indent=2))
        return 0

    async with Telegraph(
        args.token,
        short_name=args.short_name,
        author_name=args.author_name,
        author_url=args.author_url,
    ) as tph:
        account = await tph.setup_account()
        if account.access_token:
            logger.info("Created a new account; reuse it with TELEGRAPH_ACCESS_TOKEN")
            print(f"Access token: {account.access_token}")

        url_mapping = {}
        for reference in find_local_images(source, mode, args.file.parent):
            url_mapping[reference] = await tph.upload(args.file.parent / reference)
            logger.info(f"Uploaded {reference} -> {url_mapping[reference]}")
        source = replace_image_urls(source, mode, url_mapping)

        page = await tph.create(
            args.title,
            source,
            author_name=args.author_name,
            author_url=args.author_url,
            parse_mode=mode,
        )

    print(page.url)
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Publish a Markdown or HTML file to Telegraph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "file",
        type=Path,
        help="Path to the Markdown or HTML file to publish",
    )
    parser.add_argument(
        "--title",
        required=True,
        help="Page title",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=None,
        help="Input format (default: from file extension, else markdown)",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Access token (or set TELEGRAPH_ACCESS_TOKEN)",
    )
    parser.add_argument(
        "--short-name",
        default=None,
        help="Short name for a new account when no token is available",
    )
    parser.add_argument(
        "--author-name",
        default=None,
        help="Author name shown below the title",
    )
    parser.add_argument(
        "--author-url",
        default=None,
        help="Link opened when the author name is clicked",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the converted content as JSON instead of publishing",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    if not args.file.exists():
        logger.error(f"File not found: {args.file}")
        sys.exit(1)

    start_run(f"publish-{args.file.stem}")
    try:
        sys.exit(asyncio.run(publish(args)))
    except (ContentError, TelegraphError) as e:
        logger.error(str(e))
        sys.exit(1)
    finally:
        end_run()


if __name__ == "__main__":
    main()
