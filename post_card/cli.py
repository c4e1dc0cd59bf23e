"""
Command line entry point for post-card.

    post-card "/2024/01/01/my-post variant:compact" --documents posts.json
    post-card "https://example.com/article hide_image:yes"
    post-card --copy-assets _site
"""

import argparse
import sys
from typing import List, Optional

from post_card.assets import publish_stylesheet
from post_card.config import get_service_logger, setup_logging
from post_card.content import ContentIndex
from post_card.core.exceptions import PostCardException
from post_card.rendering import CardRenderer


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        description="Render a post card for a local document or an external URL"
    )
    parser.add_argument(
        "directive",
        nargs="?",
        help='Card directive: "<reference> [variant:default|compact|vertical] [hide_image:true|false]"',
    )
    parser.add_argument(
        "--documents",
        default=None,
        help="JSON file with the local documents internal references are looked up in",
    )
    parser.add_argument(
        "--copy-assets",
        metavar="DIR",
        default=None,
        help="Copy post-card.css into DIR/assets/css",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the post-card CLI."""
    args = parse_args(argv)
    setup_logging(log_level=args.log_level)
    logger = get_service_logger("cli")

    if not args.directive and not args.copy_assets:
        print("Nothing to do: pass a directive and/or --copy-assets", file=sys.stderr)
        return 2

    try:
        if args.copy_assets:
            target = publish_stylesheet(args.copy_assets)
            print(f"Copied stylesheet to {target}", file=sys.stderr)

        if args.directive:
            content_source = ContentIndex.from_json(args.documents) if args.documents else ContentIndex()
            renderer = CardRenderer(content_source=content_source)
            sys.stdout.write(renderer.render_directive(args.directive))
    except PostCardException as e:
        logger.error("post-card failed", error=e.message)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
