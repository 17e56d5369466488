"""Command-line interface for title/credit extraction."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from trackmeta_parser.compose import compose_file_name, display_artists, display_title
from trackmeta_parser.errors import TaggingError
from trackmeta_parser.models import ExtractionResult
from trackmeta_parser.parser import TrackMetaParser
from trackmeta_parser.tagging import tag_audio

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="trackmeta-parser",
        description="Extract a clean title and role-annotated artists from an uploaded track title.",
    )
    parser.add_argument("title", help="Raw track title as shown on the upload page.")
    parser.add_argument(
        "--username",
        default="",
        help="Uploader name, used as the artist when none can be parsed.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the extraction result as JSON.",
    )
    parser.add_argument(
        "--tag",
        type=Path,
        default=None,
        metavar="AUDIO",
        help="MP3 file to copy and tag with the extracted metadata.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("."),
        help="Directory for the tagged copy (default: current directory).",
    )
    parser.add_argument(
        "--cover",
        type=Path,
        default=None,
        help="Cover image to embed as front cover.",
    )
    parser.add_argument(
        "--comment",
        default=None,
        help="Comment frame text.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def result_to_dict(result: ExtractionResult) -> Dict[str, Any]:
    return {
        "title": result.title,
        "display_title": display_title(result),
        "display_artists": display_artists(result),
        "artists": [
            {
                "name": a.name,
                "role": a.role.value,
                "remix_type": a.remix_type.value if a.remix_type else None,
            }
            for a in result.artists
        ],
        "remix": (
            {"names": list(result.remix.names), "remix_type": result.remix.remix_type.value}
            if result.remix
            else None
        ),
    }


def print_result(result: ExtractionResult) -> None:
    print(f"Title:   {display_title(result)}")
    print(f"Artists: {display_artists(result)}")
    for artist in result.artists:
        suffix = f" ({artist.remix_type.value})" if artist.remix_type else ""
        print(f"  - {artist.name} [{artist.role.value}]{suffix}")


def write_tagged_copy(result: ExtractionResult, args: argparse.Namespace) -> Path:
    audio = args.tag.read_bytes()
    cover = args.cover.read_bytes() if args.cover else None
    mime = "image/png" if args.cover and args.cover.suffix.lower() == ".png" else "image/jpeg"

    tagged = tag_audio(audio, result, comment=args.comment, cover_art=cover, cover_art_mime=mime)

    args.output.mkdir(parents=True, exist_ok=True)
    target = args.output / compose_file_name(result, extension=args.tag.suffix or "mp3")
    target.write_bytes(tagged)
    logger.info("Wrote %s", target)
    return target


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    result = TrackMetaParser().parse(args.title, args.username)

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        print_result(result)

    if args.tag is None:
        return 0

    try:
        write_tagged_copy(result, args)
    except OSError as exc:
        print(f"Cannot read or write file: {exc}", file=sys.stderr)
        return 2
    except TaggingError as exc:
        print(f"Tagging failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
