"""Command-line interface for VendorPulse."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FileConstants
from .core.errors import VendorPulseError
from .core.lexicon import configured_lexicon
from .core.models import SentimentResult
from .core.presentation import get_sentiment_icon, describe_result
from .core.scoring import analyze_sentiment
from .services.review_client import ReviewService
from .utils.data_prep import load_reviews, prepare_export, export_to_json

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def _print_result(title: str, result: SentimentResult):
    print(f"\n{title}")
    print(f"  {get_sentiment_icon(result.sentiment)} {result.label} ({result.sentiment.value})")
    print(f"  {describe_result(result)}")
    print(f"  Score: {result.score}/100")
    print(f"  Confidence: {result.confidence}%")
    print(f"  Average rating: {result.average_rating:.1f}/5 from {result.review_count} reviews")


def cmd_score(args):
    """Score reviews from a JSON file."""
    reviews = load_reviews(args.input_file)
    print(f"Loaded {len(reviews)} reviews from {args.input_file}")

    result = analyze_sentiment(reviews, configured_lexicon())
    _print_result(f"Sentiment for {args.input_file}:", result)

    if args.out:
        export_to_json(prepare_export(args.vendor, result), args.out)
        print(f"Results exported to {args.out}")


def cmd_vendor(args):
    """Fetch a vendor's reviews and score them."""
    service = ReviewService()
    result = service.get_vendor_sentiment(args.vendor_id)
    _print_result(f"Sentiment for vendor {args.vendor_id}:", result)

    if args.out:
        export_to_json(prepare_export(args.vendor_id, result), args.out)
        print(f"Results exported to {args.out}")


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return 1

    if args.pretty:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        source = Path(args.input_file)
        output_file = args.output or str(source.with_name(f"{source.stem}_export{source.suffix}"))
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        print(f"Exported to {output_file}")
    return 0


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    if not app_path.exists():
        print(f"Streamlit app not found at {app_path}")
        return 1

    print("Launching VendorPulse UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nUI stopped by user")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="VendorPulse - Vendor Review Sentiment")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Score command
    score_parser = subparsers.add_parser('score', help='Score reviews from a JSON file')
    score_parser.add_argument('--in', dest='input_file', required=True, help='Reviews JSON file')
    score_parser.add_argument('--vendor', default=None, help='Vendor ID recorded in the export')
    score_parser.add_argument('--out', help='Output JSON file')

    # Vendor command
    vendor_parser = subparsers.add_parser('vendor', help='Fetch and score a vendor\'s reviews')
    vendor_parser.add_argument('vendor_id', help='Vendor ID')
    vendor_parser.add_argument('--out', help='Output JSON file')

    # Export command
    export_parser = subparsers.add_parser('export', help='Export analysis results')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging()

    commands = {
        'score': cmd_score,
        'vendor': cmd_vendor,
        'export': cmd_export,
        'ui': cmd_ui,
    }

    try:
        return commands[args.command](args) or 0
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 130
    except (VendorPulseError, OSError, ValueError) as e:
        logger.error(f"Command failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
