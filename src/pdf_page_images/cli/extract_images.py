"""
Command-line interface for page image extraction.

Provides the main entry point for extracting the images of selected pages
of a document.
"""

import argparse
import logging
import sys

from pdf_page_images.core import extract_document
from pdf_page_images.core.constants import DEFAULT_OUTPUT_DIR, DEFAULT_PASSWORD


class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def configure_logging(verbose=False):
    """Send log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser():
    """
    Create and return the argument parser for the CLI.

    Returns
    -------
    argparse.ArgumentParser
        Configured argument parser.
    """
    parser = UsageErrorParser(
        prog='pdf-page-images',
        description='Extract the embedded images of selected document pages',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s input.pdf
  %(prog)s -o ./output input.pdf 1,3-5
  %(prog)s -p secret -o ./output input.pdf 9-7,N
        """
    )

    parser.add_argument(
        '--password', '-p',
        type=str,
        default=DEFAULT_PASSWORD,
        help='Document password'
    )

    parser.add_argument(
        '--output-path', '-o',
        type=str,
        default=DEFAULT_OUTPUT_DIR,
        help='Output directory for extracted images (default: current directory)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        'file',
        help='Path to the document'
    )

    parser.add_argument(
        'pages',
        nargs='?',
        default=None,
        help="""
Comma separated list of page numbers and ranges (default: all pages).
N is the last page; ranges may run backwards, e.g. 9-7.
        """
    )

    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    sys.exit(extract_document(
        args.file,
        pages=args.pages,
        output_dir=args.output_path,
        password=args.password,
    ))


if __name__ == "__main__":
    main()
