"""
rpalscan - RPAL Scanner Command-Line Interface
==============================================

Prints the token stream of an RPAL source file, one token per line.

Usage Examples
--------------
Screened tokens (what a parser sees):
    $ rpalscan fact.rpal

Every token, including whitespace and comments:
    $ rpalscan --all fact.rpal

JSON output:
    $ rpalscan --json fact.rpal > tokens.json

Exit Codes
----------
0 - Success
1 - Lexical error or unreadable source
2 - Invalid arguments
3 - Internal error
"""

import json
import logging
from pathlib import Path
from typing import Optional

import click

from rpal_scanner import __version__
from rpal_scanner.cli.errors import handle_cli_exception
from rpal_scanner.scanner import Scanner, ScannerOptions
from rpal_scanner.tokens import Token

# Configure logging
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def format_token(token: Token) -> str:
    """Format a token as 'line:column  KIND  'value''."""
    position = f"{token.line}:{token.column}"
    return f"{position:<8} {token.kind.name:<11} {token.value!r}"


def token_to_dict(token: Token) -> dict:
    return {
        "kind": token.kind.name,
        "value": token.value,
        "line": token.line,
        "column": token.column,
    }


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-a", "--all", "show_all",
    is_flag=True,
    help="Include whitespace and comment tokens",
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print tokens as a JSON array",
)
@click.option(
    "--keep-comment-newline",
    is_flag=True,
    help="Emit the newline ending a comment as whitespace",
)
@click.option(
    "--encoding",
    default=None,
    help="Source file encoding (default: utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="rpalscan")
def main(
    input_file: Path,
    show_all: bool,
    as_json: bool,
    keep_comment_newline: bool,
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Scan an RPAL source file and print its tokens.

    INPUT_FILE is the RPAL source file to scan.

    \b
    Examples:
        rpalscan fact.rpal            # Tokens a parser would see
        rpalscan -a fact.rpal         # Include whitespace and comments
        rpalscan --json fact.rpal     # Machine-readable output

    Defaults for --encoding and --keep-comment-newline can be set with
    RPAL_SCANNER_ENCODING and RPAL_SCANNER_KEEP_COMMENT_NEWLINE.
    """
    setup_logging(verbose)

    # Environment first, command line overrides
    options = ScannerOptions.from_env()
    if encoding is not None:
        options.encoding = encoding
    if keep_comment_newline:
        options.keep_comment_newline = True

    try:
        logger.debug(f"Scanning {input_file} (encoding={options.encoding})")

        with Scanner(input_file, options) as scanner:
            tokens = scanner.tokens(screened=not show_all)
            if as_json:
                click.echo(json.dumps([token_to_dict(t) for t in tokens], indent=2))
            else:
                for token in tokens:
                    click.echo(format_token(token))

        logger.debug(f"{scanner.token_count} tokens scanned")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
