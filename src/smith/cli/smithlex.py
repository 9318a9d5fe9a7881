"""
smithlex - Tokenizer Command-Line Interface
===========================================

Tokenizes a source file and prints one token per line, or the token
records as JSON.

Usage Examples
--------------
Print tokens:
    $ smithlex program.sm

Read from standard input:
    $ echo "3.max(10)" | smithlex -

JSON records for other tools:
    $ smithlex --json program.sm

Fail on the first invalid character:
    $ smithlex --strict program.sm
"""

import json
from pathlib import Path
from typing import Sequence

import click

from smith import __version__
from smith.cli.errors import configure_logging, handle_cli_exception
from smith.config import SmithConfig
from smith.lexer import Token, TokenKind, tokenize, tokenize_strict


def format_token_line(token: Token, show_spans: bool = True) -> str:
    """
    Format a token as a single listing line.

    Example:
        SYMBOL     'max'        0:4-0:7
    """
    line = f"{token.kind.name:<10} {token.value!r}"
    if show_spans:
        line = f"{line:<23} {token.span!r}"
    return line


def format_listing(tokens: Sequence[Token], show_spans: bool = True) -> str:
    return "\n".join(format_token_line(t, show_spans) for t in tokens)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print token records as JSON (default: from SMITH_FORMAT, else text)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error at the first invalid character",
)
@click.option(
    "--no-spans",
    is_flag=True,
    help="Hide token spans in text output",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="smithlex")
def main(
    input_file: Path,
    as_json: bool,
    strict: bool,
    no_spans: bool,
    verbose: bool,
) -> None:
    """
    Tokenize a source file.

    INPUT_FILE is the source to tokenize, or - for standard input.

    \b
    Examples:
        smithlex program.sm            # Token listing
        smithlex --json program.sm     # JSON token records
        smithlex --strict program.sm   # Reject invalid characters
    """
    configure_logging(verbose)

    try:
        config = SmithConfig.from_env().override(
            output_format="json" if as_json else None,
            strict=True if strict else None,
            show_spans=False if no_spans else None,
        )

        if str(input_file) == "-":
            filename = "<stdin>"
            source = click.get_text_stream("stdin").read()
        else:
            filename = str(input_file)
            source = input_file.read_text(encoding="utf-8")

        if config.strict:
            tokens = tokenize_strict(source, filename)
        else:
            tokens = tokenize(source)

        if config.output_format == "json":
            click.echo(json.dumps([t.to_dict() for t in tokens], indent=2))
        elif tokens:
            click.echo(format_listing(tokens, config.show_spans))

        invalid_count = sum(1 for t in tokens if t.kind is TokenKind.INVALID)
        if invalid_count:
            click.echo(f"warning: {invalid_count} invalid character(s) in {filename}", err=True)

        if verbose:
            click.echo(f"Tokenized {filename}: {len(tokens)} tokens", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
