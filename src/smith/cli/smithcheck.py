"""
smithcheck - Tokenizer Case Runner
==================================

Runs tokenizer cases and reports which ones match. With no arguments the
built-in reference cases are used.

Usage Examples
--------------
Built-in cases:
    $ smithcheck

Cases from a file:
    $ smithcheck cases.json

Machine-readable report:
    $ smithcheck --json cases.json

Write the built-in cases out as a starting point for a case file:
    $ smithcheck --dump-builtin > cases.json
"""

import json
from pathlib import Path
from typing import Optional

import click

from smith import __version__
from smith.cases import BUILTIN_CASES
from smith.cli.errors import ExitCode, configure_logging, handle_cli_exception
from smith.config import SmithConfig
from smith.lexer import tokenize
from smith.report import load_cases, render_json, render_text, run_cases


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "cases_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print the report as JSON",
)
@click.option(
    "--no-spans",
    is_flag=True,
    help="Hide token spans in mismatch listings",
)
@click.option(
    "--no-color",
    is_flag=True,
    help="Disable coloured PASS/FAIL markers",
)
@click.option(
    "--dump-builtin",
    is_flag=True,
    help="Print the built-in cases as a JSON case file and exit",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="smithcheck")
def main(
    cases_file: Optional[Path],
    as_json: bool,
    no_spans: bool,
    no_color: bool,
    dump_builtin: bool,
    verbose: bool,
) -> None:
    """
    Check the tokenizer against expected token lists.

    CASES_FILE is a JSON list of {"name", "code", "expected"} objects.
    Without it, the built-in reference cases are run.

    Exits with status 0 when every case matches and 1 otherwise.
    """
    configure_logging(verbose)

    try:
        if dump_builtin:
            click.echo(json.dumps([case.to_dict() for case in BUILTIN_CASES], indent=2))
            return

        config = SmithConfig.from_env().override(
            output_format="json" if as_json else None,
            show_spans=False if no_spans else None,
            color=False if no_color else None,
        )

        if cases_file is None:
            cases = list(BUILTIN_CASES)
            source_name = "built-in cases"
        else:
            cases = load_cases(cases_file)
            source_name = str(cases_file)

        if verbose:
            click.echo(f"Running {len(cases)} cases from {source_name}", err=True)

        report = run_cases(tokenize, cases)

        if config.output_format == "json":
            click.echo(render_json(report))
        else:
            click.echo(render_text(report, config))

    except Exception as e:
        handle_cli_exception(e, verbose)

    if not report.ok:
        raise SystemExit(ExitCode.FAILURE)


if __name__ == "__main__":
    main()
