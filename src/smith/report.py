"""
Smith Case Reporting
====================

Runs (code, expected tokens) cases through a tokenizer and describes the
outcome. Everything here is a pure function of its inputs: the reporter
never prints, and the tokenizer under test is passed in rather than
imported, so any callable with the ``tokenize`` signature can be checked.

Case File Format
----------------
A JSON list of objects; ``name`` is optional:

    [
      {
        "name": "function call",
        "code": "foo(x)",
        "expected": [
          {"kind": "symbol", "value": "foo", "span": [[0, 0], [0, 3]]},
          {"kind": "delimiter", "value": "(", "span": [[0, 3], [0, 4]]},
          {"kind": "symbol", "value": "x", "span": [[0, 4], [0, 5]]},
          {"kind": "delimiter", "value": ")", "span": [[0, 5], [0, 6]]}
        ]
      }
    ]

Text Report
-----------
    PASS  function call
    FAIL  member call on int
      code:
        3.max(10)
      actual:
        [ ... ]
      expected:
        [ ... ]

    1 passed, 1 failed
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Sequence
import json
import logging

import click

from smith.config import SmithConfig
from smith.errors import CaseFileError, TokenFormatError
from smith.lexer.tokens import Token

logger = logging.getLogger(__name__)


Tokenizer = Callable[[str], Sequence[Token]]


# =============================================================================
# Cases and Results
# =============================================================================

@dataclass(frozen=True)
class UnitTest:
    """
    A single tokenizer check.

    Attributes:
        name: Human-readable label (defaults to the code itself)
        code: Source text to tokenize
        expected: Tokens the tokenizer should produce
    """
    name: str
    code: str
    expected: tuple[Token, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "code": self.code,
            "expected": [t.to_dict() for t in self.expected],
        }


@dataclass(frozen=True)
class CaseResult:
    """
    Outcome of running one UnitTest.

    Attributes:
        case: The case that was run
        actual: Tokens produced, or None if the tokenizer raised
        error: Text of the exception raised by the tokenizer, if any
    """
    case: UnitTest
    actual: Optional[tuple[Token, ...]]
    error: Optional[str] = None

    @property
    def matched(self) -> bool:
        """True when the tokens equal the expected ones (kind, value, span)."""
        return self.error is None and self.actual == self.case.expected

    @property
    def status(self) -> str:
        return "match" if self.matched else "mismatch"

    def to_dict(self) -> dict[str, Any]:
        record = self.case.to_dict()
        record["status"] = self.status
        record["actual"] = None if self.actual is None else [t.to_dict() for t in self.actual]
        if self.error is not None:
            record["error"] = self.error
        return record


@dataclass(frozen=True)
class Report:
    """Results of a case run, in case order."""
    results: tuple[CaseResult, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.matched)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def failures(self) -> list[CaseResult]:
        return [r for r in self.results if not r.matched]

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "failed": self.failed,
            "results": [r.to_dict() for r in self.results],
        }


def run_cases(tokenizer: Tokenizer, cases: Iterable[UnitTest]) -> Report:
    """
    Run every case through ``tokenizer``.

    A tokenizer that raises fails only the case that triggered it; the
    remaining cases still run.

    Args:
        tokenizer: Callable mapping source text to tokens
        cases: Cases to run

    Returns:
        Report with one result per case
    """
    results = []
    for case in cases:
        try:
            actual = tuple(tokenizer(case.code))
        except Exception as e:
            logger.debug(f"Case {case.name!r} raised {type(e).__name__}: {e}")
            results.append(CaseResult(case, None, f"{type(e).__name__}: {e}"))
            continue

        result = CaseResult(case, actual)
        logger.debug(f"Case {case.name!r}: {result.status}")
        results.append(result)

    report = Report(tuple(results))
    logger.debug(f"Ran {len(report.results)} cases: {report.passed} passed, {report.failed} failed")
    return report


# =============================================================================
# Formatting
# =============================================================================

def format_token(token: Token, show_spans: bool = True) -> str:
    """Format one token as a compact JSON record."""
    record = token.to_dict()
    if not show_spans:
        del record["span"]
    return json.dumps(record)


def format_tokens(tokens: Sequence[Token], show_spans: bool = True) -> str:
    """
    Format a token list for display.

    Empty lists print as ``[]``, single tokens inline, and longer lists
    with one token per line.
    """
    if len(tokens) == 0:
        return "[]"
    if len(tokens) == 1:
        return f"[ {format_token(tokens[0], show_spans)} ]"
    lines = ",\n".join("  " + format_token(t, show_spans) for t in tokens)
    return "[\n" + lines + "\n]"


def _indent(text: str, prefix: str) -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def render_text(report: Report, config: Optional[SmithConfig] = None) -> str:
    """
    Render a report as terminal text.

    Matching cases get a single PASS line; mismatches also show the code
    and both token lists.
    """
    config = config or SmithConfig()

    def mark(label: str, colour: str) -> str:
        return click.style(label, fg=colour, bold=True) if config.color else label

    lines = []
    for result in report.results:
        if result.matched:
            lines.append(f"{mark('PASS', 'green')}  {result.case.name}")
            continue

        lines.append(f"{mark('FAIL', 'red')}  {result.case.name}")
        lines.append("  code:")
        lines.append(_indent(result.case.code, "    "))
        if result.error is not None:
            lines.append("  error:")
            lines.append(f"    {result.error}")
        else:
            lines.append("  actual:")
            lines.append(_indent(format_tokens(result.actual, config.show_spans), "    "))
        lines.append("  expected:")
        lines.append(_indent(format_tokens(result.case.expected, config.show_spans), "    "))

    if lines:
        lines.append("")
    lines.append(f"{report.passed} passed, {report.failed} failed")
    return "\n".join(lines)


def render_json(report: Report) -> str:
    return json.dumps(report.to_dict(), indent=2)


# =============================================================================
# Loading Cases
# =============================================================================

def cases_from_data(data: Any, path: Optional[str] = None) -> list[UnitTest]:
    """
    Decode case records (already parsed from JSON).

    Raises:
        CaseFileError: If the data is not a list of well-formed cases
    """
    if not isinstance(data, list):
        raise CaseFileError(f"expected a list of cases, got {type(data).__name__}", path)

    cases = []
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise CaseFileError(f"case must be an object, got {type(record).__name__}", path, index)

        code = record.get("code")
        if not isinstance(code, str):
            raise CaseFileError("case has no 'code' string", path, index)

        expected = record.get("expected")
        if not isinstance(expected, list):
            raise CaseFileError("case has no 'expected' list", path, index)

        name = record.get("name")
        if name is None:
            name = code
        elif not isinstance(name, str):
            raise CaseFileError(f"case name must be a string, got {name!r}", path, index)

        try:
            tokens = tuple(Token.from_dict(t) for t in expected)
        except TokenFormatError as e:
            raise CaseFileError(str(e), path, index) from e

        cases.append(UnitTest(name, code, tokens))

    return cases


def load_cases(path: Path | str) -> list[UnitTest]:
    """
    Load cases from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        CaseFileError: If the file is not valid JSON or not a case list
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CaseFileError(f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}", str(path)) from e

    cases = cases_from_data(data, str(path))
    logger.debug(f"Loaded {len(cases)} cases from {path}")
    return cases
