"""
Smith Configuration
===================

Output settings shared by the command-line tools. Configuration can come
from:
- Default values (defined here)
- Environment variables
- Command-line flags (applied by the CLI on top of the above)

Environment Variables
---------------------
| Variable          | Values          | Effect                          |
|-------------------|-----------------|---------------------------------|
| SMITH_FORMAT      | text, json      | Output format                   |
| SMITH_SHOW_SPANS  | 1/0, true/false | Include spans in text output    |
| SMITH_NO_COLOR    | any value       | Disable coloured output         |
| SMITH_STRICT      | 1/0, true/false | Treat invalid characters as errors |
"""

from dataclasses import dataclass, replace
from typing import Mapping, Optional
import logging
import os

logger = logging.getLogger(__name__)


OUTPUT_FORMATS = ("text", "json")

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass(frozen=True)
class SmithConfig:
    """
    Output configuration for smithlex and smithcheck.

    Attributes:
        output_format: "text" for people, "json" for tools (default: "text")
        show_spans: Print token spans in text output (default: True)
        color: Colour match/mismatch markers (default: True)
        strict: Report invalid characters as errors (default: False)
    """

    output_format: str = "text"
    show_spans: bool = True
    color: bool = True
    strict: bool = False

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SmithConfig":
        """
        Create SmithConfig from environment variables.

        Unrecognised values are logged and ignored, leaving the default.

        Args:
            environ: Mapping to read instead of os.environ (for tests)
        """
        env = os.environ if environ is None else environ
        config = cls()

        if output_format := env.get("SMITH_FORMAT"):
            if output_format.lower() in OUTPUT_FORMATS:
                config = replace(config, output_format=output_format.lower())
            else:
                logger.warning(f"Ignoring SMITH_FORMAT={output_format!r}")

        if (show_spans := _parse_bool(env, "SMITH_SHOW_SPANS")) is not None:
            config = replace(config, show_spans=show_spans)

        if "SMITH_NO_COLOR" in env:
            config = replace(config, color=False)

        if (strict := _parse_bool(env, "SMITH_STRICT")) is not None:
            config = replace(config, strict=strict)

        logger.debug(f"Configuration from environment: {config}")
        return config

    def override(self, **changes) -> "SmithConfig":
        """
        Return a copy with command-line values applied.

        ``None`` means "flag not given" and keeps the current value.
        """
        given = {name: value for name, value in changes.items() if value is not None}
        return replace(self, **given)


def _parse_bool(env: Mapping[str, str], name: str) -> Optional[bool]:
    raw = env.get(name)
    if raw is None or raw == "":
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Ignoring {name}={raw!r}: expected a boolean")
    return None
