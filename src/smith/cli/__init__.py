"""
Smith Command-Line Interface
============================

This package provides command-line tools for the Smith lexer:

- **smithlex**: tokenize a source file and print the tokens
- **smithcheck**: run tokenizer cases and report matches and mismatches

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["smithlex", "smithcheck"]
