# topmark:header:start
#
#   project      : BBContent
#   file         : errors.py
#   file_relpath : src/bbcontent/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the BBContent library.

These are plain exceptions, independent from Click. The CLI translates them to
`bbcontent.cli.errors` instances carrying an exit code.
"""

from __future__ import annotations


class BBContentError(Exception):
    """Base class for all BBContent library errors."""


class InvalidOptionsError(BBContentError, ValueError):
    """Per-call options or render params have an unsupported shape."""


class MissingContentError(BBContentError, LookupError):
    """No content node was given and the render context has no current object."""


class ScenarioError(BBContentError):
    """A scenario document is malformed or references unknown nodes."""
