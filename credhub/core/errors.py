from __future__ import annotations


class CredHubError(Exception):
    """Base class for errors raised by the credhub client."""


class InvalidRequestError(CredHubError, ValueError):
    """A request was assembled with a missing or malformed field.

    Raised eagerly by builders at the offending call.
    """
