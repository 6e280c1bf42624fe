"""Exception hierarchy for the Ozon Seller client."""

from __future__ import annotations


class OzonClientError(Exception):
    """Represents an error when communicating with the Ozon Seller API."""


class OzonConfigurationError(OzonClientError):
    """Credentials or sandbox profile are missing."""


class OzonMissingArgumentError(OzonClientError):
    """A required argument or item field was not supplied."""


class OzonTransportError(OzonClientError):
    """The HTTP call failed or the body was not JSON."""


class OzonUnexpectedResponseError(OzonClientError):
    """The response JSON does not have the shape the operation expects."""
