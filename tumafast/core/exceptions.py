"""Pricing exceptions."""


class TumaFastError(Exception):
    """Base exception for the pricing service."""


class InvalidArgumentError(TumaFastError, ValueError):
    """Raised when a caller passes input the engine cannot price."""
