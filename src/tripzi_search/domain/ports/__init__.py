"""Ports implemented by infrastructure adapters."""

from .availability_api import AvailabilityApiProtocol

__all__ = ["AvailabilityApiProtocol"]
