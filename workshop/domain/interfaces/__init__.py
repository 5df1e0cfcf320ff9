"""Interfaces the domain layer requires from its surroundings."""

from .clock import DEFAULT_CLOCK, Clock, UtcClock

__all__ = ["Clock", "UtcClock", "DEFAULT_CLOCK"]
