"""Fishing advice and salary ticker front ends."""

from .advisor import AdvisorSnapshot, FishingAdvisor
from .ticker import SalarySession, SalaryTicker, start_session, tick

__all__ = [
    "FishingAdvisor",
    "AdvisorSnapshot",
    "SalaryTicker",
    "SalarySession",
    "start_session",
    "tick",
]
