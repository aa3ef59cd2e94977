"""Elapsed salary ticker."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, NamedTuple

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

logger = logging.getLogger(__name__)

CELEBRATION_STEP = 100
WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def per_minute(monthly_salary: float) -> float:
    """Salary earned per minute, assuming a 30-day month worked around the clock."""
    return monthly_salary / 30 / 24 / 60


def format_currency(amount: float) -> str:
    return f"¥{amount:,.2f}"


@dataclass(frozen=True)
class SalarySession:
    """State of a running salary ticker.

    Attributes:
        monthly_salary: Monthly salary in yuan
        started_at: When the ticker was started
        now: Time of the last tick
        earned: Amount earned between started_at and now
        celebrated: Number of 100-yuan milestones already celebrated
    """
    monthly_salary: float
    started_at: datetime
    now: datetime
    earned: float = 0.0
    celebrated: int = 0


class TickResult(NamedTuple):
    session: SalarySession
    celebrate: bool


def start_session(monthly_salary: float, now: datetime) -> SalarySession:
    """Start a new ticker session.

    Raises:
        ValueError: If the salary is not positive
    """
    if not monthly_salary > 0:
        raise ValueError(f"Monthly salary must be positive, got {monthly_salary}")
    return SalarySession(monthly_salary=monthly_salary, started_at=now, now=now)


def tick(session: SalarySession, now: datetime) -> TickResult:
    """Advance a session to ``now``.

    Returns the new session and whether a new 100-yuan milestone was reached.
    """
    minutes = (now - session.started_at).total_seconds() / 60
    earned = per_minute(session.monthly_salary) * minutes
    milestones = math.floor(earned / CELEBRATION_STEP)

    celebrate = milestones > session.celebrated
    updated = replace(
        session,
        now=now,
        earned=earned,
        celebrated=max(milestones, session.celebrated),
    )
    return TickResult(updated, celebrate)


def render_session(session: SalarySession) -> Group:
    """Render the clock and earnings panels for a session."""
    now = session.now
    clock = Text(now.strftime("%H:%M:%S"), style="bold blue", justify="center")
    day = Text(
        f"{now.strftime('%Y-%m-%d')} {WEEKDAYS[now.weekday()]}",
        style="blue",
        justify="center",
    )
    earned = Text(format_currency(session.earned), style="bold green", justify="center")
    rate = Text(
        f"+{format_currency(per_minute(session.monthly_salary))} per minute",
        style="dim",
        justify="center",
    )
    return Group(
        Panel(Group(clock, day), title="Current Time", border_style="blue"),
        Panel(Group(earned, rate), title="Earned So Far", border_style="green"),
    )


class SalaryTicker:
    """Live terminal display of salary earned since start.

    The display is refreshed once per second; every tick is a pure
    transition of the session value.
    """

    def __init__(
        self,
        monthly_salary: float,
        console: Console | None = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        """Initialize the ticker.

        Args:
            monthly_salary: Monthly salary in yuan
            console: Rich console for display output
            clock: Source of the current time

        Raises:
            ValueError: If the salary is not positive
        """
        self.console = console or Console()
        self.clock = clock
        self.session = start_session(monthly_salary, clock())

    def step(self) -> bool:
        """Advance the session to the current time.

        Returns:
            True if a new 100-yuan milestone was reached
        """
        self.session, celebrate = tick(self.session, self.clock())
        if celebrate:
            logger.info(f"Milestone reached: {format_currency(self.session.earned)}")
        return celebrate

    def run(self, max_ticks: int | None = None) -> None:
        """Run the live display until interrupted (or for ``max_ticks`` ticks)."""
        ticks = 0
        with Live(render_session(self.session), console=self.console,
                  refresh_per_second=1) as live:
            while max_ticks is None or ticks < max_ticks:
                time.sleep(1)
                if self.step():
                    live.console.print(
                        f"[bold magenta]Another {CELEBRATION_STEP} yuan earned! "
                        f"Total: {format_currency(self.session.earned)}[/bold magenta]"
                    )
                live.update(render_session(self.session))
                ticks += 1
