"""Fishing advisor combining weather lookups with fishing scores."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

import pandas as pd
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..core.config import AdvisorConfig
from ..core.errors import FishingAdvisorError
from ..core.location import Place
from ..scoring.bite_windows import FishingTimeAdvice, plan_bite_windows
from ..scoring.forecast import summarize_forecast
from ..scoring.index import FishingIndexResult, advice_tier, explain_observation, score_observation
from ..weather.models import ForecastDay, WeatherObservation
from ..weather.service import WeatherService

logger = logging.getLogger(__name__)

LABEL_COLORS = {
    "excellent": "green",
    "good": "cyan",
    "marginal": "yellow",
    "poor": "red",
}


def index_color(score: int) -> str:
    """Display colour for a score, by its advice tier."""
    return LABEL_COLORS[advice_tier(score).label]


@dataclass(frozen=True)
class AdvisorSnapshot:
    """Everything shown for one successful query.

    Attributes:
        place: The queried place
        current: Current weather observation
        index: Fishing index for the current observation
        time_advice: Bite windows for today, None without sun times
        forecast: Daily fishing outlook
        fetched_at: When the data was fetched (UTC)
    """
    place: Place
    current: WeatherObservation
    index: FishingIndexResult
    time_advice: FishingTimeAdvice | None
    forecast: list[ForecastDay]
    fetched_at: datetime


class FishingAdvisor:
    """Weather-aware fishing advice for a place.

    Holds the last successful snapshot. A failed refresh keeps the previous
    snapshot and records a single user-facing error message.
    """

    def __init__(
        self,
        config: AdvisorConfig | None = None,
        console: Console | None = None
    ):
        """Initialize the advisor.

        Args:
            config: Advisor configuration. Defaults to environment settings.
            console: Rich console for display output.
        """
        self.config = config or AdvisorConfig.from_env()
        self.console = console or Console()
        self.weather_service = WeatherService(config=self.config)
        self.snapshot: AdvisorSnapshot | None = None
        self.last_error: str | None = None

    def build_snapshot(
        self,
        place: Place,
        current: WeatherObservation,
        forecast_samples: list[WeatherObservation],
        now: datetime | None = None
    ) -> AdvisorSnapshot:
        """Score fetched weather into a snapshot. Performs no I/O."""
        now = now or datetime.now(timezone.utc)

        time_advice = None
        if current.has_sun_times:
            month = (current.observed_at or now).month
            time_advice = plan_bite_windows(
                sunrise=current.sunrise,
                sunset=current.sunset,
                temperature=current.temperature,
                description=current.description,
                month=month,
            )

        return AdvisorSnapshot(
            place=place,
            current=current,
            index=score_observation(current),
            time_advice=time_advice,
            forecast=summarize_forecast(forecast_samples, days=self.config.forecast_days),
            fetched_at=now,
        )

    def refresh(self, place: Place) -> AdvisorSnapshot | None:
        """Fetch current weather and forecast for a place and score them.

        Requests are issued one after another. On failure the error is
        logged, ``last_error`` is set and the previous snapshot is kept.

        Returns:
            The new snapshot, or None if the refresh failed
        """
        try:
            current = self.weather_service.get_current(place)
            forecast_samples = self.weather_service.get_forecast(place)
        except FishingAdvisorError as e:
            logger.error(f"Weather refresh for {place.name} failed: {e}")
            self.last_error = e.user_message
            return None

        self.snapshot = self.build_snapshot(place, current, forecast_samples)
        self.last_error = None
        return self.snapshot

    def forecast_frame(self) -> pd.DataFrame:
        """Get the daily outlook as a DataFrame.

        Returns:
            DataFrame with one row per forecast day (empty without a snapshot)
        """
        if self.snapshot is None:
            return pd.DataFrame()

        data = []
        for day in self.snapshot.forecast:
            data.append({
                "Date": day.date.strftime("%a %m-%d"),
                "Conditions": day.description,
                "Temp (C)": f"{day.temp_min:.0f} ~ {day.temp_max:.0f}",
                "Humidity (%)": day.humidity,
                "Pressure (hPa)": day.pressure,
                "Wind (km/h)": round(day.wind_speed, 1),
                "Clouds (%)": day.cloud_cover,
                "Index": day.fishing_index,
                "Advice": day.fishing_advice,
            })

        return pd.DataFrame(data)

    def create_conditions_panel(self, snapshot: AdvisorSnapshot) -> Panel:
        """Create current conditions panel."""
        current = snapshot.current
        index = snapshot.index
        color = LABEL_COLORS[index.label]

        sun_line = ""
        if current.has_sun_times:
            sun_line = (
                f"\nSunrise: {current.sunrise.strftime('%H:%M')}  "
                f"Sunset: {current.sunset.strftime('%H:%M')}"
            )
        visibility = (
            f"{current.visibility_km:.1f} km" if current.visibility_km is not None else "n/a"
        )

        content = f"""
[bold cyan]Current Conditions in {snapshot.place.name}[/bold cyan]

Conditions: {current.description}
Temperature: [bold]{current.temperature:.1f}C[/bold]  Humidity: {current.humidity:.0f}%
Pressure: {current.pressure:.0f} hPa  Clouds: {current.cloud_cover:.0f}%
Wind: {current.wind_speed:.1f} km/h from {current.wind_compass}  Visibility: {visibility}{sun_line}

Fishing Index: [bold {color}]{index.overall}[/bold {color}] ({index.label})
{index.advice}

[dim]Last updated: {snapshot.fetched_at.strftime('%H:%M:%S UTC')}[/dim]
"""
        return Panel(content.strip(), title="Fishing Weather", border_style=color)

    def create_index_table(self, snapshot: AdvisorSnapshot) -> Table:
        """Create per-factor score breakdown table."""
        table = Table(
            title="Fishing Index Breakdown",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Factor", width=12)
        table.add_column("Score", justify="center", width=8)
        table.add_column("Assessment", width=36)

        explanations = explain_observation(snapshot.current)
        for factor, score in snapshot.index.scores.items():
            color = index_color(score)
            table.add_row(
                factor.title(),
                f"[{color}]{score}[/{color}]",
                explanations[factor],
            )

        return table

    def create_bite_panel(self, snapshot: AdvisorSnapshot) -> Panel:
        """Create panel with bite windows and tips."""
        advice = snapshot.time_advice
        if advice is None:
            return Panel(
                "[yellow]Sunrise and sunset unavailable; no bite windows.[/yellow]",
                title="Bite Windows",
                border_style="yellow"
            )

        lines = ["[bold cyan]Best Fishing Times Today:[/bold cyan]\n"]
        for label, window in (("Early bite", advice.early_bite), ("Late bite", advice.late_bite)):
            marker = " [green](recommended)[/green]" if window is advice.best_window else ""
            lines.append(
                f"[bold]{label}:[/bold] {window.format_range()} "
                f"({window.format_duration()}){marker}"
            )
            lines.append(f"   {window.reason}")

        if advice.tips:
            lines.append("\n[bold]Tips:[/bold]")
            lines.extend(f"   {tip}" for tip in advice.tips)

        return Panel("\n".join(lines), title="Bite Windows", border_style="cyan")

    def create_forecast_table(self, snapshot: AdvisorSnapshot) -> Table:
        """Create the daily fishing outlook table."""
        table = Table(
            title=f"{len(snapshot.forecast)}-Day Fishing Outlook",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Date", width=10)
        table.add_column("Conditions", width=18)
        table.add_column("Temp", justify="center", width=9)
        table.add_column("Wind", justify="right", width=10)
        table.add_column("Index", justify="center", width=6)
        table.add_column("Advice", width=18)

        for day in snapshot.forecast:
            color = index_color(day.fishing_index)
            table.add_row(
                day.date.strftime("%a %m-%d"),
                day.description,
                f"{day.temp_min:.0f}~{day.temp_max:.0f}C",
                f"{day.wind_speed:.1f} km/h",
                f"[{color}]{day.fishing_index}[/{color}]",
                day.fishing_advice,
            )

        return table

    def create_error_panel(self) -> Panel:
        """Create panel for the last refresh failure."""
        content = f"[bold red]{self.last_error}[/bold red]"
        if self.snapshot is not None:
            content += (
                f"\n\n[dim]Showing data for {self.snapshot.place.name} from "
                f"{self.snapshot.fetched_at.strftime('%H:%M:%S UTC')}[/dim]"
            )
        return Panel(content, title="Weather Unavailable", border_style="red")

    def run(self, place: Place, show_forecast: bool = True) -> None:
        """Fetch weather for a place and display the advice."""
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True
        ) as progress:
            task = progress.add_task(f"Fetching weather for {place.name}...", total=None)
            self.refresh(place)
            progress.update(task, completed=100)

        if self.last_error is not None:
            self.console.print(self.create_error_panel())
        if self.snapshot is None:
            return

        self.console.print(self.create_conditions_panel(self.snapshot))
        self.console.print()
        self.console.print(self.create_index_table(self.snapshot))
        self.console.print()
        self.console.print(self.create_bite_panel(self.snapshot))
        if show_forecast:
            self.console.print()
            self.console.print(self.create_forecast_table(self.snapshot))

    def to_dict(self) -> dict:
        """Export the current snapshot as plain data."""
        snapshot = self.snapshot
        if snapshot is None:
            return {"error": self.last_error}

        current = snapshot.current
        output = {
            "place": {
                "name": snapshot.place.name,
                "query": snapshot.place.query,
                "latitude": snapshot.place.latitude,
                "longitude": snapshot.place.longitude,
            },
            "current": {
                "temperature": current.temperature,
                "humidity": current.humidity,
                "pressure": current.pressure,
                "wind_speed_kmh": round(current.wind_speed, 1),
                "wind_direction": current.wind_direction,
                "cloud_cover": current.cloud_cover,
                "visibility_km": current.visibility_km,
                "description": current.description,
                "icon": current.icon,
            },
            "fishing_index": {
                **snapshot.index.scores,
                "overall": snapshot.index.overall,
                "label": snapshot.index.label,
                "advice": snapshot.index.advice,
            },
            "bite_windows": None,
            "forecast": [
                {
                    "date": day.date.isoformat(),
                    "temperature": day.temperature_range,
                    "description": day.description,
                    "icon": day.icon,
                    "humidity": day.humidity,
                    "pressure": day.pressure,
                    "wind_speed_kmh": round(day.wind_speed, 1),
                    "wind_direction": day.wind_direction,
                    "cloud_cover": day.cloud_cover,
                    "fishing_index": day.fishing_index,
                    "fishing_advice": day.fishing_advice,
                }
                for day in snapshot.forecast
            ],
            "fetched_at": snapshot.fetched_at.isoformat(),
            "error": self.last_error,
        }

        advice = snapshot.time_advice
        if advice is not None:
            output["bite_windows"] = {
                "best_time": advice.best_time,
                "tips": advice.tips,
                **{
                    name: {
                        "start": window.start.isoformat(),
                        "end": window.end.isoformat(),
                        "duration": window.format_duration(),
                        "reason": window.reason,
                    }
                    for name, window in (
                        ("early_bite", advice.early_bite),
                        ("late_bite", advice.late_bite),
                    )
                },
            }

        return output

    def to_json(self) -> str:
        """Export the current snapshot as JSON."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)
