"""Light/dark theme state and its persistence."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True)
class ThemeState:
    theme: Theme = Theme.LIGHT

    @property
    def body_class(self) -> str | None:
        return "dark-mode" if self.theme is Theme.DARK else None

    @property
    def button_label(self) -> str:
        """Label of the toggle button: it offers the other theme."""
        if self.theme is Theme.DARK:
            return "☀️ Light Mode"
        return "🌙 Dark Mode"

    def toggle(self) -> "ThemeState":
        other = Theme.LIGHT if self.theme is Theme.DARK else Theme.DARK
        return replace(self, theme=other)


class ThemeStore:
    """Persists the chosen theme in a small YAML file."""

    KEY = "theme"

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> ThemeState:
        """Load the saved theme, defaulting to light."""
        if not self.path.exists():
            return ThemeState()
        try:
            with self.path.open() as fh:
                data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, exc)
            return ThemeState()

        value = data.get(self.KEY) if isinstance(data, dict) else None
        try:
            return ThemeState(Theme(value))
        except ValueError:
            return ThemeState()

    def save(self, state: ThemeState) -> None:
        data: dict = {}
        if self.path.exists():
            with self.path.open() as fh:
                loaded = yaml.safe_load(fh)
            if isinstance(loaded, dict):
                data = loaded
        data[self.KEY] = state.theme.value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w") as fh:
            yaml.safe_dump(data, fh, default_flow_style=False)

    def toggle(self) -> ThemeState:
        """Flip the saved theme and persist the result."""
        state = self.load().toggle()
        self.save(state)
        return state
