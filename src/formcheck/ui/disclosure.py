"""Show/hide widgets: the FAQ accordion and the tab group."""

from dataclasses import dataclass, field


@dataclass
class Accordion:
    """FAQ items where opening one closes the others.

    ``open_items`` holds the indices of expanded items. Clicking an open
    item closes it.
    """

    size: int
    open_items: set[int] = field(default_factory=set)

    def toggle(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"FAQ item {index} out of range (0..{self.size - 1})")
        was_open = index in self.open_items
        self.open_items = set() if was_open else {index}

    def is_open(self, index: int) -> bool:
        return index in self.open_items


@dataclass
class TabGroup:
    """Tabs where exactly one tab and its panel are active."""

    tabs: list[str]
    active: str = ""

    def __post_init__(self) -> None:
        if not self.tabs:
            raise ValueError("A tab group needs at least one tab")
        if not self.active:
            self.active = self.tabs[0]
        elif self.active not in self.tabs:
            raise KeyError(self.active)

    def select(self, tab: str) -> None:
        if tab not in self.tabs:
            raise KeyError(tab)
        self.active = tab

    def panel_id(self, tab: str | None = None) -> str:
        return f"{tab or self.active}-panel"

    def is_active(self, tab: str) -> bool:
        return tab == self.active
