"""Theme data and the context handed to widgets while they build."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from oxideui.constraints import Constraints
from oxideui.element import ElementId, ElementTree
from oxideui.render_object import Color


@dataclass(frozen=True)
class Theme:
    """Named colours, fonts and shadow settings used by widgets."""

    background: Color = Color.WHITE
    foreground: Color = Color.BLACK
    card: Color = Color.WHITE
    card_foreground: Color = Color.BLACK
    popover: Color = Color.WHITE
    popover_foreground: Color = Color.BLACK
    primary: Color = Color.BLACK
    primary_foreground: Color = Color.WHITE
    secondary: Color = Color.WHITE
    secondary_foreground: Color = Color.BLACK
    muted: Color = Color.WHITE
    muted_foreground: Color = Color.BLACK
    accent: Color = Color.WHITE
    accent_foreground: Color = Color.BLACK
    destructive: Color = Color.RED
    destructive_foreground: Color = Color.WHITE
    border: Color = Color.BLACK
    input: Color = Color.BLACK
    ring: Color = Color.BLACK
    sidebar: Color = Color.WHITE
    sidebar_foreground: Color = Color.BLACK
    sidebar_primary: Color = Color.BLACK
    sidebar_primary_foreground: Color = Color.WHITE
    sidebar_accent: Color = Color.WHITE
    sidebar_accent_foreground: Color = Color.BLACK
    sidebar_border: Color = Color.BLACK
    sidebar_ring: Color = Color.BLACK
    font_sans: str = "sans-serif"
    font_mono: str = "monospace"
    radius: float = 0.0
    is_dark: bool = False
    shadow_x: float = 0.0
    shadow_y: float = 0.0
    shadow_blur: float = 0.0
    shadow_spread: float = 0.0
    shadow_opacity: float = 0.0
    chart_1: Color = Color.RED
    chart_2: Color = Color.GREEN
    chart_3: Color = Color.BLUE
    chart_4: Color = Color.BLACK
    chart_5: Color = Color.WHITE


@dataclass(frozen=True)
class BuildContext:
    """Access to the element tree, constraints and theme while a widget builds."""

    element_id: ElementId
    element_tree: ElementTree
    constraints: Constraints = field(default_factory=Constraints)
    theme: Theme = field(default_factory=Theme)

    def is_dark(self) -> bool:
        return self.theme.is_dark

    def parent(self) -> Optional[ElementId]:
        return self.element_tree.get_parent(self.element_id)

    def children(self) -> list[ElementId]:
        return self.element_tree.get_children(self.element_id)

    def find_ancestor(self, widget_type: type) -> Optional[ElementId]:
        """Nearest element built from ``widget_type``, this one included."""
        return self.element_tree.find_ancestor(self.element_id, widget_type)

    def mark_dirty(self) -> None:
        self.element_tree.mark_dirty(self.element_id)

    def child_context(self, child_id: ElementId, constraints: Constraints) -> BuildContext:
        """A context for a child sharing this tree and theme."""
        return replace(self, element_id=child_id, constraints=constraints)