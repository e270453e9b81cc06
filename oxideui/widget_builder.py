"""Turns a widget tree into a tree of render objects."""

from __future__ import annotations

import logging
from typing import Optional

from oxideui.constraints import Constraints
from oxideui.context import BuildContext, Theme
from oxideui.element import ElementId, ElementTree
from oxideui.render_object import RenderGroup, RenderNone, RenderObject
from oxideui.widget import ContainerNode, EmptyNode, LeafNode, Widget, WidgetNode

_log = logging.getLogger(__name__)


class WidgetBuilder:
    """Builds widgets recursively into render objects under one theme."""

    def __init__(self, theme: Optional[Theme] = None) -> None:
        self.theme = theme if theme is not None else Theme()

    def build_widget_tree(self, root_widget: Widget, constraints: Constraints) -> RenderObject:
        """Build ``root_widget`` and all its descendants with ``constraints``."""
        _log.debug("building widget tree")
        ctx = BuildContext(ElementId(0), ElementTree(), constraints, self.theme)
        return self._render(root_widget.build(ctx), ctx)

    def _render(self, node: WidgetNode, ctx: BuildContext) -> RenderObject:
        if isinstance(node, LeafNode):
            return node.render_object
        if isinstance(node, ContainerNode):
            return RenderGroup(tuple(self._render(child.build(ctx), ctx) for child in node.children))
        if isinstance(node, EmptyNode):
            return RenderNone()
        raise TypeError(f"widget built an unknown node: {node!r}")