"""Declarative UI framework core: widgets, elements, layout, events, state, animation and software rendering."""

__version__ = "0.1.0"