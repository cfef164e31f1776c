from .view_widget import CycloidViewWidget, PainterRenderer

__all__ = ["CycloidViewWidget", "PainterRenderer"]
