"""Renderers for patitex ASTs."""

from patitex.renderers.html import HtmlRenderer, html_escape

__all__ = ["HtmlRenderer", "html_escape"]
