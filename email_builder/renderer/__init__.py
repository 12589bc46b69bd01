"""Renderers: HTML (email) et texte brut."""
from .html import render, render_block, corner_radius, px
from .text import render_text, render_block_text

__all__ = [
    "render", "render_block", "corner_radius", "px",
    "render_text", "render_block_text",
]
