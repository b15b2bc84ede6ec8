from textcheck.services.highlight.highlight_renderer import (
    Highlight,
    collect_highlights,
    escape_html,
    render_highlights,
)

__all__ = ["Highlight", "collect_highlights", "escape_html", "render_highlights"]
