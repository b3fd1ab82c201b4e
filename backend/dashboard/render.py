"""
Dashboard Renderer — HTML page for the event feed

Builds the full page from a DashboardView: header, controls, event
counter, one card per visible event and the empty state.

All event text is escaped; nothing here touches the network.
"""

from datetime import datetime
from html import escape
from typing import Dict
from urllib.parse import urlencode

from backend.generator import Severity, WorldEvent

from .state import ALL_CATEGORIES, DashboardView


SEVERITY_COLORS: Dict[Severity, str] = {
    Severity.HIGH: "#ef4444",
    Severity.MEDIUM: "#f59e0b",
    Severity.LOW: "#10b981",
}

PAGE_TITLE = "World Events Agent"

_STYLE = """
body { margin: 0; min-height: 100vh; padding: 20px; font-family: system-ui, sans-serif;
       background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }
.container { max-width: 1200px; margin: 0 auto; }
header { text-align: center; color: white; margin-bottom: 40px; padding-top: 20px; }
header h1 { font-size: 3rem; margin: 0 0 10px 0; }
header p { font-size: 1.2rem; opacity: 0.9; }
.panel { background: white; border-radius: 15px; padding: 20px; margin-bottom: 20px;
         box-shadow: 0 10px 30px rgba(0,0,0,0.2); }
.controls { display: flex; gap: 15px; flex-wrap: wrap; align-items: center; }
.button { padding: 10px 20px; background: #667eea; color: white; border: none; border-radius: 8px;
          font-size: 1rem; font-weight: 600; text-decoration: none; cursor: pointer; }
.button.disabled { background: #ccc; cursor: not-allowed; }
select { padding: 10px 15px; border-radius: 8px; border: 2px solid #667eea; font-size: 1rem; }
.counter { margin-left: auto; color: #666; }
.notice { color: #b91c1c; font-size: 0.9rem; width: 100%; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(350px, 1fr)); gap: 20px; }
.card { position: relative; overflow: hidden; }
.severity { position: absolute; top: 0; left: 0; width: 100%; height: 4px; }
.badge { display: inline-block; background: #667eea; color: white; padding: 5px 12px;
         border-radius: 20px; font-size: 0.85rem; font-weight: 600; }
.card h3 { margin: 10px 0; font-size: 1.3rem; color: #1a1a1a; }
.card p { color: #666; font-size: 0.95rem; line-height: 1.6; }
.meta { margin-top: 15px; padding-top: 15px; border-top: 1px solid #eee; display: flex;
        justify-content: space-between; font-size: 0.85rem; color: #999; }
.source { margin-top: 8px; font-size: 0.85rem; color: #999; }
.empty { text-align: center; padding: 60px 20px; }
"""


def format_local_time(value: datetime) -> str:
    """Wall-clock time of an event in the server's local timezone."""
    return value.astimezone().strftime("%H:%M:%S")


def category_label(category: str) -> str:
    return "All Categories" if category == ALL_CATEGORIES else category


def render_card(event: WorldEvent) -> str:
    """One event card."""
    color = SEVERITY_COLORS[event.severity]
    return (
        f'<article class="panel card" id="{escape(event.id)}" data-severity="{event.severity.value}">'
        f'<div class="severity" style="background: {color}"></div>'
        f'<span class="badge">{escape(event.category.value)}</span>'
        f"<h3>{escape(event.title)}</h3>"
        f"<p>{escape(event.description)}</p>"
        f'<div class="meta"><span>📍 {escape(event.region.value)}</span>'
        f"<span>{format_local_time(event.timestamp)}</span></div>"
        f'<div class="source">Source: {escape(event.source.value)}</div>'
        f"</article>"
    )


def render_controls(view: DashboardView) -> str:
    """Refresh button, auto-refresh toggle, category selector and counter."""
    if view.loading:
        refresh = '<span class="button disabled">⏳ Loading...</span>'
    else:
        refresh = '<a class="button" href="/?refresh=true">🔄 Refresh Events</a>'

    toggle_query = urlencode({"auto_refresh": "false" if view.auto_refresh else "true"})
    checkbox = "☑" if view.auto_refresh else "☐"
    auto = (
        f'<a class="auto-refresh" href="/?{toggle_query}">'
        f"{checkbox} Auto-refresh ({view.auto_refresh_interval_s:g}s)</a>"
    )

    options = "".join(
        f'<option value="{escape(cat)}"{" selected" if cat.lower() == view.filter.lower() else ""}>'
        f"{escape(category_label(cat))}</option>"
        for cat in view.categories
    )
    selector = (
        '<form method="get" action="/">'
        f'<select name="category" onchange="this.form.submit()">{options}</select> '
        '<noscript><button class="button" type="submit">Apply</button></noscript>'
        "</form>"
    )

    counter = f'<div class="counter">{view.visible_count} events found</div>'

    notice = ""
    if view.last_error:
        notice = f'<div class="notice">Last refresh failed: {escape(view.last_error)}</div>'

    return f'<div class="panel controls">{refresh}{auto}{selector}{counter}{notice}</div>'


def render_empty_state() -> str:
    return (
        '<div class="panel empty">'
        '<div style="font-size: 4rem; margin-bottom: 20px">🔍</div>'
        '<h2 style="color: #666; margin: 0">No events found</h2>'
        '<p style="color: #999; margin-top: 10px">Try refreshing or changing the filter</p>'
        "</div>"
    )


def render_page(view: DashboardView) -> str:
    """
    Render the complete dashboard page.

    When auto-refresh is on, the page reloads itself at the same period
    so the browser picks up what the server-side timer fetched.
    """
    head_refresh = ""
    if view.auto_refresh:
        head_refresh = (
            f'<meta http-equiv="refresh" content="{view.auto_refresh_interval_s:g}; url=/">'
        )

    cards = "".join(render_card(event) for event in view.events)
    empty = render_empty_state() if not view.events and not view.loading else ""

    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        f"<title>{PAGE_TITLE}</title>{head_refresh}"
        f"<style>{_STYLE}</style></head>"
        '<body><div class="container">'
        f"<header><h1>🌍 {PAGE_TITLE}</h1>"
        "<p>Real-time monitoring of global events and news</p></header>"
        f"{render_controls(view)}"
        f'<div class="grid">{cards}</div>'
        f"{empty}"
        "</div></body></html>"
    )
