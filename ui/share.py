"""ui.share — Brag about your marimo on social media."""

from __future__ import annotations
import webbrowser
from urllib.parse import quote

SHARE_INTENT = "https://twitter.com/intent/tweet?text="


def share_text(name: str, size: str) -> str:
    return f"I grew my marimo \"{name}\" to {size}."


def share_url(text: str) -> str:
    return SHARE_INTENT + quote(text, safe="")


def open_share(url: str) -> bool:
    """Open *url* in the user's browser.  False if no browser could."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as ex:
        print(f"[SHARE] Could not open browser: {ex}")
        return False
    if not opened:
        print(f"[SHARE] No browser available; share link: {url}")
    return opened
