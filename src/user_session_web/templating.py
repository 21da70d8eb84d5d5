from pathlib import Path
from typing import Any, Callable, Dict

from fastapi import Request
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def make_active_path(current_path: str) -> Callable[[str], str]:
    """
    Build the navbar helper for one request: returns "active" for the link
    whose path is the current request path, "" for every other link.
    """
    def active_path(path: str) -> str:
        return "active" if path == current_path else ""

    return active_path


def nav_context(request: Request) -> Dict[str, Any]:
    return {"active_path": make_active_path(request.url.path)}


templates = Jinja2Templates(directory=str(TEMPLATES_DIR), context_processors=[nav_context])
