import os
import json
from typing import Any, Optional
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape

from config import settings

# Environment variable to control CLI output mode
# İzin verilen değerler: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Geçersiz değerleri yoksay; mevcut varsayılanı koru

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.default_output_mode).lower()

def print_heading(text: str) -> None:
    """Section heading between reports; json mode stays machine-readable and skips it."""
    mode = get_output_mode()
    if mode == "json":
        return
    if mode == "rich":
        _console.print(f"[bold cyan]{escape(text)}[/]")
    else:
        print(text)

def print_report(entity: Any, title: Optional[str] = None) -> None:
    """Print a Book or Person according to the current output mode.
    - plain: the entity's describe() text
    - json: to_dict() as a JSON object
    - rich: describe() text inside a Panel
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(entity.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        panel_title = title or ("📚 Book" if hasattr(entity, "author") else "👤 Person")
        _console.print(Panel.fit(escape(entity.describe().rstrip("\n")), title=panel_title, border_style="blue"))
    else:
        print(entity.describe())

def print_event(message: str) -> None:
    mode = get_output_mode()
    if mode == "json":
        print(json.dumps({"event": message}, ensure_ascii=False))
    elif mode == "rich":
        _console.print(f"✅ [green]{escape(message)}[/]")
    else:
        print(message)

def print_error(error: Exception) -> None:
    mode = get_output_mode()
    if mode == "json":
        print(json.dumps({"error": type(error).__name__, "message": str(error)}, ensure_ascii=False))
    elif mode == "rich":
        _console.print(f"❌ [red]Error[/]: {escape(str(error))}")
    else:
        print(f"Error: {error}")
