import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Union

DEFAULT_LOG_PATH = Path.home() / "SportsRadar_error.log"

_log_path: Path = DEFAULT_LOG_PATH


def set_log_path(path: Union[str, Path, None]) -> Path:
    """Redirect diagnostics to ``path`` (``None`` restores the default)."""
    global _log_path
    _log_path = Path(path).expanduser() if path else DEFAULT_LOG_PATH
    return _log_path


def get_log_path() -> Path:
    return _log_path


def _safe_text(value: Any, max_len: int = 800) -> str:
    try:
        text = str(value)
    except Exception:
        text = repr(value)
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(text) > max_len:
        return text[: max_len - 3] + "..."
    return text


def log_event(context: str, message: str) -> None:
    """Append a single-line diagnostic event to the log file."""
    try:
        with open(_log_path, "a", encoding="utf-8") as f:
            f.write(f"{datetime.now().isoformat()}  |  {context}  |  {_safe_text(message)}\n")
    except Exception:
        pass


def log_exception(context: str) -> None:
    """Append the traceback of the exception being handled."""
    try:
        with open(_log_path, "a", encoding="utf-8") as f:
            f.write("\n\n" + "=" * 80 + "\n")
            f.write(f"{datetime.now().isoformat()}  |  {context}\n")
            traceback.print_exc(file=f)
    except Exception:
        # a broken log file must not take the page down
        pass
