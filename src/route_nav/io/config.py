# src/route_nav/io/config.py
from pathlib import Path

from route_nav.config.models import SessionModel


def load_config(path: str | Path) -> SessionModel:
    """Read a JSON session config. Missing sections fall back to model defaults."""
    return SessionModel.model_validate_json(Path(path).expanduser().read_text(encoding="utf-8"))
