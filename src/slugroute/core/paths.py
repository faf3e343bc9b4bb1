import os
from pathlib import Path


def get_app_dir(app_name: str = "slugroute") -> Path:
    """
    Returns the XDG-aware application directory for data and logs.
    """
    if "XDG_DATA_HOME" in os.environ:
        return Path(os.environ["XDG_DATA_HOME"]) / app_name
    else:
        return Path.home() / ".local" / "share" / app_name

def get_logs_dir(app_dir: Path) -> Path:
    """Returns the directory for logs."""
    return app_dir / "logs"

APP_DIR = get_app_dir()
LOGS_DIR = get_logs_dir(APP_DIR)
