import os
from pathlib import Path

DEFAULT_FILENAME = "jsonview.yaml"


def get_configfile(path: str | Path | None = None) -> Path | None:
    """
    Locate the optional YAML configuration file.

    Priority: explicit path > JSONVIEWCONFIG > jsonview.yaml in the current
    working directory. Running without any file is allowed; an explicitly
    requested file that does not exist is not.
    """
    raw = path or os.getenv("JSONVIEWCONFIG")

    if not raw:
        file = Path.cwd() / DEFAULT_FILENAME
        return file if file.is_file() else None

    file = Path(raw).expanduser()
    if not file.is_file():
        raise FileNotFoundError(f"[config] Configuration file not found: '{file}'")

    return file
