# desikata/app/inputs.py

import json
import sys
from pathlib import Path


class InputError(Exception):
    """Raised when a command's input file can't be read as JSON."""


def read_json(path: str):
    try:
        if path == "-":
            return json.load(sys.stdin)
        with open(Path(path), "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        raise InputError(f"File not found: {path}") from exc
    except OSError as exc:
        # directories, permissions, ...
        raise InputError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise InputError(f"Not UTF-8 text: {path}") from exc
    except json.JSONDecodeError as exc:
        raise InputError(f"Invalid JSON in {path}: {exc.msg}") from exc
