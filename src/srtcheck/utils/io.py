"""File I/O utilities — text reading, atomic writes, YAML handling."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML

_yaml = YAML()
_yaml.preserve_quotes = True
_yaml.default_flow_style = False


def decode_text(data: bytes, *, encoding: str = "utf-8") -> str:
    """Decode raw bytes strictly; undecodable bytes raise UnicodeDecodeError."""
    # utf-8-sig so a leading BOM does not end up in the first index line
    if encoding.lower().replace("_", "-") == "utf-8":
        encoding = "utf-8-sig"
    return data.decode(encoding, errors="strict")


def read_text(path: Path | str, *, encoding: str = "utf-8") -> str:
    """Read a whole text file strictly, keeping its line endings."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return decode_text(path.read_bytes(), encoding=encoding)


def write_atomic(path: Path | str, data: Any, *, as_yaml: bool = False) -> None:
    """Write data to a file atomically (write to temp, then rename)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(
        mode="w",
        dir=path.parent,
        suffix=path.suffix,
        delete=False,
        encoding="utf-8",
    ) as tmp:
        if as_yaml:
            _yaml.dump(data, tmp)
        elif isinstance(data, str):
            tmp.write(data)
        else:
            json.dump(data, tmp, indent=2, default=str, ensure_ascii=False)
        tmp_path = Path(tmp.name)

    tmp_path.replace(path)


def read_yaml(path: Path | str) -> dict:
    """Read a YAML file and return as dict."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        return dict(_yaml.load(f) or {})


def write_yaml(path: Path | str, data: dict) -> None:
    """Write a dict to a YAML file atomically."""
    write_atomic(path, data, as_yaml=True)


def write_json(path: Path | str, data: Any) -> None:
    """Write data to a JSON file atomically."""
    write_atomic(path, data)
