from __future__ import annotations

import json
import os
import urllib.request
from pathlib import Path
from typing import Any

from tqdm import tqdm


def read_json(p: Path) -> Any:
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(p: Path, obj: Any) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_suffix(p.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2, sort_keys=True)
    tmp.replace(p)


def urlread(url: str, *, progress: bool = True) -> bytes:
    with urllib.request.urlopen(url) as r:
        total = int(r.headers.get("content-length", 0) or 0)
        if total == 0 or not progress:
            return r.read()
        chunk_size = 1 << 14
        data = bytearray()
        with tqdm(total=total, desc="Downloading", unit="B", unit_scale=True, ncols=80, leave=False) as bar:
            while True:
                chunk = r.read(chunk_size)
                if not chunk:
                    break
                data.extend(chunk)
                bar.update(len(chunk))
        return bytes(data)


def tree_size(path: Path) -> int:
    """Return the apparent size of all regular files below *path*.

    Symlinks are counted neither as files nor followed into directories.
    """

    size = 0
    for entry in os.scandir(path):
        if entry.is_symlink():
            continue
        if entry.is_file():
            size += entry.stat(follow_symlinks=False).st_size
        elif entry.is_dir():
            size += tree_size(Path(entry.path))
    return size


__all__ = ["read_json", "tree_size", "urlread", "write_json"]
