from __future__ import annotations

from pathlib import Path
from typing import List


def read_ids(path: Path) -> List[str]:
    """One identifier per line; blank lines and ``#`` comments are skipped."""
    out: List[str] = []
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            s = line.split("#", 1)[0].strip()
            if s:
                out.append(s)
    return out
