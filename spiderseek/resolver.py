# File: spiderseek/resolver.py
"""spiderseek.resolver: filesystem path of a built page -> URL path it is served at."""

from __future__ import annotations

from pathlib import Path
from typing import Union

_INDEX = "index.html"


def file_path_to_url(root: Union[str, Path], file: Union[str, Path]) -> str:
    """Map ``about/index.html`` to ``/about/``, ``index.html`` to ``/`` and ``foo.html`` to ``/foo.html``."""
    rel = Path(file).relative_to(Path(root)).as_posix()
    if rel == _INDEX or rel.endswith("/" + _INDEX):
        return "/" + rel[: -len(_INDEX)]
    return "/" + rel
