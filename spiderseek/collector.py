# File: spiderseek/collector.py
"""spiderseek.collector: поиск собранных HTML-файлов в каталоге сборки."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from spiderseek.errors import RootNotFoundError
from spiderseek.logger import logger

__all__ = ["HTML_SUFFIX", "resolve_root", "collect_html_files"]

HTML_SUFFIX = ".html"


def resolve_root(root: Union[str, Path]) -> Path:
    """Converts a build output dir (path or ``file://`` URL) to an absolute Path."""
    # Path("file:///dist") collapses to "file:/dist"; urlparse handles both
    if str(root).startswith("file:"):
        root = url2pathname(urlparse(str(root)).path)
    return Path(root).expanduser().absolute()


def _walk(directory: Path, out: List[Path]) -> None:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        if entry.is_dir():
            _walk(Path(entry.path), out)
        elif entry.is_file() and entry.name.endswith(HTML_SUFFIX):
            out.append(Path(entry.path))


def collect_html_files(root: Union[str, Path]) -> List[Path]:
    """
    Рекурсивно собирает все файлы ``*.html`` под root.

    Порядок обхода: в глубину, записи каждого каталога по имени.
    Если root не существует или не каталог — RootNotFoundError.
    """
    root_path = resolve_root(root)
    if not root_path.is_dir():
        logger.error("Build output directory not found: %s", root_path)
        raise RootNotFoundError(root_path)

    files: List[Path] = []
    _walk(root_path, files)
    logger.debug("Collected %d HTML file(s) under %s", len(files), root_path)
    return files
