# File: spiderseek/engine.py
"""spiderseek.engine: оркестрация обхода каталога сборки и инъекции."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Union

from spiderseek.collector import collect_html_files, resolve_root
from spiderseek.config import InjectorConfig, build_config
from spiderseek.injector import Injector
from spiderseek.logger import logger
from spiderseek.models import FileRecord, InjectionResult
from spiderseek.resolver import file_path_to_url

__all__ = ["Engine", "inject_site"]


class Engine:
    """Фасад для CLI и тестов: обход каталога сборки и агрегация результата."""

    def __init__(self, config: InjectorConfig) -> None:
        self.config = config
        self.injector = Injector(config)

    def run(self, root: Union[str, Path]) -> InjectionResult:
        """Обрабатывает файлы строго по одному в порядке обхода и возвращает итог."""
        root_path = resolve_root(root)
        files = collect_html_files(root_path)

        result = InjectionResult(exclusions=self.config.exclusions())
        for path in files:
            record = FileRecord(path=path, url_path=file_path_to_url(root_path, path))
            result.add(self.injector.process(record))

        logger.info("[spiderseek] %s", result.summary())
        return result


def inject_site(
    root: Union[str, Path], config: Union[InjectorConfig, Mapping[str, Any]]
) -> InjectionResult:
    """Inject the analytics tag into every eligible page under *root*.

    Configuration errors and a missing root raise before any file is touched.
    """
    return Engine(build_config(config)).run(root)
