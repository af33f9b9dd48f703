# === FILE: spiderseek/config.py ===
"""
Модуль для загрузки и валидации конфигурации инжектора spiderseek.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_serializer,
    field_validator,
)

from spiderseek.errors import ConfigurationError
from spiderseek.matchers import Matcher, parse_matchers

DEFAULT_TAG_ID = "spiderseek-sdk"


class InjectorConfig(BaseModel):
    """Конфигурация одного запуска инъекции."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    site_id: str = Field(..., alias="siteId", min_length=1, description="Значение параметра ?id= в URL скрипта.")
    exclude: tuple[Matcher, ...] = Field(
        default=(), description="Префиксы путей или регулярные выражения, исключаемые из инъекции."
    )
    tag_id: str = Field(DEFAULT_TAG_ID, alias="tagId", min_length=1, description="DOM id тега для дедупликации.")

    @field_validator("exclude", mode="before")
    @classmethod
    def _parse_exclude(cls, v: Any) -> tuple[Matcher, ...]:
        return parse_matchers(v)

    @field_serializer("exclude")
    def _dump_exclude(self, value: tuple[Matcher, ...]) -> list[str]:
        return [str(m) for m in value]

    def exclusions(self) -> list[str]:
        """Строковые представления правил исключения (для отчёта)."""
        return [str(m) for m in self.exclude]


DEFAULT_CONFIG_PATH = Path("spiderseek.yaml")


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "config"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def build_config(data: Union[InjectorConfig, Mapping[str, Any]]) -> InjectorConfig:
    """
    Строит InjectorConfig из словаря.
    Любая ошибка схемы превращается в ConfigurationError до обращения к файлам.
    """
    if isinstance(data, InjectorConfig):
        return data
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Конфигурация должна быть mapping, получено {type(data).__name__}")
    try:
        return InjectorConfig(**data)
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_error(exc)) from exc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_config_data(path: Union[str, Path, None]) -> Dict[str, Any]:
    """
    Читает YAML или JSON и возвращает «сырой» словарь без валидации.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(DEFAULT_CONFIG_PATH))
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ConfigurationError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None]) -> InjectorConfig:
    """Читает файл конфигурации и возвращает проверенный InjectorConfig."""
    return build_config(read_config_data(path))
