# spiderseek/__init__.py
"""
spiderseek package initializer.
Defines package version and exposes the injection API and CLI.
"""
__version__ = "0.1.0"

from spiderseek.config import InjectorConfig, build_config, load_config
from spiderseek.engine import Engine, inject_site
from spiderseek.errors import ConfigurationError, RootNotFoundError, SpiderseekError
from spiderseek.models import InjectionResult, InjectionStatus

inject = inject_site

# Expose CLI entry point
from .cli import cli  # noqa: E402

__all__ = [
    "__version__",
    "InjectorConfig",
    "build_config",
    "load_config",
    "Engine",
    "inject",
    "inject_site",
    "ConfigurationError",
    "RootNotFoundError",
    "SpiderseekError",
    "InjectionResult",
    "InjectionStatus",
    "cli",
]
