# === FILE: spiderseek/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска инжектора spiderseek через командную строку.

Команды:
  inject ROOT   Вставить тег скрипта во все HTML-файлы каталога сборки
  config        Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: spiderseek.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Опции конфигурации (inject и config):
  --site-id ID        Значение ?id= (или переменная окружения SPIDERSEEK_SITE_ID)
  --exclude PREFIX    Исключить путь и всё под ним (можно повторять)
  --exclude-regex RE  Исключить пути по регулярному выражению (можно повторять)
  --tag-id ID         DOM id тега для дедупликации

Команда inject опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --pretty            Преформатировать JSON (отступ 2)

Пример:
  spiderseek inject dist --site-id 26-5P1BG86 --exclude /admin --json inject.json
"""
import sys
from pathlib import Path
from typing import Any, Dict

import click

from spiderseek import __version__
from spiderseek.config import DEFAULT_CONFIG_PATH, InjectorConfig, build_config, read_config_data
from spiderseek.engine import inject_site
from spiderseek.errors import ConfigurationError, RootNotFoundError
from spiderseek.logger import setup_logging
from spiderseek.report.html_report import render_html
from spiderseek.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


_OVERRIDE_OPTIONS = [
    click.option('--site-id', 'site_id', default=None, envvar='SPIDERSEEK_SITE_ID',
                 help='Идентификатор сайта для параметра ?id='),
    click.option('--exclude', 'excludes', multiple=True,
                 help='Префикс пути для исключения (можно повторять)'),
    click.option('--exclude-regex', 'exclude_regexes', multiple=True,
                 help='Регулярное выражение для исключения путей (можно повторять)'),
    click.option('--tag-id', 'tag_id', default=None,
                 help='DOM id тега для дедупликации'),
]


def config_overrides(func):
    """Общие опции, переопределяющие значения из файла конфигурации."""
    for option in reversed(_OVERRIDE_OPTIONS):
        func = option(func)
    return func


def effective_config(data: Dict[str, Any], site_id, excludes, exclude_regexes, tag_id) -> InjectorConfig:
    """Сливает данные файла конфигурации с опциями CLI и валидирует результат."""
    merged = dict(data)
    if site_id is not None:
        merged.pop('siteId', None)
        merged['site_id'] = site_id
    if tag_id is not None:
        merged.pop('tagId', None)
        merged['tag_id'] = tag_id
    if excludes or exclude_regexes:
        base = merged.get('exclude') or []
        if not isinstance(base, list):
            raise ConfigurationError('exclude must be a list of matchers')
        merged['exclude'] = [*base, *excludes, *({'regex': r} for r in exclude_regexes)]
    return build_config(merged)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='spiderseek, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    envvar='SPIDERSEEK_CONFIG',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=f'Путь к файлу конфигурации YAML/JSON (по умолчанию {DEFAULT_CONFIG_PATH}, если есть).'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд spiderseek CLI."""
    setup_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    data: Dict[str, Any] = {}
    if config_path is not None or DEFAULT_CONFIG_PATH.is_file():
        try:
            data = read_config_data(config_path)
        except (ConfigurationError, OSError) as e:
            print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config_data'] = data


@cli.command('inject', context_settings=CONTEXT_SETTINGS)
@click.argument('root', type=click.Path())
@config_overrides
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию встроенный шаблон)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-отчёт (отступ 2)'
)
@click.pass_context
def inject(ctx, root, site_id, excludes, exclude_regexes, tag_id,
           json_output, html_output, template_dir, pretty):
    """Вставить тег скрипта в HTML-файлы каталога сборки ROOT."""
    try:
        cfg = effective_config(ctx.obj['config_data'], site_id, excludes, exclude_regexes, tag_id)
    except ConfigurationError as e:
        print_error(f'Ошибка конфигурации: {e}')

    try:
        result = inject_site(root, cfg)
    except RootNotFoundError as e:
        print_error(f'Каталог сборки не найден: {e.filename}')
    except OSError as e:
        print_error(f'Ошибка обхода каталога сборки: {e}')

    click.echo(result.summary())
    for failure in result.failures:
        click.secho(f'  {failure.record.path}: {failure.error}', fg='yellow', err=True)

    if json_output:
        try:
            saved_json = render_json(result, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(result, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@config_overrides
@click.pass_context
def show_config(ctx, site_id, excludes, exclude_regexes, tag_id):
    """Показать итоговую конфигурацию в JSON."""
    try:
        cfg = effective_config(ctx.obj['config_data'], site_id, excludes, exclude_regexes, tag_id)
    except ConfigurationError as e:
        print_error(f'Ошибка конфигурации: {e}')
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
