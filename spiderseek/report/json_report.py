# spiderseek/report/json_report.py

"""
Генерация JSON-отчёта для spiderseek.

Сериализация объекта InjectionResult в файл.
"""
import json
from pathlib import Path

from spiderseek.models import InjectionResult


def render_json(result: InjectionResult, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет результат result в формате JSON по указанному пути.

    :param result: объект InjectionResult с итогами запуска
    :param output_path: путь к JSON-файлу
    :param pretty: форматировать с отступом 2
    :return: Path сохранённого файла

    Пример:
    ```python
    from spiderseek.report.json_report import render_json
    report_path = render_json(result, 'reports/inject.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
