"""
Пакет barsvg
============

Векторный рендеринг одномерных штрихкодов: кодирование значения делегируется
python-barcode, пакет отвечает только за раскладку полос, цвета и подпись.

Этот пакет предоставляет:
    - Адаптер кодировщика поверх python-barcode с типизированными ошибками
    - Сжатие битов модулей в минимальный список прямоугольников
    - Строки SVG-путей вида M<x>,<y>h<w>v<h>h-<w>z
    - Модель виджета с кешем раскладки и доставкой ошибок через on_error
    - Сборку автономного SVG-документа

Пример базового использования:
    >>> from barsvg import BarcodeView, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> view = BarcodeView(value="HELLO", format="CODE128", text="HELLO")
    >>> view.on_layout(330)
    >>> logger.info("Полос: %d", len(view.bars))
    >>> svg = view.to_svg()

Управление конфигурацией:
    >>> import os
    >>> os.environ['BARSVG_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from barsvg import load_config, BarcodeView
    >>>
    >>> config = load_config()
    >>> view = BarcodeView.from_config(config, value="12345678")

Лицензия: MIT
Python: 3.9+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "barsvg contributors"
__description__ = "Vector (SVG path) layout of 1D barcodes encoded by python-barcode"
__license__ = "MIT"
__python_requires__ = ">=3.9"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 9):
    raise RuntimeError(
        f"barsvg требует Python 3.9 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"

_LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Инициализировать логирование пакета (идемпотентно).

    - Консольный обработчик (stderr) для WARNING и выше
    - Ротирующий файловый обработчик, если задана BARSVG_LOG_FILE
    - Уровень из переменной окружения BARSVG_LOG_LEVEL (по умолчанию INFO)
    """
    log_level_str = os.environ.get("BARSVG_LOG_LEVEL", "INFO").upper()
    log_level = _LOG_LEVELS.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger("barsvg")
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("BARSVG_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=5 * 1024 * 1024,  # 5 МБ
                backupCount=3,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Не удалось инициализировать файловое логирование: {e}. "
                f"Используется только консоль."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён barsvg.

    Аргументы:
        module_name: Обычно `__name__`; "__main__" становится "barsvg.main".

    Пример:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Ширина модуля: %s", 2.5)
    """
    if module_name == "barsvg" or module_name.startswith("barsvg."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger("barsvg.main")
    return logging.getLogger(f"barsvg.{module_name.lstrip('.')}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

# Значения по умолчанию совпадают со свойствами виджета по умолчанию
_DEFAULT_CONFIG: Dict[str, Any] = {
    "format": "CODE128",
    "width": 0,
    "height": 100,
    "line_color": "#000000",
    "text_color": "#000000",
    "text_font": "System",
    "background": "#ffffff",
    "font_size": 15,
    "log_level": "INFO",
}


def _read_config_file(config_path: Path) -> Optional[Dict[str, Any]]:
    """Прочитать JSON-объект из файла; None, если файл непригоден."""
    logger = get_logger(__name__)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(
            "Файл %s недоступен для чтения (%s), берутся значения по умолчанию",
            config_path,
            e,
        )
        return None

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(
            "%s: ошибка JSON (строка %d, позиция %d), берутся значения по умолчанию",
            config_path,
            e.lineno,
            e.colno,
        )
        return None

    if not isinstance(data, dict):
        logger.warning(
            "%s: ожидался JSON-объект, а не %s; берутся значения по умолчанию",
            config_path,
            type(data).__name__,
        )
        return None
    return data


def _apply_log_level(level_name: Any) -> None:
    """Выставить уровень логгера barsvg по имени ("DEBUG", "info", ...)."""
    level = _LOG_LEVELS.get(str(level_name).upper())
    if level is None:
        get_logger(__name__).warning("Неизвестный log_level %r проигнорирован", level_name)
        return
    root_logger = logging.getLogger("barsvg")
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.setLevel(level)


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из barsvg.json поверх значений по умолчанию.

    Ключи конфигурации:
        - format: str - Формат штрихкода по умолчанию
        - width: int - Ширина виджета (0 - растянуть по контейнеру)
        - height: int - Высота полос
        - line_color / text_color / background: str - Цвета
        - text_font: str - Шрифт подписи
        - font_size: int - Размер шрифта подписи
        - log_level: str - Уровень логгера barsvg; применяется сразу,
          если задан в файле

    Аргументы:
        config_path: Путь к файлу; если None, ищется 'barsvg.json'
                    в текущем каталоге.

    Возвращает:
        Новый словарь: значения по умолчанию, переопределённые файлом.
        Непригодный файл даёт предупреждение в лог и значения по умолчанию.
    """
    logger = get_logger(__name__)
    path = Path("barsvg.json") if config_path is None else config_path
    config = dict(_DEFAULT_CONFIG)

    if not path.exists():
        logger.info("%s отсутствует, используются значения по умолчанию", path)
        return config

    user_config = _read_config_file(path)
    if user_config is None:
        return config

    config.update(user_config)
    if "log_level" in user_config:
        _apply_log_level(user_config["log_level"])
    logger.info("Конфигурация прочитана из %s (%d ключей)", path, len(user_config))
    logger.debug("Итоговая конфигурация: %s", config)
    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Проверить наличие зависимостей, не вызывая исключений.

    Возвращает:
        Словарь {имя пакета: доступен ли}.
    """
    dependencies: Dict[str, bool] = {}

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import svgwrite  # noqa: F401

        dependencies["svgwrite"] = True
    except ImportError:
        dependencies["svgwrite"] = False

    return dependencies


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

_setup_logging()

from barsvg.barcodegen import (  # noqa: E402
    BarcodeRenderError,
    EncodedSymbol,
    InvalidFormatError,
    InvalidInputError,
    InvalidValueForFormatError,
    Rectangle,
    RenderOptions,
    RenderResult,
    RenderState,
    compact,
    encode,
    render,
    render_svg,
)
from barsvg.model.barcode_view import BarcodeView  # noqa: E402
from barsvg.model.enums import BarcodeFormat  # noqa: E402

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    "get_logger",
    "load_config",
    "check_dependencies",
    "BarcodeFormat",
    "BarcodeView",
    "BarcodeRenderError",
    "EncodedSymbol",
    "InvalidFormatError",
    "InvalidInputError",
    "InvalidValueForFormatError",
    "Rectangle",
    "RenderOptions",
    "RenderResult",
    "RenderState",
    "compact",
    "encode",
    "render",
    "render_svg",
]

_logger = get_logger(__name__)
_logger.debug(f"barsvg v{__version__} инициализирован")
