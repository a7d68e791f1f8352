"""
Пакет figma-text
================

Styled-text serializer for design-tool TEXT nodes.

The package turns a text node exported by a design tool (plain characters,
a base style, a per-character style override table and per-line list data)
into a single markup string for a UI framework's rich-text label:

    - Paired formatting tags: <b>, <i>, <u>, <strikethrough>
    - Value-carrying tags: <color=#RRGGBBAA>, <font-weight=700>, <size=14>,
      <indent=20>
    - Literal list prefixes ("1. ", "• ") and literal line breaks
    - A preprocessing pass over a whole document node tree

Basic usage:
    >>> from figma_text import TextRun, TextStyle, build_rich_text
    >>>
    >>> run = TextRun(
    ...     characters="AB",
    ...     style_override_ids=(0, 1),
    ...     style_override_table={1: TextStyle(font_weight=700)},
    ... )
    >>> build_rich_text(run)
    'A<b><font-weight=700>B</b></font-weight>'

Document preprocessing:
    >>> import json
    >>> from figma_text import apply_rich_text
    >>>
    >>> data = json.loads(Path("file.json").read_text(encoding="utf-8"))
    >>> rewritten = apply_rich_text(data)

Configuration management:
    >>> import os
    >>> os.environ['FIGMA_TEXT_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from figma_text import load_config, get_logger
    >>>
    >>> config = load_config()
    >>> print(config['json_indent'])

Версия: 0.1.0
Лицензия: MIT
Python: 3.10+
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
__author__ = "figma-text Development Team"
__description__ = "Styled-text serializer for design-tool text nodes"
__license__ = "MIT"
__python_requires__ = ">=3.10"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 10):
    raise RuntimeError(
        f"figma-text требует Python 3.10 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAMESPACE = "figma_text"
LOG_LEVEL_ENV = "FIGMA_TEXT_LOG_LEVEL"
LOG_DIR_ENV = "FIGMA_TEXT_LOG_DIR"


def _setup_logging() -> None:
    """
    Initialize package-wide logging.

    Configures the ``figma_text`` logger with:
    - a stderr handler for WARNING and above;
    - a rotating file handler for all levels, only when the
      FIGMA_TEXT_LOG_DIR environment variable names a directory;
    - a ``[time] LEVEL [module.function:line] message`` format.

    The level comes from FIGMA_TEXT_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR,
    CRITICAL; INFO by default). Repeated calls are no-ops while the logger
    already has handlers.
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir_value = os.environ.get(LOG_DIR_ENV)
    if log_dir_value:
        try:
            log_dir = Path(log_dir_value)
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / "figma_text.log",
                maxBytes=10 * 1024 * 1024,  # 10 MiB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Could not initialize file logging in %s: %s. Using console only.",
                log_dir_value,
                e,
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger living under the ``figma_text`` namespace.

    Args:
        module_name: Usually ``__name__``. Names outside the package
            namespace are prefixed with ``figma_text.``; ``__main__``
            becomes ``figma_text.main``.

    Returns:
        A configured ``logging.Logger``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Serialized %d characters", 42)
    """
    if not module_name.startswith(LOGGER_NAMESPACE):
        if module_name == "__main__":
            full_name = f"{LOGGER_NAMESPACE}.main"
        else:
            clean_name = module_name.lstrip(".")
            full_name = f"{LOGGER_NAMESPACE}.{clean_name}" if clean_name else LOGGER_NAMESPACE
    else:
        full_name = module_name

    return logging.getLogger(full_name)


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

DEFAULT_CONFIG_FILENAME = "figma_text.json"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "only_needed": True,
    "json_indent": 2,
    "output_encoding": "utf-8",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file, falling back to defaults.

    Keys:
        - log_level: str - logging level name
        - only_needed: bool - rewrite only TEXT nodes that carry list
          lines or style overrides
        - json_indent: int - indentation of JSON written by the CLI
        - output_encoding: str - encoding of files written by the CLI

    Args:
        config_path: Optional path to the configuration file. Defaults to
            ``figma_text.json`` in the current directory.

    Returns:
        A dict that always holds every default key, with user values
        overriding the defaults. Invalid JSON, a non-object payload or an
        unreadable file log a warning and yield the defaults.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILENAME)

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Configuration file must contain a JSON object, "
                    f"got {type(user_config).__name__}"
                )

            config.update(user_config)

            logger.info("Configuration loaded from %s", config_path)
            logger.debug("Configuration: %s", config)

        except json.JSONDecodeError as e:
            logger.warning(
                "Could not parse %s: invalid JSON at line %d, column %d. "
                "Using default configuration.",
                config_path,
                e.lineno,
                e.colno,
            )
            config = _DEFAULT_CONFIG.copy()
        except OSError as e:
            logger.warning(
                "Could not read %s: %s. Using default configuration.", config_path, e
            )
        except ValueError as e:
            logger.warning("Invalid configuration format: %s. Using default configuration.", e)
    else:
        logger.debug("Configuration file %s not found. Using default configuration.", config_path)

    return config


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Imported after the utilities so that logging is configured first.
from .exceptions import InvalidTextRunError, NodeFormatError, RichTextError  # noqa: E402
from .model.enums import FontWeight, LineType, PaintType, TextDecoration  # noqa: E402
from .model.paint import RGBA, GradientPaint, ImagePaint, SolidPaint  # noqa: E402
from .model.style import TextStyle  # noqa: E402
from .model.text_run import TextRun  # noqa: E402
from .preprocess import apply_rich_text, needs_rich_text, render_text_nodes  # noqa: E402
from .richtext.builder import TextSerializer, build_rich_text  # noqa: E402

__all__ = [
    # Version metadata
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Utilities
    "get_logger",
    "load_config",
    # Exceptions
    "RichTextError",
    "InvalidTextRunError",
    "NodeFormatError",
    # Model
    "FontWeight",
    "LineType",
    "PaintType",
    "TextDecoration",
    "RGBA",
    "SolidPaint",
    "GradientPaint",
    "ImagePaint",
    "TextStyle",
    "TextRun",
    # Serialization
    "TextSerializer",
    "build_rich_text",
    "needs_rich_text",
    "render_text_nodes",
    "apply_rich_text",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug("figma-text v%s initialized (Python %s)", __version__, sys.version.split()[0])
