import logging
import os
import sys
from typing import Any

import structlog
from rich.console import Console
from rich.text import Text

# Command output; log lines go to stderr through the renderer
console = Console()

LEVEL_STYLES = {
    'debug': 'dim',
    'info': 'green',
    'warning': 'yellow',
    'error': 'bold red',
    'critical': 'bold magenta',
}


class RichConsoleRenderer:
    """
    Print structlog events on a rich console.

    A line reads `timestamp logger level event key=value ...`. The line is
    assembled as a rich Text, so locators and error messages are printed
    literally even when they contain markup brackets.
    """

    def __init__(self, console: Console | None = None):
        self._console = console or Console(stderr=True)

    def render(self, event_dict: dict[str, Any]) -> Text:
        level = event_dict.pop('level', 'info')
        timestamp = event_dict.pop('timestamp', None)
        logger_name = event_dict.pop('logger', None)
        event = str(event_dict.pop('event', ''))
        exc_info = event_dict.pop('exc_info', None)
        exception = event_dict.pop('exception', None) or exc_info
        stack = event_dict.pop('stack_info', None)

        line = Text()
        if timestamp:
            line.append(f'{timestamp} ', style='dim')
        if logger_name:
            line.append(f'{logger_name} ', style='bold')
        line.append(f'{level:<8} ', style=LEVEL_STYLES.get(level, 'white'))
        line.append(event)
        for key, value in event_dict.items():
            line.append(' ')
            line.append(key, style='cyan')
            line.append('=')
            line.append(repr(value), style='green')
        if exception:
            line.append(f'\n{exception}', style='red')
        if stack:
            line.append(f'\n{stack}', style='dim')
        return line

    def __call__(self, logger, name, event_dict):
        self._console.print(self.render(event_dict))
        raise structlog.DropEvent


def setup_logging(level: str = 'INFO') -> None:
    """
    Configure structlog for the CLI.

    Human readable lines on stderr by default, one JSON object per line
    when ENV=production. stdout is left to command output such as `--json`.
    """
    logging.basicConfig(format='%(message)s', stream=sys.stderr, level=level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if os.getenv('ENV') == 'production':
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(RichConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
