"""
Configuración de structlog sobre el logging de la stdlib.

Los módulos piden su logger con get_logger("carrilbici.<area>"); solo el
punto de entrada (la CLI) llama a configure_logging(). Sin configurar, los
eventos van al logger de la stdlib y debug/info no se emiten.
"""
import logging
import os
import sys

import structlog

LOG_LEVEL = os.getenv("CARRILBICI_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.getenv("CARRILBICI_LOG_FORMAT", "console")

_CONFIGURED = False


def get_logger(name: str):
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(log_level: str = LOG_LEVEL, log_format: str = LOG_FORMAT) -> None:
    """
    Configura structlog una sola vez por proceso (la primera llamada gana).

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR o CRITICAL
        log_format: "console" o "json"
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    level = getattr(logging, log_level.upper(), logging.WARNING)

    # stderr: stdout queda para la salida de la CLI
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    shared_processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.contextvars.merge_contextvars,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level]
        + shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    ))

    logging.basicConfig(level=level, handlers=[handler], force=True)
    _CONFIGURED = True
