# core/logger.py
import logging

from core.config import settings

LOGGER_NAME = "validador_identificadores"

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(settings.log_level)
if not logger.handlers:
    ch = logging.StreamHandler()
    fmt = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    formatter = logging.Formatter(fmt)
    ch.setFormatter(formatter)
    logger.addHandler(ch)


def get_logger(nombre: str) -> logging.Logger:
    """
    Devuelve un logger hijo del logger de la aplicación, de modo que hereda
    su handler y su nivel (ej: "validador_identificadores.service.validation_service").
    """
    return logger.getChild(nombre)


def enmascarar(valor: str, visibles: int = 4) -> str:
    """
    Oculta un identificador para los logs dejando visibles los últimos caracteres.

    Example:
        >>> enmascarar("12345678Z")
        '*****678Z'
    """
    valor = valor or ""
    if len(valor) <= visibles:
        return "*" * len(valor)
    return "*" * (len(valor) - visibles) + valor[-visibles:]
