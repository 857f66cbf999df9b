import logging
import os

from sandwiched.config import AppConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_path(filename: str) -> str:
    os.makedirs(AppConfig.LOG_DIR, exist_ok=True)
    return os.path.join(AppConfig.LOG_DIR, filename)


logging.basicConfig(
    level=AppConfig.LOG_LEVEL,
    format=LOG_FORMAT,
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(_log_path("sandwiched_general.log"), encoding="utf-8"),
    ],
)


def _file_logger(name: str, filename: str, level) -> logging.Logger:
    log = logging.getLogger(name)
    log.setLevel(level)
    # evita handler duplicado se o módulo for recarregado
    if not log.handlers:
        file_handler = logging.FileHandler(_log_path(filename), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(file_handler)
    return log


# busca, descoberta de pools e anomalias ("Weird")
logger = _file_logger("sandwiched", "sandwiched.log", AppConfig.LOG_LEVEL)

# exceções não tratadas nas rotas
error_logger = _file_logger("error_sandwiched", "error_sandwiched.log", logging.ERROR)


def log_weird(log: logging.Logger, msg: str, txs: list[str]) -> None:
    """Registra um padrão suspeito que a detecção decidiu ignorar."""
    log.warning(f"Weird: {msg} (txs {','.join(txs)})")
