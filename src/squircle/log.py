from loguru import logger as _logger


class logger_wrapper:

    def __init__(self, logger_name: str) -> None:
        self._name = logger_name

    def _log(self,
             level: str,
             message: str,
             exception: Exception | None = None) -> None:
        _logger.opt(colors=True, exception=exception,
                    depth=2).log(level, f"<m>{self._name}</m> | {message}")

    def critical(self,
                 message: str,
                 exception: Exception | None = None) -> None:
        self._log("CRITICAL", message, exception)

    def error(self, message: str, exception: Exception | None = None) -> None:
        self._log("ERROR", message, exception)

    def warning(self,
                message: str,
                exception: Exception | None = None) -> None:
        self._log("WARNING", message, exception)

    def success(self,
                message: str,
                exception: Exception | None = None) -> None:
        self._log("SUCCESS", message, exception)

    def info(self, message: str, exception: Exception | None = None) -> None:
        self._log("INFO", message, exception)

    def debug(self, message: str, exception: Exception | None = None) -> None:
        self._log("DEBUG", message, exception)

    def trace(self, message: str, exception: Exception | None = None) -> None:
        self._log("TRACE", message, exception)


def enable(enabled: bool = True) -> None:
    """Turn the library's loguru records on or off."""
    if enabled:
        _logger.enable("squircle")
    else:
        _logger.disable("squircle")
