"""Logging configuration for the application."""

import logging
import sys
import json
from datetime import datetime

ROOT_LOGGER_NAME = "customtee"


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            "timestamp": datetime.utcnow().isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Custom text formatter with colors for development."""
    
    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }
    
    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]
        
        timestamp = datetime.utcnow().strftime("%Y-%m-%d %H:%M:%S")
        log_message = (
            f"{color}[{timestamp}] {record.levelname:8s}{reset} - "
            f"{record.name} - {record.getMessage()}"
        )
        
        if record.exc_info:
            log_message += f"\n{self.formatException(record.exc_info)}"
        
        return log_message


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = "INFO",
    log_format: str = "text"
) -> logging.Logger:
    """
    Setup and configure the service root logger.
    
    Loggers obtained through get_logger() are children of this logger and
    inherit its handler.
    
    Args:
        name: Logger name
        level: Log level
        log_format: Format type (json or text)
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()
    
    handler = logging.StreamHandler(sys.stdout)
    
    if log_format.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()
    
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    
    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get logger instance namespaced under the service root logger.
    
    Args:
        name: Logger name, usually a class or module name
        
    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
