# DEPENDENCIES
import sys
import time
import json
import logging
import traceback
from typing import Any
from typing import Dict
from pathlib import Path
from typing import Optional
from functools import wraps
from datetime import datetime

# Add parent directory to path for imports
sys.path.append(str(Path(__file__).parent.parent))

from config.settings import settings
from utils.validators import InputTooShortError


class LegalLensLogger:
    """
    Logging for the rule-based legal analysis engine

    Three channels share one log directory:
    - main        : JSON records emitted by services and the HTTP layer
    - error       : unexpected failures with traceback and request context
    - performance : one record per service call with timing and input / output size

    Input rejected by validation (InputTooShortError) is a caller mistake, so it is
    recorded on the performance channel at WARNING level and never reaches the error channel
    """
    # channel suffix -> (log file suffix, fixed level or None for the configured level)
    CHANNELS       = {""            : ("",             None),
                      "error"       : ("_error",       logging.ERROR),
                      "performance" : ("_performance", logging.INFO),
                     }

    # Result attributes counted into performance records
    COUNTED_FIELDS = ("clauses", "nodes", "relationships", "key_points", "matched_sentences")

    _loggers  : Dict[str, logging.Logger] = dict()
    _log_dir  : Optional[Path]            = None
    _app_name : str                       = settings.APP_LOG_NAME


    @classmethod
    def setup(cls, log_dir: Optional[str] = None, app_name: Optional[str] = None, level: Optional[str] = None):
        """
        Create the main, error and performance channels

        Arguments:
        ----------
            log_dir  { str } : Directory for log files (defaults to settings.LOG_DIR)

            app_name { str } : Prefix of logger names and log files (defaults to settings.APP_LOG_NAME)

            level    { str } : Level name of the main channel (defaults to settings.LOG_LEVEL)
        """
        cls._log_dir  = Path(log_dir or settings.LOG_DIR)
        cls._app_name = app_name or settings.APP_LOG_NAME
        main_level    = logging.getLevelName((level or settings.LOG_LEVEL).upper())
        main_level    = main_level if isinstance(main_level, int) else logging.INFO

        cls._log_dir.mkdir(parents = True, exist_ok = True)

        for channel, (file_suffix, channel_level) in cls.CHANNELS.items():
            cls._attach_channel(name     = cls._channel_name(channel),
                                log_file = cls._log_dir / f"{cls._app_name}{file_suffix}.log",
                                level    = channel_level or main_level,
                               )


    @classmethod
    def _channel_name(cls, channel: str) -> str:
        return f"{cls._app_name}.{channel}" if channel else cls._app_name


    @classmethod
    def _attach_channel(cls, name: str, log_file: Path, level: int) -> logging.Logger:
        logger           = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False

        # Re-running setup replaces the handlers of a previous log directory
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        formatter        = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt = '%Y-%m-%d %H:%M:%S')

        file_handler     = logging.FileHandler(log_file, encoding = "utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

        # Only warnings and above reach the console
        console_handler  = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        cls._loggers[name] = logger

        return logger


    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        Logger by full name, the main channel by default; sets up logging on first use
        """
        if not cls._loggers:
            cls.setup()

        name = name or cls._app_name

        return cls._loggers.get(name, logging.getLogger(name))


    @classmethod
    def get_channel(cls, channel: str) -> logging.Logger:
        """
        Logger of one of the CHANNELS ("error", "performance" or "" for main)
        """
        return cls.get_logger(cls._channel_name(channel))


    @classmethod
    def log_structured(cls, level: int, message: str, **kwargs):
        """
        Log a message with structured fields as one JSON record on the main channel

        Arguments:
        ----------
            level      { int } : Log level

            message    { str } : Log message

            **kwargs           : Additional structured fields
        """
        log_data = {"timestamp" : datetime.now().isoformat(),
                    "message"   : message,
                    **kwargs
                   }

        cls.get_logger().log(level, json.dumps(log_data, default = str))


    @classmethod
    def log_error(cls, error: Exception, context: Dict[str, Any] = None):
        """
        Log an unexpected failure with traceback and context on the error channel

        Arguments:
        ----------
            error      { Exception } : Exception object

            context      { dict }    : Where the failure happened (endpoint, operation, stage)
        """
        error_data = {"timestamp"     : datetime.now().isoformat(),
                      "error_type"    : type(error).__name__,
                      "error_message" : str(error),
                      "traceback"     : traceback.format_exc(),
                      "context"       : context or {},
                     }

        cls.get_channel("error").error(json.dumps(error_data, default = str))


    @classmethod
    def log_performance(cls, operation: str, duration: float, level: int = logging.INFO, **metrics):
        """
        Log one timed service call on the performance channel

        Arguments:
        ----------
            operation  { str }  : Operation name

            duration  { float } : Duration in seconds

            level      { int }  : Record level, WARNING for rejected input

            **metrics           : Status, input size and output counts
        """
        perf_data = {"timestamp"        : datetime.now().isoformat(),
                     "operation"        : operation,
                     "duration_seconds" : round(duration, 3),
                     **metrics
                    }

        cls.get_channel("performance").log(level, json.dumps(perf_data, default = str))


    @staticmethod
    def measure_input(args: tuple, kwargs: Dict[str, Any]) -> Dict[str, int]:
        """
        Total characters of the text arguments and number of items in list arguments
        """
        values  = list(args) + list(kwargs.values())
        metrics = {"input_chars" : sum(len(value) for value in values if isinstance(value, str))}
        items   = [len(value) for value in values if isinstance(value, (list, tuple))]

        if items:
            metrics["input_items"] = sum(items)

        return metrics


    @classmethod
    def measure_output(cls, result: Any) -> Dict[str, int]:
        """
        Sizes of the list fields of a service result (clauses, nodes, ...)
        """
        if isinstance(result, list):
            return {"output_items" : len(result)}

        return {f"output_{field}" : len(getattr(result, field)) for field in cls.COUNTED_FIELDS if isinstance(getattr(result, field, None), list)}


    @staticmethod
    def log_execution_time(operation_name: str = None):
        """
        Decorator for service entry points: records duration, input size and result size
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                op_name    = operation_name or func.__name__
                input_size = LegalLensLogger.measure_input(args, kwargs)
                start_time = time.time()

                try:
                    result = func(*args, **kwargs)

                except InputTooShortError as e:
                    LegalLensLogger.log_performance(operation = op_name,
                                                    duration  = time.time() - start_time,
                                                    level     = logging.WARNING,
                                                    status    = "rejected",
                                                    reason    = str(e),
                                                    **input_size,
                                                   )
                    raise

                except Exception as e:
                    LegalLensLogger.log_performance(operation = op_name,
                                                    duration  = time.time() - start_time,
                                                    status    = "error",
                                                    error     = str(e),
                                                    **input_size,
                                                   )

                    LegalLensLogger.log_error(e, context = {"operation" : op_name})
                    raise

                LegalLensLogger.log_performance(operation = op_name,
                                                duration  = time.time() - start_time,
                                                status    = "success",
                                                **input_size,
                                                **LegalLensLogger.measure_output(result),
                                               )

                return result

            return wrapper

        return decorator



def log_info(message: str, **kwargs):
    LegalLensLogger.log_structured(logging.INFO, message, **kwargs)


def log_error(error: Exception, context: Dict[str, Any] = None):
    LegalLensLogger.log_error(error, context)
