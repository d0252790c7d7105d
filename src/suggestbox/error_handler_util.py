"""
Error handling utilities for SuggestBox.

Two failure points exist outside the pure engine: catalog data that cannot
be loaded or validated, and host callbacks invoked from the event loop. The
first is logged and raised, the second logged and contained.
"""

import logging
from typing import Any, Callable, NoReturn, Optional, Type

logger = logging.getLogger('SuggestBox.ErrorHandler')


class ErrorHandlerUtil:
    """Log-then-raise helper and the factory for per-component contexts."""

    @staticmethod
    def log_and_raise(
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        logger_instance: Optional[logging.Logger] = None,
        cause: Optional[Exception] = None,
    ) -> NoReturn:
        """
        Log an error and raise exception_class(message), chained from cause when given.

        Never returns, so callers may use it as the last statement of a
        function that otherwise returns a value.
        """
        (logger_instance or logger).log(logging.ERROR, message)

        if cause is not None:
            raise exception_class(message) from cause
        raise exception_class(message)

    @staticmethod
    def create_error_context(component_name: str, logger_name: Optional[str] = None) -> 'ErrorContext':
        """Bind error handling to a component logger (default: SuggestBox.{component_name})."""
        return ErrorContext(component_name, logging.getLogger(logger_name or f'SuggestBox.{component_name}'))


class ErrorContext:
    """Error handling bound to one component's name and logger."""

    def __init__(self, component_name: str, logger_instance: logging.Logger):
        self.component_name = component_name
        self.logger = logger_instance

    def log_and_raise(
        self,
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        cause: Optional[Exception] = None
    ) -> NoReturn:
        ErrorHandlerUtil.log_and_raise(message, exception_class, self.logger, cause)

    def handle_with_fallback(
        self,
        operation_callable: Callable[[], Any],
        fallback_value: Any = None,
        error_message: str = "Callback failed"
    ) -> Any:
        """
        Run a callback, returning fallback_value and logging a warning if it raises.

        Used around host code so a failing callback cannot end the main loop.
        """
        try:
            return operation_callable()
        except Exception as e:
            self.logger.log(logging.WARNING, f"{error_message}: {e}")
            return fallback_value
