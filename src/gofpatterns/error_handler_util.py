"""
Error handling utilities for GoF Patterns.

Provides the standardized error handling patterns used across the demos:
log-then-raise for invalid construction, log-and-fallback for the file
operations whose failures are deliberately swallowed, and per-component
error contexts with a pre-configured logger.
"""

import logging
from typing import Optional, Any, Type

logger = logging.getLogger('GoFPatterns.ErrorHandler')


class UnknownDemoError(KeyError):
    """Raised when a demo or category name is not in the catalogue."""

    def __str__(self):
        # KeyError repr-quotes its message
        return str(self.args[0]) if self.args else ''


class QueryBuilderError(ValueError):
    """Raised when a query template cannot be filled."""


class MagicSquareError(RuntimeError):
    """Raised when no verified magic square is produced in time."""


class ErrorHandlerUtil:
    """Static helpers that pair a log record with every raise or fallback."""

    @staticmethod
    def log_and_raise(
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        logger_instance: Optional[logging.Logger] = None,
        cause: Optional[Exception] = None,
        log_level: int = logging.ERROR
    ) -> None:
        """
        Log an error message and raise an exception.

        Args:
            message: Error message to log and include in exception
            exception_class: Type of exception to raise (default: RuntimeError)
            logger_instance: Logger to use (default: module logger)
            cause: Original exception to chain from (using 'from cause')
            log_level: Logging level to use (default: ERROR)

        Raises:
            The specified exception_class with the provided message
        """
        log_instance = logger_instance or logger
        log_instance.log(log_level, message)

        if cause:
            raise exception_class(message) from cause
        else:
            raise exception_class(message)

    @staticmethod
    def log_and_raise_operation_error(
        operation_name: str,
        details: str = "",
        exception_class: Type[Exception] = RuntimeError,
        logger_instance: Optional[logging.Logger] = None,
        cause: Optional[Exception] = None
    ) -> None:
        """
        Log and raise "<operation_name> failed: <details>".

        Args:
            operation_name: Name of the operation that failed
            details: Additional details about the failure
            exception_class: Type of exception to raise
            logger_instance: Logger to use (default: module logger)
            cause: Original exception to chain from
        """
        message = f"{operation_name} failed"
        if details:
            message += f": {details}"

        ErrorHandlerUtil.log_and_raise(
            message=message,
            exception_class=exception_class,
            logger_instance=logger_instance,
            cause=cause
        )

    @staticmethod
    def handle_with_fallback(
        operation_callable,
        fallback_value: Any = None,
        error_message: str = "Operation failed",
        logger_instance: Optional[logging.Logger] = None,
        log_level: int = logging.WARNING,
        exceptions: tuple = (Exception,)
    ) -> Any:
        """
        Run operation_callable, returning fallback_value if it raises one of exceptions.

        Args:
            operation_callable: Function/callable to execute
            fallback_value: Value to return if operation fails
            error_message: Message to log on failure
            logger_instance: Logger to use (default: module logger)
            log_level: Logging level for errors (default: WARNING)
            exceptions: Exception types that trigger the fallback

        Returns:
            Result of operation_callable or fallback_value on failure
        """
        try:
            return operation_callable()
        except exceptions as e:
            log_instance = logger_instance or logger
            log_instance.log(log_level, f"{error_message}: {str(e)}")
            return fallback_value

    @staticmethod
    def log_and_continue(
        error: Exception,
        context: str = "Operation",
        logger_instance: Optional[logging.Logger] = None,
        log_level: int = logging.ERROR
    ) -> None:
        """
        Log "<context> failed: <error>" without raising.

        Used by the demo drivers so one failing demo does not stop the rest.

        Args:
            error: Exception that occurred
            context: Context description for the error
            logger_instance: Logger to use (default: module logger)
            log_level: Logging level to use (default: ERROR)
        """
        log_instance = logger_instance or logger
        log_instance.log(log_level, f"{context} failed: {str(error)}")

    @staticmethod
    def create_error_context(
        component_name: str,
        logger_name: Optional[str] = None
    ) -> 'ErrorContext':
        """
        Create an error context for a specific component.

        Args:
            component_name: Name of the component
            logger_name: Logger name to use (default: GoFPatterns.{component_name})

        Returns:
            ErrorContext instance for the component
        """
        if logger_name is None:
            logger_name = f'GoFPatterns.{component_name}'

        component_logger = logging.getLogger(logger_name)
        return ErrorContext(component_name, component_logger)


class ErrorContext:
    """ErrorHandlerUtil bound to one component's GoFPatterns.<component> logger."""

    def __init__(self, component_name: str, logger_instance: logging.Logger):
        self.component_name = component_name
        self.logger = logger_instance

    def log_and_raise(
        self,
        message: str,
        exception_class: Type[Exception] = RuntimeError,
        cause: Optional[Exception] = None
    ) -> None:
        """Log on the component logger, then raise."""
        ErrorHandlerUtil.log_and_raise(
            message=message,
            exception_class=exception_class,
            logger_instance=self.logger,
            cause=cause
        )

    def log_and_raise_operation_error(
        self,
        operation_name: str,
        details: str = "",
        exception_class: Type[Exception] = RuntimeError,
        cause: Optional[Exception] = None
    ) -> None:
        """Log and raise an operation failure on the component logger."""
        ErrorHandlerUtil.log_and_raise_operation_error(
            operation_name=operation_name,
            details=details,
            exception_class=exception_class,
            logger_instance=self.logger,
            cause=cause
        )

    def handle_with_fallback(
        self,
        operation_callable,
        fallback_value: Any = None,
        error_message: str = "Operation failed",
        exceptions: tuple = (Exception,)
    ) -> Any:
        """Run with a fallback value, logging failures on the component logger."""
        return ErrorHandlerUtil.handle_with_fallback(
            operation_callable=operation_callable,
            fallback_value=fallback_value,
            error_message=error_message,
            logger_instance=self.logger,
            exceptions=exceptions
        )

    def log_and_continue(
        self,
        error: Exception,
        context: str = "Operation"
    ) -> None:
        """Log a failure on the component logger without raising."""
        ErrorHandlerUtil.log_and_continue(
            error=error,
            context=context,
            logger_instance=self.logger
        )
