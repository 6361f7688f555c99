from .error_handler import register_exception_handlers
