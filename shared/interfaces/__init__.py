# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .responses import success_response

__all__ = ['custom_exception_handler', 'success_response']
