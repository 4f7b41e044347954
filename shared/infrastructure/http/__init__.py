# HTTP clients
from .json_client import JsonHttpClient

__all__ = ['JsonHttpClient']
