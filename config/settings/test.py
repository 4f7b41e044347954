"""
Test settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = False
SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CELERY_BROKER_URL = 'memory://'
CELERY_RESULT_BACKEND = 'cache+memory://'
CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True

EXTERNAL_SERVICES = {
    'customer': {'base_url': 'http://customer.test', 'connect_timeout': 1, 'read_timeout': 2},
    'product': {'base_url': 'http://product.test', 'connect_timeout': 1, 'read_timeout': 2},
    'coupon': {'base_url': 'http://coupon.test', 'connect_timeout': 1, 'read_timeout': 2},
}
