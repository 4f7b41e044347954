"""
Orders API URLs, one include per API version.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.orders.interfaces.api.v1.urls')),
]
