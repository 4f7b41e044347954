# Domain services
from .order_domain_service import OrderDomainService
from .order_policy import OrderPolicy

__all__ = ['OrderDomainService', 'OrderPolicy']
