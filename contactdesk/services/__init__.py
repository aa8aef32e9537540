"""Business operations on top of the contact store."""

from .contacts import ContactService, contact_service

__all__ = [
    'ContactService',
    'contact_service',
]
