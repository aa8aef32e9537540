"""Exceptions raised by the contact store and service."""


class ContactDeskError(Exception):
    """Base class for application errors."""


class ConfigurationError(ContactDeskError):
    """The database connection string is missing."""


class StoreConnectionError(ContactDeskError, ConnectionError):
    """The database could not be reached."""


class ValidationError(ContactDeskError):
    """One or more contact fields failed validation.

    ``errors`` maps field names to human-readable messages.
    """

    def __init__(self, errors, message=None):
        self.errors = dict(errors)
        if message is None:
            message = '; '.join(self.errors.values())
        super().__init__(message)

    @property
    def first_message(self):
        return next(iter(self.errors.values()), str(self))


class NotFoundError(ContactDeskError):
    """No contact exists with the given identifier."""


class InvalidArgumentError(ContactDeskError):
    """A status or identifier argument is malformed."""
