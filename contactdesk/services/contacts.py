"""Contact submission, listing and status transitions.

Every operation returns a plain dict with a ``success`` flag and a
human-readable ``message`` (or ``contacts`` for :meth:`ContactService.list`).
Store errors are turned into failure results; only a missing connection
string, or an unreachable database during submit/transition, is raised.
"""

import logging
from collections.abc import Mapping

from sqlalchemy.exc import SQLAlchemyError

from contactdesk.errors import (StoreConnectionError, ValidationError,
                                NotFoundError, InvalidArgumentError)
from contactdesk.signals import contacts_changed
from contactdesk.store import store as default_store
from contactdesk.validators import (CONTACT_FIELDS, validate_contact,
                                    validate_status, validate_contact_id)

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = 'All fields are required'
NOT_FOUND_MESSAGE = 'Contact not found'


def _failure(message, error=None, **extra):
    result = {'success': False, 'message': message}
    if error is not None:
        result['error'] = error
    result.update(extra)
    return result


class ContactService:
    """Operations used by the contact form and the review list."""

    def __init__(self, store):
        self.store = store

    def submit(self, data):
        """Validate and store a new contact message."""
        self.store.connect()

        if not isinstance(data, Mapping):
            data = {}
        if not all(data.get(field) for field in CONTACT_FIELDS):
            return _failure(REQUIRED_MESSAGE)

        try:
            fields = validate_contact(data)
            contact = self.store.create(fields)
        except ValidationError as e:
            logger.info('Rejected contact submission: %s', e)
            return _failure(e.first_message, str(e), errors=e.errors)
        except SQLAlchemyError as e:
            logger.exception('Error creating contact')
            return _failure('Failed to create contact', str(e))

        logger.info('Created contact %s', contact.id)
        return {
            'success': True,
            'message': 'Contact created successfully',
            'contactId': str(contact.id),
        }

    def list(self):
        """All stored contacts, newest first, serialized for display."""
        try:
            self.store.connect()
            contacts = [contact.to_dict() for contact in self.store.find_all()]
        except (StoreConnectionError, SQLAlchemyError) as e:
            logger.exception('Error getting contacts')
            return _failure('Failed to get contacts', str(e))
        return {'success': True, 'contacts': contacts}

    def transition(self, contact_id, status):
        """Move a contact to ``status``.

        Any status can follow any other. Re-applying the current status
        still refreshes ``updated_at``.
        """
        try:
            status = validate_status(status)
            contact_id = validate_contact_id(contact_id)
        except InvalidArgumentError as e:
            return _failure(str(e))

        self.store.connect()

        try:
            self.store.update_status(contact_id, status)
        except NotFoundError:
            return _failure(NOT_FOUND_MESSAGE)
        except SQLAlchemyError as e:
            logger.exception('Error updating contact %s', contact_id)
            return _failure('Failed to update contact status', str(e))

        logger.info('Contact %s marked %s', contact_id, status)
        contacts_changed.send(self, contact_id=contact_id, status=status)
        return {'success': True, 'message': 'Contact status updated successfully'}


contact_service = ContactService(default_store)
