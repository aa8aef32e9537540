"""Database access for contact messages.

:class:`ContactStore` is the only code that writes to the ``contacts``
table. It owns the per-application connection state, so connecting is
idempotent and there is no module-level "is connected" flag.
"""

import logging
from contextlib import contextmanager

from flask import current_app
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from contactdesk.errors import (ConfigurationError, StoreConnectionError,
                                ValidationError, NotFoundError)
from contactdesk.extensions import db
from contactdesk.models import Contact
from contactdesk.validators import validate_status

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = 'A message from this email address already exists'


class _StoreState:
    """Connection state kept per Flask application."""

    def __init__(self):
        self.connected = False


class ContactStore:
    """Create, find and update contacts through Flask-SQLAlchemy."""

    extension_name = 'contactdesk.store'

    def __init__(self, db, app=None):
        self.db = db
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        """Register the store on ``app``.

        Raises :class:`ConfigurationError` when no connection string is
        configured.
        """
        self._check_config(app)
        app.extensions[self.extension_name] = _StoreState()

    @staticmethod
    def _check_config(app):
        if not app.config.get('SQLALCHEMY_DATABASE_URI'):
            raise ConfigurationError('DATABASE_URL is not defined')

    def _state(self):
        app = current_app._get_current_object()
        try:
            return app.extensions[self.extension_name]
        except KeyError:
            raise ConfigurationError(
                'ContactStore is not registered on this application'
            ) from None

    @property
    def connected(self):
        return self._state().connected

    def connect(self):
        """Open the database and make sure the schema exists.

        Calling it again once connected is a no-op.
        """
        state = self._state()
        if state.connected:
            logger.debug('Already connected to the database')
            return
        self._check_config(current_app)
        try:
            with self.db.engine.connect() as connection:
                connection.execute(text('SELECT 1'))
            self.db.create_all()
        except SQLAlchemyError as e:
            logger.error('Error connecting to the database: %s', e)
            raise StoreConnectionError(str(e)) from e
        state.connected = True
        logger.info('Connected to the database')

    @contextmanager
    def session_scope(self):
        """Commit on success, roll back and re-raise on error."""
        session = self.db.session
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise

    def create(self, fields):
        """Insert a new contact from already validated ``fields``.

        A duplicate email surfaces as :class:`ValidationError`.
        """
        try:
            with self.session_scope() as session:
                contact = Contact(**fields)
                session.add(contact)
        except IntegrityError as e:
            if 'email' in str(e.orig).lower():
                raise ValidationError({'email': DUPLICATE_EMAIL_MESSAGE}) from e
            raise
        return contact

    def find_all(self):
        """All contacts, newest first."""
        return Contact.query.order_by(
            Contact.created_at.desc(),
            Contact.id.desc()
        ).all()

    def get(self, contact_id):
        return self.db.session.get(Contact, contact_id)

    def update_status(self, contact_id, status):
        """Set the status of one contact and refresh ``updated_at``."""
        status = validate_status(status)
        with self.session_scope() as session:
            contact = session.get(Contact, contact_id)
            if contact is None:
                raise NotFoundError(f'Contact {contact_id} not found')
            contact.set_status(status)
        return contact


store = ContactStore(db)
