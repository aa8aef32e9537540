"""Signals sent when stored contacts change."""

from blinker import Namespace

_signals = Namespace()

#: Sent by :class:`~contactdesk.services.contacts.ContactService` after a
#: status transition. Receivers get ``contact_id`` and ``status``.
contacts_changed = _signals.signal('contacts-changed')
