"""Contact message model."""

import uuid
from datetime import datetime, timedelta, timezone
from contactdesk.extensions import db
from contactdesk.validators import STATUSES, STATUS_PENDING, MAX_LENGTHS


def utcnow():
    """Naive UTC timestamp, as stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    """Render a stored UTC timestamp as an ISO-8601 string."""
    return value.isoformat(timespec='microseconds') + 'Z'


def generate_id():
    return uuid.uuid4().hex


class Contact(db.Model):
    """Contact form submission."""
    __tablename__ = 'contacts'
    __table_args__ = (
        db.CheckConstraint(
            "status IN ({})".format(', '.join(f"'{s}'" for s in STATUSES)),
            name='ck_contacts_status'
        ),
    )
    
    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    name = db.Column(db.String(MAX_LENGTHS['name']), nullable=False)
    email = db.Column(db.String(MAX_LENGTHS['email']), unique=True, nullable=False, index=True)
    subject = db.Column(db.String(MAX_LENGTHS['subject']), nullable=False)
    message = db.Column(db.String(MAX_LENGTHS['message']), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)  # pending, read, replied
    
    # Timestamps
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        now = utcnow()
        if self.id is None:
            self.id = generate_id()
        if self.status is None:
            self.status = STATUS_PENDING
        if self.created_at is None:
            self.created_at = now
        if self.updated_at is None:
            self.updated_at = self.created_at
    
    def touch(self):
        """Refresh ``updated_at``, always moving it forward."""
        now = utcnow()
        floor = max(self.created_at, self.updated_at) + timedelta(microseconds=1)
        self.updated_at = max(now, floor)
    
    def set_status(self, status):
        """Change the status and refresh the update timestamp."""
        self.status = status
        self.touch()
    
    def to_dict(self):
        """Serialize for templates and JSON responses."""
        return {
            'id': str(self.id),
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
            'status': self.status,
            'createdAt': isoformat(self.created_at),
            'updatedAt': isoformat(self.updated_at),
        }
    
    def __repr__(self):
        return f'<Contact {self.email} ({self.status})>'
