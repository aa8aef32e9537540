"""Field validation for contact messages.

Each ``validate_*`` function takes the raw value, returns the cleaned
(trimmed) value and raises :class:`ValidationError` keyed by field name
when the value is unacceptable. Email uniqueness is not checked here;
the unique index on ``contacts.email`` enforces it.
"""

import re

from contactdesk.errors import ValidationError, InvalidArgumentError

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

CONTACT_FIELDS = ('name', 'email', 'subject', 'message')

STATUS_PENDING = 'pending'
STATUS_READ = 'read'
STATUS_REPLIED = 'replied'
STATUSES = (STATUS_PENDING, STATUS_READ, STATUS_REPLIED)

MAX_LENGTHS = {
    'name': 50,
    'email': 50,
    'subject': 100,
    'message': 500,
}


def _clean_text(field, value):
    label = field.capitalize()
    if value is None:
        raise ValidationError({field: f'{label} is required'})
    if not isinstance(value, str):
        raise ValidationError({field: f'{label} must be a string'})
    value = value.strip()
    if not value:
        raise ValidationError({field: f'{label} is required'})
    max_length = MAX_LENGTHS[field]
    if len(value) > max_length:
        raise ValidationError(
            {field: f'{label} must be less than {max_length} characters'}
        )
    return value


def validate_name(value):
    return _clean_text('name', value)


def validate_email(value):
    value = _clean_text('email', value)
    if not EMAIL_PATTERN.match(value):
        raise ValidationError({'email': 'Please enter a valid email address'})
    return value


def validate_subject(value):
    return _clean_text('subject', value)


def validate_message(value):
    return _clean_text('message', value)


FIELD_VALIDATORS = {
    'name': validate_name,
    'email': validate_email,
    'subject': validate_subject,
    'message': validate_message,
}


def validate_contact(data):
    """Validate all four contact fields at once.

    Returns a dict of trimmed values. Raises :class:`ValidationError`
    carrying every failing field, in field order.
    """
    cleaned = {}
    errors = {}
    for field in CONTACT_FIELDS:
        try:
            cleaned[field] = FIELD_VALIDATORS[field](data.get(field))
        except ValidationError as e:
            errors.update(e.errors)
    if errors:
        raise ValidationError(errors)
    return cleaned


def validate_status(value):
    if value not in STATUSES:
        raise InvalidArgumentError(
            f'Invalid status. Must be one of: {", ".join(STATUSES)}'
        )
    return value


def validate_contact_id(value):
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError('Contact ID is required')
    return value.strip()
