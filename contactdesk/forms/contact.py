"""Contact form."""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField
from wtforms.validators import DataRequired, Email, Length
from contactdesk.validators import MAX_LENGTHS


def strip_whitespace(value):
    return value.strip() if value else value


class ContactForm(FlaskForm):
    """Public contact form."""
    name = StringField('Name', filters=[strip_whitespace], validators=[
        DataRequired(message='Name is required'),
        Length(max=MAX_LENGTHS['name'], message='Name must be less than 50 characters')
    ])
    email = StringField('Email', filters=[strip_whitespace], validators=[
        DataRequired(message='Email is required'),
        Email(message='Please enter a valid email address'),
        Length(max=MAX_LENGTHS['email'], message='Email must be less than 50 characters')
    ])
    subject = StringField('Subject', filters=[strip_whitespace], validators=[
        DataRequired(message='Subject is required'),
        Length(max=MAX_LENGTHS['subject'], message='Subject must be less than 100 characters')
    ])
    message = TextAreaField('Message', filters=[strip_whitespace], validators=[
        DataRequired(message='Message is required'),
        Length(max=MAX_LENGTHS['message'], message='Message must be less than 500 characters')
    ])
    
    def to_submission(self):
        """Field values as passed to ``ContactService.submit``."""
        return {
            'name': self.name.data,
            'email': self.email.data,
            'subject': self.subject.data,
            'message': self.message.data,
        }
