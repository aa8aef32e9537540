"""WTForms used by the public pages."""

from .contact import ContactForm

__all__ = ['ContactForm']
