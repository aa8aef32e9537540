"""Main public routes."""

from flask import Blueprint, render_template, redirect, url_for, flash
from contactdesk.forms import ContactForm
from contactdesk.services import contact_service

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Homepage sends visitors to the contact form."""
    return redirect(url_for('main.contact'))


@main_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    """Contact us page."""
    form = ContactForm()
    
    if form.validate_on_submit():
        result = contact_service.submit(form.to_submission())
        if result['success']:
            flash('Thank you for your message! We will get back to you soon.', 'success')
            return redirect(url_for('main.contact'))
        flash(result['message'], 'danger')
    
    return render_template('main/contact.html', form=form)
