"""Operator routes for reviewing contact messages."""

from collections import Counter
from flask import Blueprint, render_template, request, redirect, url_for, flash
from contactdesk.services import contact_service
from contactdesk.validators import STATUSES

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/')
def dashboard():
    return redirect(url_for('admin.messages'))


# --- Contact Messages ---
@admin_bp.route('/messages')
def messages():
    """Contact messages, newest first."""
    result = contact_service.list()
    contacts = result.get('contacts', [])
    
    counts = Counter(contact['status'] for contact in contacts)
    
    return render_template('admin/contact_messages.html',
                         result=result,
                         messages=contacts,
                         counts={status: counts.get(status, 0) for status in STATUSES},
                         statuses=STATUSES)


@admin_bp.route('/messages/<contact_id>/status', methods=['POST'])
def update_message_status(contact_id):
    """Move a message to another status."""
    result = contact_service.transition(contact_id, request.form.get('status'))
    
    flash(result['message'], 'success' if result['success'] else 'danger')
    return redirect(url_for('admin.messages'))
