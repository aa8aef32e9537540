"""JSON API endpoints for the contact form and review list."""

from flask import Blueprint, jsonify, request
from contactdesk.extensions import csrf
from contactdesk.services import contact_service
from contactdesk.services.contacts import NOT_FOUND_MESSAGE

api_bp = Blueprint('api', __name__)
csrf.exempt(api_bp)


@api_bp.route('/contacts', methods=['POST'])
def create_contact():
    """Submit a contact message."""
    data = request.get_json(silent=True) or {}
    result = contact_service.submit(data)
    return jsonify(result), 201 if result['success'] else 400


@api_bp.route('/contacts', methods=['GET'])
def list_contacts():
    """List contact messages, newest first."""
    result = contact_service.list()
    return jsonify(result), 200 if result['success'] else 500


@api_bp.route('/contacts/<contact_id>/status', methods=['PATCH', 'PUT'])
def update_contact_status(contact_id):
    """Change a contact's status."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    result = contact_service.transition(contact_id, data.get('status'))
    
    if result['success']:
        return jsonify(result)
    if result['message'] == NOT_FOUND_MESSAGE:
        return jsonify(result), 404
    if 'error' in result:
        return jsonify(result), 500
    return jsonify(result), 400
