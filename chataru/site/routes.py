"""
Site Routes

Public endpoints. None of these require an admin session.
"""

import os

from flask import abort, current_app, jsonify, request, send_from_directory

from chataru.services import catalogue, enquiries
from chataru.services.validation import parse_page, request_fields
from chataru.site import site_bp


@site_bp.route('/health')
def health():
    return jsonify(ok=True)


@site_bp.route('/api/products')
def list_products():
    """Public catalogue, newest first."""
    limit, offset = parse_page(request.args.get('limit'), request.args.get('offset'))
    products = catalogue.list_products(limit=limit, offset=offset)
    return jsonify([p.to_dict() for p in products])


@site_bp.route('/api/enquiry', methods=['POST'])
def submit_enquiry():
    """Contact form. Accepts JSON or a urlencoded form."""
    data = request_fields(request)
    enquiries.submit_enquiry(
        name=data.get('name'),
        email=data.get('email'),
        message=data.get('message'),
        phone=data.get('phone'),
        source_page=data.get('sourcePage'),
    )
    return jsonify(success=True, message='Enquiry submitted successfully.')


@site_bp.route('/uploads/<path:filename>')
def uploaded_image(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)


@site_bp.route('/', defaults={'path': ''})
@site_bp.route('/<path:path>')
def static_site(path):
    """Serve files from the public folder, falling back to index.html."""
    if path.startswith('api/'):
        abort(404)
    public = current_app.config['PUBLIC_FOLDER']
    if path and os.path.isfile(os.path.join(public, path)):
        return send_from_directory(public, path)
    if not os.path.isfile(os.path.join(public, 'index.html')):
        abort(404)
    return send_from_directory(public, 'index.html')
