"""
Admin Routes

Login/logout plus the protected catalogue and enquiry endpoints.
"""

from flask import jsonify, request, session

from chataru.admin import admin_bp
from chataru.admin.decorators import (
    SESSION_TOKEN_KEY,
    admin_required,
    current_admin_auth,
    token_from_request,
)
from chataru.services import catalogue, enquiries
from chataru.services.validation import parse_page, request_fields


@admin_bp.route('/login', methods=['POST'])
def admin_login():
    """Exchange the admin password for a session token."""
    auth = current_admin_auth()
    token = auth.issue(request_fields(request).get('password'))
    # A fresh login supersedes whatever token the cookie held
    auth.revoke(session.get(SESSION_TOKEN_KEY))
    session.clear()
    session[SESSION_TOKEN_KEY] = token
    return jsonify(success=True, token=token)


@admin_bp.route('/logout', methods=['POST'])
def admin_logout():
    """Revoke the presented token (if any) and clear the cookie credential."""
    current_admin_auth().revoke(token_from_request())
    session.clear()
    return jsonify(success=True)


# -----------------------------------------------------------------------------
# Product catalogue (admin writes)
# -----------------------------------------------------------------------------

@admin_bp.route('/products', methods=['POST'])
@admin_required
def create_product():
    """Create a product from a multipart form; the image is mandatory."""
    product = catalogue.create_product(
        name=request.form.get('name'),
        price=request.form.get('price'),
        description=request.form.get('description'),
        image=request.files.get('image'),
    )
    return jsonify(success=True, id=product.id)


@admin_bp.route('/products/<int:product_id>', methods=['PUT'])
@admin_required
def update_product(product_id):
    catalogue.update_product(
        product_id,
        name=request.form.get('name'),
        price=request.form.get('price'),
        description=request.form.get('description'),
        image=request.files.get('image'),
    )
    return jsonify(success=True)


@admin_bp.route('/products/<int:product_id>', methods=['DELETE'])
@admin_required
def delete_product(product_id):
    catalogue.delete_product(product_id)
    return jsonify(success=True)


# -----------------------------------------------------------------------------
# Enquiries (admin read)
# -----------------------------------------------------------------------------

@admin_bp.route('/enquiries')
@admin_required
def list_enquiries():
    limit, offset = parse_page(request.args.get('limit'), request.args.get('offset'))
    rows = enquiries.list_enquiries(limit=limit, offset=offset)
    return jsonify([e.to_dict() for e in rows])
