from flask import Blueprint, jsonify

bp = Blueprint('index', __name__)

ENDPOINTS = {
    'owners': 'GET /api/owners',
    'owner_add': 'POST /api/owners',
    'owner_update': 'PUT /api/owners/:id',
    'owner_cats': 'GET /api/owners/:id/cats',
    'cat_add': 'POST /api/cats',
    'cat_update': 'PUT /api/cats/:id',
    'cat_discount': 'GET /api/cats/:id/discount',
    'cats_full': 'GET /api/cats-info',
    'visit_add': 'POST /api/visits',
    'visit_update': 'PUT /api/visits/:id',
    'visit_delete': 'DELETE /api/visits/:id',
    'visit_info': 'GET /api/visits',
}


@bp.route('/')
def index():
    return jsonify({'message': 'Veterinary API', 'endpoints': ENDPOINTS}), 200


@bp.route('/health')
def health_check():
    """Health check endpoint for monitoring"""
    return jsonify({
        'status': 'healthy',
        'service': 'vet-clinic-api',
        'version': '1.0.0'
    }), 200
