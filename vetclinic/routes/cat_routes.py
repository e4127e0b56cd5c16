from flask_restx import Namespace, Resource
from vetclinic.schemas import CAT_SCHEMA
from vetclinic.services import cat_service
from vetclinic.store import ForeignKeyViolation
from vetclinic.utils import validate_body
import logging

logger = logging.getLogger(__name__)

UNKNOWN_OWNER = "The owner with this ID doesn't exist."


def create_cat_namespace(store, validators):
    cat_ns = Namespace('cats', description='Operations related to cats', path='/')
    cat_model = cat_ns.schema_model('Cat', CAT_SCHEMA)
    check_cat = validators['cat']

    @cat_ns.route('/cats')
    class CatList(Resource):
        @cat_ns.doc('create_cat')
        @cat_ns.expect(cat_model)
        @cat_ns.response(201, 'Cat created')
        @cat_ns.response(400, 'Validation error or unknown owner')
        @validate_body(check_cat)
        def post(self, payload):
            """Register a new cat"""
            try:
                cat = cat_service.create_cat(store, payload)
                logger.info(f"Created cat {cat['id']} for owner {cat['owner_id']}")
                return cat, 201
            except ForeignKeyViolation:
                return {'error': UNKNOWN_OWNER}, 400
            except Exception as e:
                logger.error(f"Error creating cat: {e}")
                return {'error': str(e)}, 500

    @cat_ns.route('/cats/<string:cat_id>')
    @cat_ns.param('cat_id', 'The cat identifier')
    class CatResource(Resource):
        @cat_ns.doc('update_cat')
        @cat_ns.expect(cat_model)
        @cat_ns.response(404, 'Cat not found')
        @cat_ns.response(400, 'Validation error or unknown owner')
        @validate_body(check_cat)
        def put(self, cat_id, payload):
            """Replace a cat's details"""
            try:
                cat = cat_service.update_cat(store, cat_id, payload)
                if cat is None:
                    return {'message': 'Cat not found'}, 404
                logger.info(f"Updated cat {cat_id}")
                return cat, 200
            except ForeignKeyViolation:
                return {'error': UNKNOWN_OWNER}, 400
            except Exception as e:
                logger.error(f"Error updating cat {cat_id}: {e}")
                return {'error': str(e)}, 500

    @cat_ns.route('/cats/<string:cat_id>/discount')
    @cat_ns.param('cat_id', 'The cat identifier')
    class CatDiscount(Resource):
        @cat_ns.doc('get_cat_discount')
        def get(self, cat_id):
            """Loyalty discount earned by a cat's completed procedures"""
            try:
                return cat_service.get_cat_discount(store, cat_id), 200
            except Exception as e:
                logger.exception(f"Error computing discount for cat {cat_id}: {e}")
                return {'error': str(e)}, 500

    @cat_ns.route('/cats-info')
    class CatInfo(Resource):
        @cat_ns.doc('list_cats_with_owners')
        def get(self):
            """Get every cat together with its owner's contact details"""
            try:
                return cat_service.get_cats_info(store), 200
            except Exception as e:
                logger.exception(f"Error fetching cats info: {e}")
                return {'error': str(e)}, 500

    return cat_ns
