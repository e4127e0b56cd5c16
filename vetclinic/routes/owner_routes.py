from flask_restx import Namespace, Resource
from vetclinic.schemas import OWNER_SCHEMA
from vetclinic.services import owner_service
from vetclinic.utils import validate_body
import logging

logger = logging.getLogger(__name__)


def create_owner_namespace(store, validators):
    owner_ns = Namespace('owners', description='Operations related to pet owners', path='/owners')
    owner_model = owner_ns.schema_model('Owner', OWNER_SCHEMA)
    check_owner = validators['owner']

    @owner_ns.route('')
    class OwnerList(Resource):
        @owner_ns.doc('list_owners')
        def get(self):
            """Get all owners, newest first"""
            try:
                owners = owner_service.get_all_owners(store)
                logger.debug(f"Retrieved {len(owners)} owners")
                return owners, 200
            except Exception as e:
                logger.exception(f"Error fetching owners: {e}")
                return {'error': str(e)}, 500

        @owner_ns.doc('create_owner')
        @owner_ns.expect(owner_model)
        @owner_ns.response(201, 'Owner created')
        @owner_ns.response(400, 'Validation error')
        @validate_body(check_owner)
        def post(self, payload):
            """Register a new owner"""
            try:
                owner = owner_service.create_owner(store, payload)
                logger.info(f"Created owner {owner['id']}")
                return owner, 201
            except Exception as e:
                logger.error(f"Error creating owner: {e}")
                return {'error': str(e)}, 500

    @owner_ns.route('/<string:owner_id>')
    @owner_ns.param('owner_id', 'The owner identifier')
    class OwnerResource(Resource):
        @owner_ns.doc('update_owner')
        @owner_ns.expect(owner_model)
        @owner_ns.response(404, 'Owner not found')
        @owner_ns.response(400, 'Validation error')
        @validate_body(check_owner)
        def put(self, owner_id, payload):
            """Replace an owner's details"""
            try:
                owner = owner_service.update_owner(store, owner_id, payload)
                if owner is None:
                    return {'message': 'Owner not found'}, 404
                logger.info(f"Updated owner {owner_id}")
                return owner, 200
            except Exception as e:
                logger.error(f"Error updating owner {owner_id}: {e}")
                return {'error': str(e)}, 500

    @owner_ns.route('/<string:owner_id>/cats')
    @owner_ns.param('owner_id', 'The owner identifier')
    class OwnerCats(Resource):
        @owner_ns.doc('list_owner_cats')
        def get(self, owner_id):
            """Get all cats of an owner, newest first"""
            try:
                return owner_service.get_owner_cats(store, owner_id), 200
            except Exception as e:
                logger.exception(f"Error fetching cats of owner {owner_id}: {e}")
                return {'error': str(e)}, 500

    return owner_ns
