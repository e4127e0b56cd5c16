from flask_restx import Namespace, Resource
from vetclinic.schemas import VISIT_SCHEMA
from vetclinic.services import visit_service
from vetclinic.utils import validate_body
import logging

logger = logging.getLogger(__name__)


def create_visit_namespace(store, validators):
    visit_ns = Namespace('visits', description='Operations related to vet visits', path='/')
    visit_model = visit_ns.schema_model('Visit', VISIT_SCHEMA)
    check_visit = validators['visit']

    def list_visits():
        try:
            visits = visit_service.get_all_visits(store)
            logger.debug(f"Retrieved {len(visits)} visits")
            return visits, 200
        except Exception as e:
            logger.exception(f"Error fetching visits: {e}")
            return {'error': str(e)}, 500

    @visit_ns.route('/visits')
    class VisitList(Resource):
        @visit_ns.doc('list_visits')
        def get(self):
            """Get all visits with cat and owner details, earliest first"""
            return list_visits()

        @visit_ns.doc('create_visit')
        @visit_ns.expect(visit_model)
        @visit_ns.response(201, 'Visit created')
        @visit_ns.response(400, 'Validation error')
        @validate_body(check_visit)
        def post(self, payload):
            """Book a visit for a cat"""
            try:
                visit = visit_service.create_visit(store, payload)
                logger.info(f"Created visit {visit['id']} for cat {visit['cat_id']}")
                return visit, 201
            except Exception as e:
                logger.error(f"Error creating visit: {e}")
                return {'error': str(e)}, 500

    @visit_ns.route('/visit')
    class VisitInfo(Resource):
        @visit_ns.doc('list_visits_info')
        def get(self):
            """Same listing as GET /visits"""
            return list_visits()

    @visit_ns.route('/visits/<string:visit_id>')
    @visit_ns.param('visit_id', 'The visit identifier')
    @visit_ns.response(404, 'Visit not found')
    class VisitResource(Resource):
        @visit_ns.doc('update_visit')
        @visit_ns.expect(visit_model)
        @visit_ns.response(400, 'Validation error')
        @validate_body(check_visit)
        def put(self, visit_id, payload):
            """Reschedule a visit or change its reason and notes"""
            try:
                visit = visit_service.update_visit(store, visit_id, payload)
                if visit is None:
                    return {'message': 'Visit not found'}, 404
                logger.info(f"Updated visit {visit_id}")
                return visit, 200
            except Exception as e:
                logger.error(f"Error updating visit {visit_id}: {e}")
                return {'error': str(e)}, 500

        @visit_ns.doc('delete_visit')
        def delete(self, visit_id):
            """Cancel a visit"""
            try:
                visit = visit_service.delete_visit(store, visit_id)
                if visit is None:
                    return {'message': 'Visit not found'}, 404
                logger.info(f"Deleted visit {visit_id}")
                return {'message': 'Visit deleted successfully', 'deleted_visit': visit}, 200
            except Exception as e:
                logger.error(f"Error deleting visit {visit_id}: {e}")
                return {'error': str(e)}, 500

    return visit_ns
