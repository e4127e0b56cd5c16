from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_restx import Api
from vetclinic.config import Config

db = SQLAlchemy()


def create_app(config_class=Config, store=None):
    """Build the Flask app.

    ``store`` is anything with an ``execute(statement, params)`` method; when
    omitted a ``SqlStore`` over the app's database is used.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    db.init_app(app)

    api = Api(
        app,
        title='Veterinary Clinic API',
        version='1.0',
        description='Owners, cats and visits of a veterinary clinic',
        prefix='/api',
        doc='/docs',
    )

    # Enable CORS
    CORS(app, resources={r"/*": {"origins": app.config.get('CORS_ORIGINS', '*')}},
         supports_credentials=app.config.get('CORS_SUPPORTS_CREDENTIALS', True),
         allow_headers=app.config.get('CORS_ALLOW_HEADERS', ["Content-Type"]),
         methods=app.config.get('CORS_METHODS', ["GET", "POST", "PUT", "DELETE", "OPTIONS"]))

    from .models import Owner, Cat, Visit  # noqa: F401  registers the tables
    from .schemas import SCHEMAS
    from .store import SqlStore, enable_foreign_keys
    from .utils import compile_schemas
    from .routes import register_routes

    if store is None:
        store = SqlStore(db)
        with app.app_context():
            enable_foreign_keys(db.engine)
            db.create_all()  # Create all tables
    validators = compile_schemas(SCHEMAS)
    register_routes(app, api, store, validators)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'message': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'message': 'Method not allowed'}), 405

    return app
