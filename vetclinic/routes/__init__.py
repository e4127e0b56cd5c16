# vetclinic/routes/__init__.py
from .index_routes import bp as index_bp
from .owner_routes import create_owner_namespace
from .cat_routes import create_cat_namespace
from .visit_routes import create_visit_namespace


def register_routes(app, api, store, validators):
    app.register_blueprint(index_bp)
    api.add_namespace(create_owner_namespace(store, validators))
    api.add_namespace(create_cat_namespace(store, validators))
    api.add_namespace(create_visit_namespace(store, validators))
