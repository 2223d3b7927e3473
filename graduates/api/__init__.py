from flask import Blueprint, jsonify
from strawberry.flask.views import GraphQLView

from graduates.api.schema import schema

api_bp = Blueprint("api", __name__)
api_bp.add_url_rule("/graphql", view_func=GraphQLView.as_view("graphql_view", schema=schema))


@api_bp.get("/health")
def health():
    return jsonify({"status": "ok"})
