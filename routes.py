from flask import jsonify

from controllers.pagination_controller import PaginationController


def init_routes(app):
    """Initialize all Flask routes using MVC pattern"""

    pagination_controller = PaginationController()

    @app.route("/api/pagination", methods=["GET"])
    def api_pagination():
        result = pagination_controller.get_pagination()
        if isinstance(result, tuple):
            body, status = result
            return jsonify(body), status
        return jsonify(result)

    @app.route("/pagination", methods=["GET"])
    def pagination_html():
        return pagination_controller.render_pagination()
