import os

from flask import Flask, jsonify
from loguru import logger
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from storyboard.auth import PasswordCredentials
from storyboard.blobs import BlobStore
from storyboard.catalog import CatalogStore
from storyboard.config import Config
from storyboard.errors import StoryboardError
from storyboard.logging import init_logging
from storyboard.storage import JsonFileBackend
from storyboard.uploads import UploadHandler


def create_app(test_config=None, backend=None, credentials=None):
    app = Flask(__name__)

    # CONFIGURACIÓN
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    init_logging(app.config["LOG_LEVEL"], app.config.get("LOG_DIR"))

    # Crear carpeta uploads si no existe
    uploads_path = app.config["UPLOAD_FOLDER"]
    if not os.path.exists(uploads_path):
        os.makedirs(uploads_path)
        logger.info("Uploads folder created: {}", uploads_path)

    catalog = CatalogStore(backend or JsonFileBackend(app.config["DATA_FILE"]))
    catalog.load()
    blobs = BlobStore(uploads_path, app.config["UPLOAD_URL_PREFIX"])

    app.extensions["catalog"] = catalog
    app.extensions["blobs"] = blobs
    app.extensions["uploads"] = UploadHandler(catalog, blobs, app.config["MAX_IMAGE_SIZE"])
    app.extensions["credentials"] = credentials or PasswordCredentials(app.config["ADMIN_PASSWORD"])

    register_error_handlers(app)

    # Registrar blueprints
    from storyboard.routes.public import public_bp
    from storyboard.routes.auth import auth_bp
    from storyboard.routes.api import api_bp

    app.register_blueprint(public_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)

    from storyboard.maintenance import reconcile_command
    app.cli.add_command(reconcile_command)

    return app


def register_error_handlers(app):
    @app.errorhandler(StoryboardError)
    def handle_storyboard_error(error):
        if error.status_code < 500:
            logger.info("Request rejected ({}): {}", error.status_code, error.message)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        limit_mb = app.config["MAX_IMAGE_SIZE"] // (1024 * 1024)
        return jsonify({"error": f"File too large. Maximum size is {limit_mb}MB."}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.opt(exception=error).error("Unhandled error: {}", error)
        return jsonify({"error": str(error)}), 500
