from flask import Blueprint, current_app, jsonify, request
from loguru import logger

api_bp = Blueprint("api", __name__, url_prefix="/api")


def _catalog():
    return current_app.extensions["catalog"]


@api_bp.route("/images")
def list_images():
    return jsonify([image.to_dict() for image in _catalog().list_images()])


@api_bp.route("/stats")
def stats():
    return jsonify(_catalog().get_stats().to_dict())


@api_bp.route("/upload", methods=["POST"])
def upload():
    handler = current_app.extensions["uploads"]
    image = handler.handle(
        request.files.get("image"),
        request.form.get("title"),
        request.form.get("description"),
    )
    return jsonify({
        "success": True,
        "image": image.to_dict(),
        "message": "Image uploaded successfully",
    })


@api_bp.route("/favorite/<int:image_id>", methods=["POST"])
def toggle_favorite(image_id):
    is_favorite = _catalog().toggle_favorite(image_id)
    return jsonify({"success": True, "isFavorite": is_favorite})


@api_bp.route("/images/<int:image_id>", methods=["DELETE"])
def delete_image(image_id):
    image = _catalog().delete(image_id)
    # El archivo se borra después; si falla, la entrada ya no existe
    current_app.extensions["blobs"].discard(image.filename)
    logger.info("Image deleted: {} ({})", image.filename, image.id)
    return jsonify({"success": True, "message": "Image deleted successfully"})
