from flask import Blueprint, current_app, send_from_directory

public_bp = Blueprint("public", __name__)


@public_bp.route("/")
def home():
    current_app.extensions["catalog"].record_visit()
    return send_from_directory(current_app.static_folder, "index.html")


@public_bp.route("/uploads/<path:filename>")
def uploaded_file(filename):
    return send_from_directory(current_app.extensions["blobs"].directory, filename)
