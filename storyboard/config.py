import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.getenv("STORYBOARD_HOME", os.getcwd()))

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "storyboard-dev-key-change-in-production")

    PORT = int(os.getenv("PORT", "3000"))

    # Documento JSON con todo el catálogo
    DATA_FILE = os.getenv("DATA_FILE", os.path.join(BASE_DIR, "data.json"))

    # Carpeta de uploads
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(BASE_DIR, "uploads"))
    UPLOAD_URL_PREFIX = "/uploads"
    MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10 MB
    # Margen para los campos del formulario
    MAX_CONTENT_LENGTH = MAX_IMAGE_SIZE + 1024 * 1024

    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR")
