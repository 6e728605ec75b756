class StoryboardError(Exception):
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {"error": self.message}


class ValidationError(StoryboardError):
    status_code = 400


class ImageNotFoundError(StoryboardError):
    status_code = 404

    def __init__(self, image_id):
        super().__init__("Image not found")
        self.image_id = image_id


class AuthenticationError(StoryboardError):
    status_code = 401

    def __init__(self, message="Invalid password"):
        super().__init__(message)

    def to_dict(self):
        return {"success": False, "error": self.message}
