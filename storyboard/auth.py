from werkzeug.security import check_password_hash, generate_password_hash


class PasswordCredentials:
    """Single shared password, kept only as a hash."""

    def __init__(self, password):
        self.password_hash = generate_password_hash(password)

    def check(self, password):
        if not isinstance(password, str) or not password:
            return False
        return check_password_hash(self.password_hash, password)
