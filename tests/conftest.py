"""Test environment: in-memory SQLite, fast bcrypt, temp upload dir. Must run before videobelajar is imported."""

import os
import tempfile

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key"
os.environ["BCRYPT_SALT_ROUNDS"] = "4"
os.environ["EMAIL_HOST"] = ""
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="videobelajar-upload-")
os.environ["CLIENT_STORAGE_PATH"] = os.path.join(tempfile.mkdtemp(prefix="videobelajar-client-"), "session.json")
