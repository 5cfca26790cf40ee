"""Business logic for auth, users, courses, uploads and mail."""
