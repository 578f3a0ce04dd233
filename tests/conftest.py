"""
Test environment. Settings are read at import time, so the required
JWT_SECRET (and a cheap bcrypt cost) must be in the environment before any
app module is imported.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-signing-key-0123456789abcdef0123456789")
os.environ.setdefault("BOOTSTRAP_ADMIN_EMAIL", "root@example.com")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("APP_ENV", "dev")
