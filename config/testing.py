import os

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

SEED_PATH = os.getenv("SEED_PATH") or None

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

# Cheap hashes keep the test suite fast
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
