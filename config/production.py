import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_PATH = os.getenv("SEED_PATH") or None

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD") or None
