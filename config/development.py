import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# JSON file with users/factories/manpowerTasks/projects/masterPlanTasks.
# Empty -> bundled demo seed.
SEED_PATH = os.getenv("SEED_PATH") or None

# Where scripts write .xlsx exports
EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

# None -> werkzeug default
PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD") or None
