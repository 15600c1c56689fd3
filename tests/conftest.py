import os

# pywikibot refuses to import without a user-config.py unless told otherwise
os.environ.setdefault("PYWIKIBOT_NO_USER_CONFIG", "2")
