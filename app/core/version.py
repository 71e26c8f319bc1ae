# app/core/version.py
APP_NAME = "Letter Trainer API"
APP_VERSION = "1.0.0"
