import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "super-secret-key"
    LOG_LEVEL = os.environ.get("LOG_LEVEL") or "INFO"
