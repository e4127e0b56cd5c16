import os
from dotenv import load_dotenv

load_dotenv()


def _database_uri():
    if os.getenv('DATABASE_URL'):
        return os.getenv('DATABASE_URL')
    user = os.getenv('DB_USER', 'postgres')
    password = os.getenv('DB_PASSWORD', 'postgres')
    host = os.getenv('DB_HOST', 'localhost')
    port = os.getenv('DB_PORT', '5432')
    name = os.getenv('DB_NAME', 'vet_clinic')
    return f'postgresql://{user}:{password}@{host}:{port}/{name}'


class Config:
    # Database configuration
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # API configuration
    RESTX_MASK_SWAGGER = False
    RESTX_JSON = {'indent': 2}
    # CORS configuration
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    CORS_SUPPORTS_CREDENTIALS = True
    CORS_ALLOW_HEADERS = ["Content-Type"]
    CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
