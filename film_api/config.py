import os

from dotenv import load_dotenv

load_dotenv()


def postgres_uri():
    return "postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}".format(
        user=os.getenv('POSTGRES_USER'),
        password=os.getenv('POSTGRES_PASSWORD'),
        host=os.getenv('POSTGRES_HOST'),
        port=os.getenv('DB_INT_PORT'),
        name=os.getenv('POSTGRES_DB'),
    )


class Config(object):
    TESTING = False
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    API_PORT = os.getenv('API_INT_PORT')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

class ProdConfig(Config):
    SQLALCHEMY_DATABASE_URI = postgres_uri()

class DevConfig(Config):
    SQLALCHEMY_DATABASE_URI = os.getenv('DEV_DATABASE_URI')

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'

match os.getenv('ENV'):
    case 'PRODUCTION':
        config = ProdConfig
    case 'TESTING':
        config = TestConfig
    case _:
        config = DevConfig
