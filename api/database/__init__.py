"""
Tortoise ORM configuration for the environmental data database.

Credentials come from the environment (.env), the engine and pool sizes from
the `database` section of config/api.yaml.
"""
import os
from dotenv import load_dotenv

from src.utils.helpers import load_yaml

load_dotenv()

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "../../config/api.yaml")


def load_database_config(config_path: str = CONFIG_PATH) -> dict:
    """
    Read the database section of the API config.

    Args:
        config_path: Path to api.yaml

    Returns:
        dict: engine, min_size and max_size, with defaults for missing keys
    """
    section = load_yaml(config_path)['api'].get('database') or {}
    return {
        "engine": section.get("engine", "tortoise.backends.asyncpg"),
        "min_size": section.get("min_size", 2),
        "max_size": section.get("max_size", 10),
    }


def build_tortoise_config(database_config: dict) -> dict:
    """
    Assemble the Tortoise ORM config used by the app and Aerich.

    Args:
        database_config: Output of load_database_config

    Returns:
        dict: Tortoise ORM configuration
    """
    return {
        "connections": {
            "default": {
                "engine": database_config["engine"],
                "credentials": {
                    "host": os.getenv("DB_HOST", "localhost"),
                    "port": os.getenv("DB_PORT", "5432"),
                    "user": os.getenv("DB_USER", "envdata_user"),
                    "password": os.getenv("DB_PASSWORD", ""),
                    "database": os.getenv("DB_NAME", "envdata_db"),
                    "min_size": database_config["min_size"],
                    "max_size": database_config["max_size"],
                }
            }
        },
        "apps": {
            "models": {
                "models": ["api.database.models", "aerich.models"],
                "default_connection": "default",
            }
        },
        "use_tz": True,
        "timezone": "UTC",
    }


TORTOISE_ORM = build_tortoise_config(load_database_config())
