"""Swagger/OpenAPI configuration for the catalog service."""

import os


def get_swagger_settings() -> dict:
    """Return Swagger UI configuration."""
    environment = os.getenv("DJANGO_ENV", "development")
    is_production = environment == "production"

    return {
        "USE_SESSION_AUTH": False,
        "JSON_EDITOR": True,
        "SUPPORTED_SUBMIT_METHODS": ["get", "post", "put", "delete"],
        "DOC_EXPANSION": "list",
        "OPERATIONS_SORTER": "alpha",
        "TAGS_SORTER": "alpha",
        "DEEP_LINKING": True,
        "DEFAULT_MODEL_RENDERING": "model",
        "DEFAULT_MODEL_DEPTH": 2,
        "VALIDATOR_URL": None if is_production else "https://validator.swagger.io/validator",
        "DISPLAY_OPERATION_ID": False,
        "TAGS": [
            {"name": "Products", "description": "Create, read, update, delete and search products"},
            {"name": "Images", "description": "Serve product images"},
        ],
    }


SWAGGER_SETTINGS = get_swagger_settings()
SWAGGER_USE_SESSION_AUTH = False
