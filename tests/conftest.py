"""Test configuration and fixtures."""

from stampcard.config import AdminSettings, AuthSettings, Settings

ADMIN_TOKEN = "test-admin-token"


def make_settings(**overrides) -> Settings:
    """Settings for tests: admin token set, session identity mode.

    Args:
        **overrides: Top-level Settings fields to replace

    Returns:
        Settings instance independent of the environment
    """
    values = {
        "environment": "test",
        "auth": AuthSettings(jwt_secret="test-secret"),
        "admin": AdminSettings(token=ADMIN_TOKEN, user_id="admin"),
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
