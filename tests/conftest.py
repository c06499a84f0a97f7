import pytest
from logpattern import config as app_config


@pytest.fixture(autouse=True)
def restore_config():
    """Keep config changes made by a test from leaking into the next one."""
    saved = {name: getattr(app_config, name) for name in dir(app_config) if name.isupper()}
    yield
    for name, value in saved.items():
        setattr(app_config, name, value)
