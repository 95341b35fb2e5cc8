import pytest

from pattern_demos.singleton import get_settings


@pytest.fixture(autouse=True)
def reset_user_settings():
    get_settings().reset()
    yield
    get_settings().reset()
