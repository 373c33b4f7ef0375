import pkgutil

import storesearch.infra.sessions as sessions_pkg
from storesearch.infra.config.adapter import SUPPORTED_BACKENDS as CONFIG_BACKENDS

from .utils import SUPPORTED_BACKENDS


def test_backend_autodiscovery():
    """Ensure SUPPORTED_BACKENDS matches available _*.py modules."""
    discovered = {
        modinfo.name[1:]
        for modinfo in pkgutil.iter_modules(sessions_pkg.__path__)
        if modinfo.name.startswith("_")
    }
    assert discovered <= SUPPORTED_BACKENDS


def test_config_accepts_every_backend():
    assert set(CONFIG_BACKENDS) == SUPPORTED_BACKENDS
