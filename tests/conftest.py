from collections.abc import Callable
from pathlib import Path

import pytest

from effectconf.manager.effects import EffectManager
from effectconf.store.config_store import ConfigStore

VALUES_YAML = """\
POWER_OF_4: "30 60 100 100"
HYPER_PUNCH: "50 100 100 100"
STABILIZE: ""
MEGA_SPEEDUPS_Mega Gengar: 5
MEGA_THRESHOLD_Mega Gengar: 20
"""


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def values_file(write_yaml: Callable[[str, str], Path]) -> Path:
    return write_yaml("values.yaml", VALUES_YAML)


@pytest.fixture
def store(values_file: Path) -> ConfigStore:
    store = ConfigStore([values_file])
    store.load()
    return store


@pytest.fixture
def manager(store: ConfigStore) -> EffectManager:
    return EffectManager(store)
