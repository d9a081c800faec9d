import pook as pook_mod
import pytest

from aocfetch.models import SessionContext


@pytest.fixture
def aocfetch_config_dir(tmp_path):
    config_dir = tmp_path / ".config" / "aocfetch"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture(autouse=True)
def remove_user_env(aocfetch_config_dir, monkeypatch):
    monkeypatch.setattr("aocfetch.models.AOCFETCH_CONFIG_DIR", aocfetch_config_dir)
    monkeypatch.delenv("AOC_SESSION", raising=False)


@pytest.fixture(autouse=True)
def test_token(aocfetch_config_dir):
    token_file = aocfetch_config_dir / "token"
    token_file.write_text("thetesttoken")
    return token_file


@pytest.fixture(autouse=True)
def pook():
    # tests never talk to the AoC server: any request without a matching mock fails
    pook_mod.on()
    yield pook_mod
    pook_mod.reset()
    pook_mod.off()


@pytest.fixture
def ctx():
    return SessionContext(cookie="thetesttoken", year=2019, day=2)
