from amuse import config


def test_defaults():
    assert config._env_int("AMUSE_UNSET_PORT", 9863) == 9863
    assert config._env_float("AMUSE_UNSET_TIMEOUT", 0.0) == 0.0
    assert config.SONG_URL_TEMPLATE.format(id=1) == "https://music.163.com/song?id=1"


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("AMUSE_TEST_INT", "12")
    monkeypatch.setenv("AMUSE_TEST_BAD_INT", "twelve")
    monkeypatch.setenv("AMUSE_TEST_BOOL", "off")
    monkeypatch.setenv("AMUSE_TEST_LIST", "http://a, http://b")
    monkeypatch.setenv("AMUSE_TEST_JSON_LIST", '["http://c"]')

    assert config._env_int("AMUSE_TEST_INT", 1) == 12
    assert config._env_int("AMUSE_TEST_BAD_INT", 1) == 1
    assert config._env_bool("AMUSE_TEST_BOOL", True) is False
    assert config._env_list("AMUSE_TEST_LIST") == ["http://a", "http://b"]
    assert config._env_list("AMUSE_TEST_JSON_LIST") == ["http://c"]
    assert config._env_list("AMUSE_TEST_MISSING", default=["*"]) == ["*"]


def test_provider_timeout_disabled_by_zero(monkeypatch):
    monkeypatch.setattr(config, "AMUSE_PROVIDER_TIMEOUT_SECONDS", 0.0)
    assert config.provider_timeout() is None

    monkeypatch.setattr(config, "AMUSE_PROVIDER_TIMEOUT_SECONDS", 2.5)
    assert config.provider_timeout() == 2.5
