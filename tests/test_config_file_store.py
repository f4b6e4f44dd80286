from wordcrawl.services.config_file_store import ConfigFileStore


def test_load_yaml_dict_missing_file_returns_none(tmp_path):
    store = ConfigFileStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict("missing.yml") is None


def test_load_yaml_dict_non_dict_returns_none(tmp_path):
    (tmp_path / "list.yml").write_text("- a\n- b\n", encoding="utf-8")
    store = ConfigFileStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict("list.yml") is None


def test_load_yaml_dict_invalid_yaml_returns_none(tmp_path):
    (tmp_path / "bad.yml").write_text(": this is not valid yaml", encoding="utf-8")
    store = ConfigFileStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict("bad.yml") is None


def test_load_yaml_dict_dict_is_returned(tmp_path):
    (tmp_path / "ok.yml").write_text("max_depth: 2\nstart_pages: []\n", encoding="utf-8")
    store = ConfigFileStore(configs_dir=str(tmp_path))
    assert store.load_yaml_dict("ok.yml") == {"max_depth": 2, "start_pages": []}


def test_absolute_paths_ignore_configs_dir(tmp_path):
    target = tmp_path / "abs.yml"
    target.write_text("max_depth: 1\n", encoding="utf-8")
    store = ConfigFileStore(configs_dir="/nonexistent")
    assert store.load_yaml_dict(str(target)) == {"max_depth": 1}
