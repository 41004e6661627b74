import logging

from localdate import config


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    cfg = config.load_config()
    assert cfg == {'default_timezone': 'UTC', 'show_weeks': True}
    assert (tmp_path / '.localdate').is_dir()


def test_save_and_load(tmp_path, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    config.save_config({'default_timezone': 'Europe/Berlin'})
    cfg = config.load_config()
    assert cfg['default_timezone'] == 'Europe/Berlin'
    # fehlende Schlüssel kommen aus den Standardwerten
    assert cfg['show_weeks'] is True
    assert config.default_timezone() == 'Europe/Berlin'


def test_corrupt_file_falls_back(tmp_path, monkeypatch, caplog):
    monkeypatch.setenv('HOME', str(tmp_path))
    path = tmp_path / '.localdate' / 'localdate_config.json'
    path.parent.mkdir()
    path.write_text('{kaputt', encoding='utf-8')
    with caplog.at_level(logging.WARNING):
        cfg = config.load_config()
    assert cfg == config.DEFAULTS
    assert 'unlesbar' in caplog.text
