import json
import logging
import os


DEFAULTS = {
    'default_timezone': 'UTC',
    'show_weeks': True,
}


def _config_path():
    base = os.path.join(os.path.expanduser('~'), '.localdate')
    os.makedirs(base, exist_ok=True)
    return os.path.join(base, 'localdate_config.json')


def load_config():
    path = _config_path()
    if not os.path.exists(path):
        return dict(DEFAULTS)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            stored = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logging.warning(f"Config {path} unlesbar, verwende Standardwerte: {e}")
        return dict(DEFAULTS)
    if not isinstance(stored, dict):
        logging.warning(f"Config {path} ist kein JSON-Objekt, verwende Standardwerte.")
        return dict(DEFAULTS)
    # fehlende Schlüssel mit Standardwerten auffüllen
    return {**DEFAULTS, **stored}


def save_config(cfg: dict):
    path = _config_path()
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)


def default_timezone() -> str:
    return load_config()['default_timezone']
