# wsgi.py (at repo root)
from crm_api import create_app
from crm_api.config import config_path_from_env, load_config

app = create_app(load_config(config_path_from_env()))
