import pytest

CONFIG_YAML = """
client:
  api_id: 123456
  api_hash: abcdef
  session: tgdrive
  phone_number: "+100000"
cache:
  default_ttl: 60
  thumbnail_ttl: 120
listing:
  filter: InputMessagesFilterPhotos
  period_start: "2021-11"
  period_end: "2022-02"
server:
  api_url: "http://localhost:5244"
  sign_secret: secret
"""


@pytest.fixture
def config_yaml():
    return CONFIG_YAML


@pytest.fixture
def config_file(tmp_path, config_yaml):
    path = tmp_path / "config.yaml"
    path.write_text(config_yaml)
    return str(path)
