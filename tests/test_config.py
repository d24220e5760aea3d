import pytest

from ossuary.config import CONFIG_ENV_VAR, GameConfig, load_config
from ossuary.exceptions import ConfigError


def test_defaults_load_from_packaged_yaml():
    config = load_config(env={})
    assert config == GameConfig()
    assert config.heal_amount == 4
    assert config.inventory_width == 50


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("heal_amount: 7\nmenu_background_alpha: 0.5\n", encoding="utf-8")

    config = load_config(str(path), env={})

    assert config.heal_amount == 7
    assert config.menu_background_alpha == 0.5
    assert config.screen_width == 80


def test_env_names_override_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("player_max_hp: 50\n", encoding="utf-8")
    assert load_config(env={CONFIG_ENV_VAR: str(path)}).player_max_hp == 50


def test_unknown_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / "settings.yaml"
    path.write_text("fog_of_war: true\n", encoding="utf-8")
    config = load_config(str(path), env={})
    assert config == GameConfig()
    assert "fog_of_war" in caplog.text


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list\n",
        "heal_amount: lots\n",
        "heal_amount: 0\n",
        "menu_background_alpha: 1.5\n",
        "inventory_width: 200\n",
        "heal_amount: [1\n",
        "heal_amount: 4.9\n",
        "player_max_hp: true\n",
        "message_history: 0\n",
        "message_history: 50\n",
    ],
)
def test_invalid_config_raises(tmp_path, text):
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(str(path), env={})


def test_whole_number_floats_are_accepted_for_integer_fields(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("heal_amount: 6.0\nmessage_history: 3\n", encoding="utf-8")
    config = load_config(str(path), env={})
    assert config.heal_amount == 6
    assert config.message_history == 3
