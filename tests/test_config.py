import json

from utils.config import ConfigManager, GuildConfig


def test_creates_default_config(tmp_path):
    path = tmp_path / "config.json"
    manager = ConfigManager(config_path=str(path))

    assert path.exists()
    assert manager.global_config.command_prefix == "!"
    assert json.loads(path.read_text(encoding="utf-8")) == {"global": {"command_prefix": "!"}, "guilds": {}}


def test_unknown_guild_gets_defaults(tmp_path):
    manager = ConfigManager(config_path=str(tmp_path / "config.json"))
    assert manager.get_guild_config(123) == GuildConfig()


def test_guild_config_round_trip(tmp_path):
    path = str(tmp_path / "config.json")
    manager = ConfigManager(config_path=path)
    manager.set_guild_config(123, GuildConfig(cofd_again=9, cofd_exceptional=3, cofd_verbose=True))

    reloaded = ConfigManager(config_path=path)
    assert reloaded.get_guild_config(123) == GuildConfig(
        cofd_again=9, cofd_exceptional=3, cofd_verbose=True, cofd_max_explosion_dice=1000
    )


def test_missing_keys_fall_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"global": {"command_prefix": "?"}, "guilds": {"5": {"cofd_again": 8}}}),
                    encoding="utf-8")

    manager = ConfigManager(config_path=str(path))
    assert manager.global_config.command_prefix == "?"
    assert manager.get_guild_config(5) == GuildConfig(cofd_again=8)
