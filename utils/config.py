import json
import os
from typing import Dict
from dataclasses import dataclass, asdict


@dataclass
class GlobalConfig:
    """全局配置"""
    command_prefix: str = "!"


@dataclass
class GuildConfig:
    """公會配置"""
    # CofD 规则配置
    cofd_again: int = 10
    cofd_exceptional: int = 5
    cofd_verbose: bool = False
    cofd_max_dice: int = 100
    cofd_max_explosion_dice: int = 1000


class ConfigManager:
    """配置管理器"""
    def __init__(self, config_path: str = "config.json"):
        self.config_path = config_path
        self.global_config = GlobalConfig()
        self.guild_configs: Dict[int, GuildConfig] = {}
        self.load_config()

    def load_config(self):
        """加載配置"""
        if os.path.exists(self.config_path):
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            # 加載全局配置
            global_data = data.get('global', {})
            self.global_config = GlobalConfig(
                command_prefix=global_data.get('command_prefix', '!')
            )

            # 加載公會配置
            guild_data = data.get('guilds', {})
            for guild_id, cfg in guild_data.items():
                self.guild_configs[int(guild_id)] = GuildConfig(
                    cofd_again=cfg.get('cofd_again', 10),
                    cofd_exceptional=cfg.get('cofd_exceptional', 5),
                    cofd_verbose=cfg.get('cofd_verbose', False),
                    cofd_max_dice=cfg.get('cofd_max_dice', 100),
                    cofd_max_explosion_dice=cfg.get('cofd_max_explosion_dice', 1000)
                )
        else:
            # 如果配置文件不存在，創建默認配置
            self.save_config()

    def save_config(self):
        """保存配置"""
        data = {
            'global': asdict(self.global_config),
            'guilds': {str(guild_id): asdict(config)
                       for guild_id, config in self.guild_configs.items()}
        }

        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def get_guild_config(self, guild_id: int) -> GuildConfig:
        """獲取公會配置"""
        return self.guild_configs.get(guild_id, GuildConfig())

    def set_guild_config(self, guild_id: int, config: GuildConfig):
        """設置公會配置"""
        self.guild_configs[guild_id] = config
        self.save_config()
