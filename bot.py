import discord
from discord.ext import commands
import logging
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from cogs.help_cog import HelpCog
from cogs.settings_cog import SettingsCog
from models.interface import SlateCommand
from utils.config import ConfigManager
from utils.roll_command import RollCommand
from utils.session import DiscordSession

logger = logging.getLogger("Slate.bot")


class SlateBot:
    """Slate機器人類"""
    def __init__(self, config_path: Optional[str] = None):
        # 遍歷查找環境變量和配置文件
        root_dir = self.find_project_root()

        # 查找環境變量文件
        env_file = self.find_env_file(root_dir)
        if env_file:
            load_dotenv(dotenv_path=env_file)

        # 從環境變量獲取token
        token = os.getenv("DISCORD_TOKEN")
        if not token:
            logger.error("未找到 DISCORD_TOKEN 環境變量，請在項目根目錄的 .env 文件或終端中設置 DISCORD_TOKEN")
            raise ValueError("未找到 DISCORD_TOKEN 環境變量")

        if config_path is None:
            config_path = self.find_config_file(root_dir)
        self.config_manager = ConfigManager(config_path=config_path)

        # 設置機器人
        intents = discord.Intents.default()
        intents.message_content = True  # 需要讀取消息內容

        self.bot = commands.Bot(
            command_prefix=self.config_manager.global_config.command_prefix,
            intents=intents,
            description="Chronicles of Darkness 擲骰機器人",
            help_command=None
        )
        self.session = DiscordSession(self.bot, token)
        self.slate_commands: List[SlateCommand] = []

        self.setup_events()
        self.register_command(RollCommand(self.config_manager))

    def find_project_root(self) -> Path:
        """查找項目根目錄"""
        current_path = Path(__file__).resolve()

        # 包含 pyproject.toml 或 .git 的父目錄即為項目根目錄
        for parent in current_path.parents:
            if (parent / 'pyproject.toml').exists() or (parent / '.git').exists():
                return parent

        return current_path.parent

    def find_env_file(self, root_dir: Path) -> Optional[Path]:
        """查找環境變量文件"""
        for pattern in ['.env', '.env.*', '*.env']:
            for env_file in sorted(root_dir.glob(pattern)):
                if env_file.is_file():
                    logger.info(f"找到環境變量文件: {env_file}")
                    return env_file

        logger.warning(f"在 {root_dir} 中未找到環境變量文件")
        return None

    def find_config_file(self, root_dir: Path) -> str:
        """查找配置文件，不存在時返回默認路徑"""
        return str(root_dir / "config.json")

    def setup_events(self):
        """設置事件處理器"""
        async def on_ready():
            logger.info(f'{self.bot.user} 已經上線! 已連接到 {len(self.bot.guilds)} 個服務器')

            # 同步應用命令
            try:
                await self.bot.tree.sync()
                logger.info("應用命令已同步")
            except discord.HTTPException as e:
                logger.error(f"同步應用命令時出錯: {e}")

        async def on_command_error(ctx, error):
            if isinstance(error, commands.CommandNotFound):
                logger.debug(f"未知指令: {ctx.message.content}")
                return
            logger.error(f"執行指令 {ctx.command} 時出錯: {error}")

        self.session.add_handler(on_ready)
        self.session.add_handler(on_command_error)

    def register_command(self, slate_command: SlateCommand):
        """將指令註冊為前綴指令，原始參數直接傳給指令"""
        async def callback(ctx, *args: str):
            await slate_command.execute(ctx, list(args), self.session, ctx.message)

        self.bot.add_command(commands.Command(
            callback,
            name=slate_command.name,
            brief=slate_command.synopsis,
            help=slate_command.usage
        ))
        self.slate_commands.append(slate_command)
        logger.debug(f"已註冊指令: {slate_command.name}")

    async def add_cogs(self):
        """添加Cog模塊"""
        await self.bot.add_cog(HelpCog(self.bot, self.slate_commands))
        await self.bot.add_cog(SettingsCog(self.bot, self.config_manager))

    async def start(self):
        """啟動機器人"""
        await self.add_cogs()
        await self.session.open()

    async def close(self):
        """關閉機器人"""
        await self.session.close()
