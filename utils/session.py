import logging
from typing import Awaitable, Callable

import discord
from discord.ext import commands

logger = logging.getLogger("Slate.session")


class DiscordSession:
    """以 discord.py 機器人實現的會話能力"""
    def __init__(self, bot: commands.Bot, token: str):
        self.bot = bot
        self.token = token

    def add_handler(self, handler: Callable[..., Awaitable[None]]) -> Callable[[], None]:
        """
        註冊事件處理器，事件名稱取自函數名稱（例如 on_message）
        返回移除該處理器的函數
        """
        self.bot.add_listener(handler)

        def remove():
            self.bot.remove_listener(handler)

        return remove

    async def send_message(self, channel_id: int, content: str) -> discord.Message:
        """發送訊息到頻道"""
        channel = self.bot.get_channel(channel_id)
        if channel is None:
            # 快取中沒有時向API查詢
            channel = await self.bot.fetch_channel(channel_id)
        return await channel.send(content)

    async def open(self):
        """連線到Discord，直到連線關閉才返回"""
        logger.info("正在連線到Discord...")
        await self.bot.start(self.token)

    async def close(self):
        """關閉Discord連線"""
        if not self.bot.is_closed():
            await self.bot.close()
        logger.info("Discord連線已關閉")
