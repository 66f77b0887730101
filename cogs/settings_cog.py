import discord
from discord.ext import commands
from typing import Optional


class SettingsCog(commands.Cog, name="Settings"):
    """公會擲骰預設值相關指令"""
    def __init__(self, bot, config_manager):
        self.bot = bot
        self.config_manager = config_manager

    def update_cofd_defaults(self, guild_id: int, again: int, exceptional: int, verbose: Optional[bool] = None) -> str:
        """
        更新公會的CofD預設值
        返回說明文字，數值無效時拋出 ValueError
        """
        if not 2 <= again <= 11:
            raise ValueError("again 必須介於 2 到 11 之間")
        if exceptional < 1:
            raise ValueError("exceptional 必須至少為 1")

        guild_config = self.config_manager.get_guild_config(guild_id)
        guild_config.cofd_again = again
        guild_config.cofd_exceptional = exceptional
        if verbose is not None:
            guild_config.cofd_verbose = verbose
        self.config_manager.set_guild_config(guild_id, guild_config)

        return (f"CofD 預設值已更新: {guild_config.cofd_again}-again, "
                f"exceptional {guild_config.cofd_exceptional}, "
                f"verbose {'on' if guild_config.cofd_verbose else 'off'}")

    @commands.hybrid_command(name="cofd_defaults", description="設定本服務器的CofD擲骰預設值")
    async def cofd_defaults(self, ctx, again: int, exceptional: int, verbose: Optional[bool] = None):
        """設定本服務器的CofD擲骰預設值"""
        if not ctx.guild:
            await ctx.send("此指令只能在服務器中使用")
            return

        try:
            description = self.update_cofd_defaults(ctx.guild.id, again, exceptional, verbose)
        except ValueError as e:
            embed = discord.Embed(
                title="錯誤",
                description=str(e),
                color=0xff0000
            )
            await ctx.send(embed=embed)
            return

        embed = discord.Embed(
            title="預設值已更新",
            description=description,
            color=0x7289da
        )
        await ctx.send(embed=embed)
