import discord
from discord.ext import commands
from typing import Optional


class HelpCog(commands.Cog, name="Help"):
    """幫助相關指令"""
    def __init__(self, bot, slate_commands):
        self.bot = bot
        self.slate_commands = slate_commands

    def build_help_embed(self, name=None) -> discord.Embed:
        """建立說明內容，指定名稱時顯示該指令的完整用法"""
        if name:
            for command in self.slate_commands:
                if command.name == name:
                    return discord.Embed(
                        title=f"{command.name}",
                        description=f"{command.synopsis}\n```\n{command.usage}\n```",
                        color=0x1abc9c
                    )
            return discord.Embed(
                title="錯誤",
                description=f"找不到指令: {name}",
                color=0xff0000
            )

        lines = [f"**{command.name}** - {command.synopsis}" for command in self.slate_commands]
        return discord.Embed(
            title="Slate 指令說明",
            description="\n".join(lines) + "\n\n使用 `help <指令>` 查看詳細用法。",
            color=0x1abc9c
        )

    @commands.hybrid_command(name="help", description="顯示指令說明")
    async def help_command(self, ctx, name: Optional[str] = None):
        """顯示幫助信息"""
        await ctx.send(embed=self.build_help_embed(name))
