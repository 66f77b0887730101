#!/usr/bin/env python3
"""
Slate - Chronicles of Darkness 擲骰 Discord Bot
"""

import asyncio
import sys

from dotenv import load_dotenv

from bot import SlateBot
from utils.logger import get_logger


async def run(bot: SlateBot):
    """運行機器人直到連線結束"""
    try:
        await bot.start()
    finally:
        await bot.close()


def main():
    """主函數"""
    # 加載環境變量
    load_dotenv()

    logger = get_logger()
    logger.info("正在啟動Slate...")

    # 創建機器人（機器人會自己查找環境變量）
    try:
        bot = SlateBot()
    except ValueError as e:
        logger.error(f"錯誤：{e}")
        sys.exit(1)

    try:
        asyncio.run(run(bot))
    except KeyboardInterrupt:
        logger.info("收到中斷信號，正在關閉機器人...")
    except Exception:
        logger.exception("機器人運行時出現錯誤")
        sys.exit(1)

    logger.info("機器人已關閉")


if __name__ == "__main__":
    main()
