import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional


class SlateLogger:
    """自定義日誌系統"""

    def __init__(self, log_file: str = "slate.log", level: Optional[int] = None):
        if level is None:
            level = logging.getLevelName(os.getenv("SLATE_LOG_LEVEL", "INFO").upper())
            if not isinstance(level, int):
                level = logging.INFO

        # 子模組使用 Slate.* 日誌，會傳遞到這裡
        self.logger = logging.getLogger('Slate')
        self.logger.setLevel(level)

        # 避免重複添加處理器
        if not self.logger.handlers:
            # 設置文件處理器（帶輪換）
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=1024*1024,  # 1MB
                backupCount=5,
                encoding='utf-8'
            )

            # 設置控制台處理器
            console_handler = logging.StreamHandler()

            # 設置格式
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            file_handler.setFormatter(formatter)
            console_handler.setFormatter(formatter)

            # 添加處理器
            self.logger.addHandler(file_handler)
            self.logger.addHandler(console_handler)

    def info(self, message: str):
        """記錄信息級別日誌"""
        self.logger.info(message)

    def error(self, message: str):
        """記錄錯誤級別日誌"""
        self.logger.error(message)

    def exception(self, message: str):
        """記錄錯誤並附上堆疊"""
        self.logger.exception(message)


_logger: Optional[SlateLogger] = None


def get_logger() -> SlateLogger:
    """獲取日誌實例，第一次呼叫時建立處理器"""
    global _logger
    if _logger is None:
        _logger = SlateLogger()
    return _logger
