import argparse
import logging
import random
import re
from typing import Any, Callable, List

from models.interface import Session
from models.types import RollRequest
from utils.cofd import roll_cofd, format_cofd_result
from utils.config import ConfigManager, GuildConfig

logger = logging.getLogger("Slate.roll")

SYSTEMS = ("cofd",)

_DICE_RE = re.compile(r"^\d+$")


class RollArgumentError(ValueError):
    """使用者輸入錯誤，不會進行擲骰"""


class RollArgumentParser(argparse.ArgumentParser):
    """解析失敗時拋出例外而不是結束程序"""

    def error(self, message):
        raise RollArgumentError(f"{message}. {self.format_usage().strip()}")


def again_threshold(value: str) -> int:
    again = int(value)
    if not 2 <= again <= 11:
        raise argparse.ArgumentTypeError("again must be between 2 and 11")
    return again


def exceptional_threshold(value: str) -> int:
    exceptional = int(value)
    if exceptional < 1:
        raise argparse.ArgumentTypeError("exceptional must be at least 1")
    return exceptional


def build_parser(rules: GuildConfig) -> RollArgumentParser:
    """建立擲骰參數解析器，預設值來自公會配置"""
    parser = RollArgumentParser(
        prog="roll",
        description="Roll a pool of Chronicles of Darkness dice. 0 dice rolls a chance die.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("dice", nargs="?", default="0", help="number of dice")
    parser.add_argument("-again", "--again", type=again_threshold, default=rules.cofd_again,
                        metavar="N", help="dice at or above N are rerolled (default: %(default)s)")
    parser.add_argument("-rote", "--rote", action="store_true", help="reroll failed dice once")
    parser.add_argument("-weakness", "--weakness", action="store_true",
                        help="each 1 removes a success")
    parser.add_argument("-exceptional", "--exceptional", type=exceptional_threshold,
                        default=rules.cofd_exceptional, metavar="N",
                        help="successes needed for an exceptional success (default: %(default)s)")
    parser.add_argument("-verbose", "--verbose", action="store_true",
                        default=rules.cofd_verbose, help="show the individual dice")
    parser.add_argument("-no-verbose", "--no-verbose", dest="verbose", action="store_false",
                        default=rules.cofd_verbose,
                        help="hide the individual dice")
    parser.add_argument("-system", "--system", choices=SYSTEMS, default="cofd",
                        help="dice system")
    return parser


def parse_roll_args(args: List[str], rules: GuildConfig) -> RollRequest:
    """
    解析擲骰參數
    無效輸入時拋出 RollArgumentError
    """
    namespace = build_parser(rules).parse_args(args)

    invalid = RollArgumentError(f"{namespace.dice} is not a valid number of dice.")
    if not _DICE_RE.match(namespace.dice):
        raise invalid

    try:
        dice = int(namespace.dice)
    except ValueError:
        # 位數過多時 int() 會拒絕轉換
        raise invalid from None

    if dice > rules.cofd_max_dice:
        raise invalid

    return RollRequest(
        dice=dice,
        again=namespace.again,
        rote=namespace.rote,
        weakness=namespace.weakness,
        exceptional=namespace.exceptional,
        verbose=namespace.verbose,
        system=namespace.system,
    )


class RollCommand:
    """roll 指令"""
    name = "roll"
    synopsis = "Roll Chronicles of Darkness dice."

    def __init__(self, config_manager: ConfigManager, rng_factory: Callable[[], Any] = random.Random):
        self.config_manager = config_manager
        # 每次擲骰建立獨立的亂數產生器
        self.rng_factory = rng_factory
        self.usage = build_parser(GuildConfig()).format_help()
        self.systems = {
            "cofd": self.roll_cofd,
        }

    def get_rules(self, message) -> GuildConfig:
        """獲取訊息所在公會的配置"""
        guild = getattr(message, "guild", None)
        if guild is None:
            return GuildConfig()  # 使用默認配置
        return self.config_manager.get_guild_config(guild.id)

    def run(self, args: List[str], rules: GuildConfig) -> str:
        """解析參數並擲骰，返回要回覆的文字"""
        try:
            request = parse_roll_args(args, rules)
        except RollArgumentError as e:
            logger.info(f"無效的擲骰參數 {args}: {e}")
            return str(e)

        return self.systems[request.system](request, rules)

    def roll_cofd(self, request: RollRequest, rules: GuildConfig) -> str:
        rng = self.rng_factory()
        outcome = roll_cofd(
            request.dice,
            request.again,
            request.rote,
            request.weakness,
            rng.randrange,
            max_explosion_dice=rules.cofd_max_explosion_dice,
        )
        logger.debug(f"CofD擲骰 {request}: {outcome}")
        return format_cofd_result(request, outcome)

    async def execute(self, ctx, args: List[str], session: Session, message) -> None:
        """執行擲骰並將結果發送到原頻道"""
        text = self.run(args, self.get_rules(message))
        await session.send_message(message.channel.id, f"{message.author.mention} {text}")
