import logging
import random
from typing import Callable, List, Optional, Tuple

from models.types import RollOutcome, RollRequest

logger = logging.getLogger("Slate.cofd")

# roll(faces) 返回 [0, faces) 之間的整數，例如 random.Random().randrange
Roller = Callable[[int], int]

FACES = 10
SUCCESS_FACE = 8
CHANCE_SUCCESS_FACE = 10
MIN_FACE = 1
DEFAULT_AGAIN = 10
MAX_EXPLOSION_DICE = 1000


def roll_die(roll: Roller) -> int:
    """擲單個十面骰"""
    return roll(FACES) + 1


def roll_generation(dice: int, again: int, rote: bool, weakness: bool,
                    roll: Roller) -> Tuple[List[int], List[int], int, int]:
    """
    擲一輪骰子
    返回: (擲骰結果, 精通重擲結果, 成功數, 需要追加的骰子數)
    成功數可能為負數，由呼叫者處理
    """
    rolls = []
    rerolls = []
    successes = 0
    explosions = 0

    for _ in range(dice):
        die = roll_die(roll)
        rolls.append(die)

        # 精通：失敗的骰子重擲一次，以重擲結果計分
        if rote and die < SUCCESS_FACE:
            die = roll_die(roll)
            rerolls.append(die)

        if die >= SUCCESS_FACE:
            successes += 1

        if die >= again:
            explosions += 1

        # 弱點：每個最小點數扣一個成功
        if weakness and die == MIN_FACE:
            successes -= 1

    return rolls, rerolls, successes, explosions


def roll_chance_die(rote: bool, weakness: bool, roll: Roller) -> RollOutcome:
    """機會骰：只擲一顆，只有10點算成功，不會追加"""
    die = roll_die(roll)
    rolls = [die]
    rerolls = []

    if rote and die < CHANCE_SUCCESS_FACE:
        die = roll_die(roll)
        rerolls.append(die)

    successes = 1 if die >= CHANCE_SUCCESS_FACE else 0
    if weakness and die == MIN_FACE:
        successes -= 1

    return RollOutcome(rolls=rolls, rerolls=rerolls, successes=max(successes, 0))


def roll_cofd(dice: int, again: int = DEFAULT_AGAIN, rote: bool = False, weakness: bool = False,
              roll: Optional[Roller] = None, max_explosion_dice: int = MAX_EXPLOSION_DICE) -> RollOutcome:
    """
    擲Chronicles of Darkness骰池

    每一輪追加骰的結果依序附加到 rerolls；
    每一輪的成功數與其後所有輪次合計後不低於0。
    """
    if roll is None:
        roll = random.Random().randrange

    if dice == 0:
        return roll_chance_die(rote, weakness, roll)

    rolls, rerolls, successes, pending = roll_generation(dice, again, rote, weakness, roll)
    generations = [successes]
    budget = max_explosion_dice

    while pending > 0:
        if pending > budget:
            logger.warning(f"追加骰數量超過上限 {max_explosion_dice}，捨棄 {pending - budget} 顆追加骰")
            pending = budget
            if pending == 0:
                break
        budget -= pending

        extra_rolls, extra_rerolls, extra_successes, pending = roll_generation(
            pending, again, rote, weakness, roll
        )
        rerolls.extend(extra_rolls)
        rerolls.extend(extra_rerolls)
        generations.append(extra_successes)

    total = 0
    for generation in reversed(generations):
        total = max(generation + total, 0)

    return RollOutcome(rolls=rolls, rerolls=rerolls, successes=total)


def format_dice_list(values: List[int]) -> str:
    """格式化骰子列表，如 [10 7]"""
    return "[" + " ".join(map(str, values)) + "]"


def format_cofd_result(request: RollRequest, outcome: RollOutcome) -> str:
    """格式化CofD結果為單行文字"""
    message = f"rolled {request.dice} CofD dice"
    if request.dice == 0:
        message += " (Chance Die)"

    # 調整擲骰的旗標
    flags = []
    if request.again != DEFAULT_AGAIN:
        flags.append(f"{request.again}-again")
    if request.rote:
        flags.append("rote")
    if request.weakness:
        flags.append("weakness")
    if flags:
        message += f" (with {', '.join(flags)})"

    message += f" for {outcome.successes} successes."

    if outcome.successes >= request.exceptional:
        message += " Exceptional success!"

    # 機會骰不會追加，有重擲時以精通重擲結果為準
    if request.dice == 0 and outcome.rolls:
        scored = outcome.rerolls[-1] if outcome.rerolls else outcome.rolls[0]
        if scored == MIN_FACE:
            message += " Critical failure!"

    if request.verbose:
        message += f" rolls: {format_dice_list(outcome.rolls)}"
        if outcome.rerolls:
            message += f" rerolls: {format_dice_list(outcome.rerolls)}"

    return message
