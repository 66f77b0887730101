from dataclasses import dataclass, field
from typing import List


@dataclass
class RollRequest:
    """擲骰請求"""
    dice: int
    again: int = 10
    rote: bool = False
    weakness: bool = False
    exceptional: int = 5
    verbose: bool = False
    system: str = "cofd"


@dataclass
class RollOutcome:
    """擲骰結果"""
    rolls: List[int] = field(default_factory=list)
    rerolls: List[int] = field(default_factory=list)  # 所有重擲結果，依世代順序攤平
    successes: int = 0
