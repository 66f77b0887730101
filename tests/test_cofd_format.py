from models.types import RollOutcome, RollRequest
from utils.cofd import format_cofd_result, roll_cofd


OUTCOME = RollOutcome(rolls=[10, 7], rerolls=[8], successes=2)


def test_normal():
    assert format_cofd_result(RollRequest(dice=2), OUTCOME) == "rolled 2 CofD dice for 2 successes."


def test_verbose():
    request = RollRequest(dice=2, verbose=True)
    assert format_cofd_result(request, OUTCOME) == \
        "rolled 2 CofD dice for 2 successes. rolls: [10 7] rerolls: [8]"


def test_verbose_without_rerolls():
    request = RollRequest(dice=2, verbose=True)
    outcome = RollOutcome(rolls=[3, 8], rerolls=[], successes=1)
    assert format_cofd_result(request, outcome) == "rolled 2 CofD dice for 1 successes. rolls: [3 8]"


def test_exceptional():
    request = RollRequest(dice=2, exceptional=2)
    assert format_cofd_result(request, OUTCOME) == "rolled 2 CofD dice for 2 successes. Exceptional success!"


def test_again():
    request = RollRequest(dice=2, again=9)
    assert format_cofd_result(request, OUTCOME) == "rolled 2 CofD dice (with 9-again) for 2 successes."


def test_rote():
    request = RollRequest(dice=2, rote=True)
    assert format_cofd_result(request, OUTCOME) == "rolled 2 CofD dice (with rote) for 2 successes."


def test_weakness():
    request = RollRequest(dice=2, weakness=True)
    assert format_cofd_result(request, OUTCOME) == "rolled 2 CofD dice (with weakness) for 2 successes."


def test_all_modifiers():
    request = RollRequest(dice=4, again=9, rote=True, weakness=True, exceptional=4, verbose=True)
    outcome = RollOutcome(rolls=[8, 8, 9, 7], rerolls=[8, 4], successes=4)
    assert format_cofd_result(request, outcome) == (
        "rolled 4 CofD dice (with 9-again, rote, weakness) for 4 successes. "
        "Exceptional success! rolls: [8 8 9 7] rerolls: [8 4]"
    )


def test_chance():
    outcome = RollOutcome(rolls=[5], rerolls=[], successes=0)
    assert format_cofd_result(RollRequest(dice=0), outcome) == "rolled 0 CofD dice (Chance Die) for 0 successes."


def test_critical_failure():
    outcome = RollOutcome(rolls=[1], rerolls=[], successes=0)
    assert format_cofd_result(RollRequest(dice=0), outcome) == \
        "rolled 0 CofD dice (Chance Die) for 0 successes. Critical failure!"


def test_one_is_not_critical_outside_chance_die():
    outcome = RollOutcome(rolls=[1], rerolls=[], successes=0)
    assert format_cofd_result(RollRequest(dice=1), outcome) == "rolled 1 CofD dice for 0 successes."


def test_chance_die_end_to_end():
    request = RollRequest(dice=0)
    assert format_cofd_result(request, roll_cofd(0, roll=lambda faces: 8)) == \
        "rolled 0 CofD dice (Chance Die) for 0 successes."
    assert format_cofd_result(request, roll_cofd(0, roll=lambda faces: 0)).endswith(" Critical failure!")


def test_formatting_is_repeatable():
    request = RollRequest(dice=4, again=8, rote=True, verbose=True)
    outcome = RollOutcome(rolls=[8, 8, 9, 7], rerolls=[8, 4], successes=4)
    first = format_cofd_result(request, outcome)
    assert format_cofd_result(request, outcome) == first
    assert outcome.rolls == [8, 8, 9, 7]
    assert outcome.rerolls == [8, 4]


def test_chance_die_weakness():
    request = RollRequest(dice=0, weakness=True)
    assert format_cofd_result(request, roll_cofd(0, 10, False, True, lambda faces: 0)) == \
        "rolled 0 CofD dice (Chance Die) (with weakness) for 0 successes. Critical failure!"


def test_rote_reroll_clears_critical_failure():
    request = RollRequest(dice=0, rote=True)
    outcome = RollOutcome(rolls=[1], rerolls=[10], successes=1)
    assert format_cofd_result(request, outcome) == \
        "rolled 0 CofD dice (Chance Die) (with rote) for 1 successes."


def test_rote_reroll_to_one_is_critical_failure():
    request = RollRequest(dice=0, rote=True)
    outcome = RollOutcome(rolls=[4], rerolls=[1], successes=0)
    assert format_cofd_result(request, outcome) == \
        "rolled 0 CofD dice (Chance Die) (with rote) for 0 successes. Critical failure!"
