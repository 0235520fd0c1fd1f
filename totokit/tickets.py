"""
Ticket checking for Singapore TOTO.

Parses user-entered tickets, maps match counts to prize groups and prices
system bets.
"""
import re
from math import comb

from totokit.draws import COMBINATION_LENGTH, NUMBER_MAX, NUMBER_MIN

TICKET_SEPARATORS = re.compile(r"[,.\s，．]+")
SYSTEM_BET_RANGE = range(COMBINATION_LENGTH, 13)  # Ordinary to System 12
BET_UNIT_PRICE = 1

PRIZE_GROUPS = {
    1: "Group 1 (Jackpot)",
    2: "Group 2",
    3: "Group 3",
    4: "Group 4",
    5: "Group 5",
    6: "Group 6",
    7: "Group 7",
}

# (main matches, additional matched) -> group; 6 main matches is always Group 1
GROUP_BY_MATCHES = {
    (5, True): 2,
    (5, False): 3,
    (4, True): 4,
    (4, False): 5,
    (3, True): 6,
    (3, False): 7,
}


def parse_ticket(text):
    """
    Parse a ticket like "3, 10 32.34 44 48" into 6 numbers.

    Tokens that are not numbers in 1-49 are ignored. Raises ValueError unless
    exactly 6 distinct valid numbers remain.
    """
    numbers = []
    for token in TICKET_SEPARATORS.split(text.strip()):
        try:
            n = int(token)
        except ValueError:
            continue
        if NUMBER_MIN <= n <= NUMBER_MAX:
            numbers.append(n)

    if len(numbers) != COMBINATION_LENGTH:
        raise ValueError(
            f"A ticket needs {COMBINATION_LENGTH} numbers between "
            f"{NUMBER_MIN} and {NUMBER_MAX}, got {len(numbers)}"
        )
    if len(set(numbers)) != COMBINATION_LENGTH:
        raise ValueError("A ticket cannot contain duplicate numbers")
    return numbers


def determine_prize_group(main_matches, additional_match):
    """Prize group for a 6-number ticket, or None below 3 main matches."""
    if main_matches >= COMBINATION_LENGTH:
        return 1
    return GROUP_BY_MATCHES.get((main_matches, bool(additional_match)))


def check_ticket(ticket, result):
    """Check one ticket against an official result."""
    main_matches = sum(1 for n in ticket if n in result.numbers)
    additional_match = result.additional_number in ticket
    group = determine_prize_group(main_matches, additional_match)
    return {
        "numbers": list(ticket),
        "draw_number": result.draw_number,
        "matched_numbers": main_matches,
        "matched_additional": additional_match,
        "prize_group": group,
        "prize": PRIZE_GROUPS.get(group),
    }


def system_bet_price(count):
    """
    Cost of betting `count` numbers as a system entry.

    A System N bet covers every 6-number combination of its N numbers, at
    $1 each. Returns None outside Ordinary (6) to System 12.
    """
    if count not in SYSTEM_BET_RANGE:
        return None
    return comb(count, COMBINATION_LENGTH) * BET_UNIT_PRICE
