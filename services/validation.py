"""Registration and authorization rules shared by the route handlers."""
from datetime import date
from typing import Optional

from errors import Forbidden, ValidationError

MINIMUM_AGE = 16
UNDERAGE_MESSAGE = "Você deve ter pelo menos 16 anos para se registrar"


def calculate_age(birth_date: date, today: Optional[date] = None) -> int:
    """
    Age in full years as of ``today``.

    A year only counts once the birth month/day has been reached in the
    current year, so someone born on Feb 29 turns a year older on Mar 1
    in non-leap years.
    """
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def ensure_minimum_age(birth_date: date, today: Optional[date] = None) -> None:
    if calculate_age(birth_date, today) < MINIMUM_AGE:
        raise ValidationError(UNDERAGE_MESSAGE)


def ensure_owner(caller_id: int, target_id: int) -> None:
    """Only the owner of a resource may change it."""
    if caller_id != target_id:
        raise Forbidden("Acesso negado")
