from datetime import date
from typing import Optional


def years_ago(years: int, today: Optional[date] = None) -> date:
    """The date ``years`` before today; Feb 29 falls back to Feb 28."""
    today = today or date.today()
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        return today.replace(year=today.year - years, day=28)


def registration_payload(**overrides) -> dict:
    payload = {
        "firstName": "Ana",
        "lastName": "Souza",
        "email": "ana@example.com",
        "username": "ana",
        "birthDate": years_ago(20).isoformat(),
        "password": "segredo123",
    }
    payload.update(overrides)
    return payload
