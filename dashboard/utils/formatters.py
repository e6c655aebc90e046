"""Formatting and format-checking helpers for display values."""
import re
from typing import Optional

from core.entities import Employee
from dashboard.config import settings


# Car plate: 1234 AB-1
CAR_NUMBER_REGEX = re.compile(r'^[0-9]{4}\s[A-Z]{2}-[0-9]$')
# Phone: +375 (xx) xxx-xx-xx
PHONE_NUMBER_REGEX = re.compile(r'^\+375\s?\(?\d{2}\)?\s?\d{3}[\s-]?\d{2}[\s-]?\d{2}$')


def format_price(amount: float, currency: Optional[str] = None) -> str:
    """Format amount with two decimals and currency label."""
    return f"{amount:.2f} {currency or settings.currency}"


def format_phone_number(phone: str) -> str:
    """
    Format phone number as +375 (XX) XXX-XX-XX.
    
    Numbers that are not 12-digit Belarusian numbers are returned unchanged.
    """
    digits = re.sub(r'\D', '', phone)
    
    if len(digits) == 12 and digits.startswith('375'):
        return f"+375 ({digits[3:5]}) {digits[5:8]}-{digits[8:10]}-{digits[10:12]}"
    
    return phone


def format_car_number(car_number: str) -> str:
    """
    Format car number as 1234 AB-1.
    
    Input is upper-cased and separators are normalized; values that don't
    fit the pattern are returned upper-cased and trimmed.
    """
    cleaned = re.sub(r'[\s-]', '', car_number.strip().upper())
    match = re.match(r'^(\d{4})([A-Z]{2})(\d)$', cleaned)
    if match:
        return f"{match.group(1)} {match.group(2)}-{match.group(3)}"
    return car_number.strip().upper()


def is_valid_phone_number(phone: str) -> bool:
    return bool(PHONE_NUMBER_REGEX.match(phone.strip()))


def is_valid_car_number(car_number: str) -> bool:
    return bool(CAR_NUMBER_REGEX.match(car_number.strip()))


def format_employee_name(employee: Employee) -> str:
    """Format employee full name."""
    return f"{employee.first_name} {employee.last_name}".strip()
