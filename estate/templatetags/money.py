from django import template

from arvskifte.errors import CalculationError
from arvskifte.formatting import format_percent, format_sek

register = template.Library()


@register.filter
def kronor(value):
    """
    Formats a Decimal/number as Swedish kronor with sv-SE grouping.
    Example: 302500 -> 302 500 kr
    """
    try:
        return format_sek(value)
    except (CalculationError, ArithmeticError):
        return value


@register.filter
def procent(value):
    try:
        return format_percent(value)
    except (CalculationError, ArithmeticError):
        return value
