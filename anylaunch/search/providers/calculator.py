"""
Calculator Provider - Inline math evaluation in search.

Evaluates queries such as "2+2" or "= sqrt(16)" with simpleeval (no
access to builtins, filesystem, or imports). A leading "=" forces
evaluation of expressions without digits ("= pi").

A failed parse is not an error, just no result.
"""

import math

from loguru import logger
from simpleeval import InvalidExpression, simple_eval

from anylaunch.search.dispatcher import SearchProvider
from anylaunch.search.entry import Entry, EntryKind, EntryList

CALCULATOR_ICON = "accessories-calculator"

# Same magnitude as the largest float; str() of much larger ints fails on 3.11+
MAX_INT_BITS = 1024

FUNCTIONS = {
    "sqrt": math.sqrt,
    "abs": abs,
    "round": round,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "log": math.log,
    "log10": math.log10,
    "pow": pow,
    "min": min,
    "max": max,
}

NAMES = {
    "pi": math.pi,
    "e": math.e,
}


def format_number(value) -> str:
    """Whole floats print as integers, others as the shortest repr."""
    if isinstance(value, float) and value == int(value):
        return str(int(value))
    return str(value)


class CalculatorProvider(SearchProvider):
    """Evaluate arithmetic expressions."""

    name = "calculator"
    kind = EntryKind.CALCULATION
    match_names = False

    def search(self, query: str) -> EntryList:
        text = query.strip()
        forced = text.startswith("=")
        expr = text.lstrip("=").strip()
        if not expr:
            return EntryList()
        if not forced and not any(ch.isdigit() for ch in expr):
            return EntryList()

        try:
            value = simple_eval(expr, functions=FUNCTIONS, names=NAMES)
        except (InvalidExpression, SyntaxError):
            return EntryList()
        except (TypeError, ValueError, ZeroDivisionError, OverflowError) as e:
            logger.debug(f"Math error for '{expr}': {e}")
            return EntryList()
        except Exception as e:
            logger.debug(f"Unexpected calculator error for '{expr}': {e}")
            return EntryList()

        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return EntryList()
        if isinstance(value, float) and not math.isfinite(value):
            return EntryList()

        if isinstance(value, int) and value.bit_length() > MAX_INT_BITS:
            logger.debug(f"Result of '{expr}' too large to display")
            return EntryList()

        display = format_number(value)
        if display == expr:
            return EntryList()

        entry = Entry(
            kind=EntryKind.CALCULATION,
            name=display,
            tab_completion_text=display,
            icon=CALCULATOR_ICON,
        )
        entry.highlight(0, len(display))
        return EntryList([entry])
