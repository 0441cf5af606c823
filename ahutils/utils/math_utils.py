"""
Exact decimal arithmetic for ahUtils.

Binary floating point cannot represent most decimal fractions, so
0.1 + 0.2 != 0.3 with plain floats. Every operation here converts its
operands to decimal.Decimal first and computes on the exact values.

Usage:
    from ahutils.utils.math_utils import add, divide, round

    add(0.1, 0.2)        # 0.3
    add(0.1, 0.2, 2)     # "0.30"
    divide(1, 3, 4)      # "0.3333"
    round(1.2355, 2)     # "1.24"

Result contract (identical for every operation):
- digits omitted (None) -> float approximation of the exact result
- digits given (int >= 0) -> fixed-point string with exactly `digits`
  fractional digits, rounded half-up

Operands (MathValue) may be int, float, numeric str or Decimal.
bool, None, NaN/Infinity, non-numeric strings and numbers beyond the
context exponent range are rejected with InvalidOperandError. A result
that overflows the context raises ResultOverflowError.

The decimal backend is a decimal.Context built once at import from
Settings (precision >= 20 significant digits, ROUND_HALF_UP) and passed
explicitly to every operation. The thread-local decimal.getcontext() is
never read nor modified.
"""
import decimal
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Literal, Optional, Sequence, Union

import structlog

from ahutils.config import DECIMAL_ROUNDING_MODES, get_settings
from ahutils.exceptions import DivisionByZeroError, InvalidArgumentError, InvalidOperandError, ResultOverflowError

logger = structlog.get_logger(__name__)

MathValue = Union[int, float, str, Decimal]
MathResult = Union[float, str]
CompareResult = Literal[-1, 0, 1]

_context: Context


# ============================================================================
# DECIMAL BACKEND
# ============================================================================

def configure_decimal_context(precision: Optional[int] = None, rounding: Optional[str] = None) -> Context:
    """
    Build the decimal context used by every arithmetic operation.

    Called once at import with the values from Settings. Call it again only
    at startup (or from tests) to substitute another backend configuration.

    Args:
        precision: Significant digits kept by intermediate results (default: Settings.DECIMAL_PRECISION)
        rounding: Name of a decimal rounding constant (default: Settings.DECIMAL_ROUNDING)

    Returns:
        The new active decimal.Context

    Raises:
        InvalidArgumentError: If precision is not a positive int or rounding is unknown
    """
    global _context

    _context = _new_context(precision, rounding)
    logger.debug("Decimal context configured", precision=_context.prec, rounding=_context.rounding)
    return _context


def get_decimal_context() -> Context:
    """Return the active decimal context."""
    return _context


def _new_context(precision: Optional[int], rounding: Optional[str]) -> Context:
    if precision is None or rounding is None:
        settings = get_settings()
        precision = precision if precision is not None else settings.DECIMAL_PRECISION
        rounding = rounding if rounding is not None else settings.DECIMAL_ROUNDING

    if isinstance(precision, bool) or not isinstance(precision, int) or precision <= 0:
        raise InvalidArgumentError(f"precision must be a positive integer, got {precision!r}", "precision", precision)

    rounding_name = str(rounding).upper()
    if rounding_name not in DECIMAL_ROUNDING_MODES:
        raise InvalidArgumentError(f"Unknown decimal rounding mode: {rounding!r}", "rounding", rounding)

    # Traps on InvalidOperation/DivisionByZero/Overflow stay enabled (Context defaults)
    return Context(prec=precision, rounding=getattr(decimal, rounding_name))


# ============================================================================
# NORMALIZATION
# ============================================================================

def to_decimal(value: MathValue, name: str = "value", index: Optional[int] = None) -> Decimal:
    """
    Normalize a MathValue into a finite Decimal.

    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")
    and not the binary expansion Decimal(0.1) would produce.

    Args:
        value: int, float, numeric str or Decimal
        name: Argument name reported in the error message
        index: Sequence index reported in the error message (sum/product)

    Returns:
        Decimal equal to the given value

    Raises:
        InvalidOperandError: If value is not a finite number or its exponent
                             exceeds the active context (Emax)

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal(" 2.50 ")
        Decimal('2.50')
        >>> to_decimal(True)  # InvalidOperandError
    """
    where = f"{name}[{index}]" if index is not None else name

    if isinstance(value, bool) or value is None:
        raise InvalidOperandError(f"{where} must be a valid number, got {value!r}", name, value, index)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidOperandError(f"{where} must be a valid number, got {value!r}", name, value, index) from None
    else:
        raise InvalidOperandError(
            f"{where} must be a valid number, got {type(value).__name__}", name, value, index
            )

    if not result.is_finite():
        raise InvalidOperandError(f"{where} must be a finite number, got {value!r}", name, value, index)

    emax = get_decimal_context().Emax
    if result.adjusted() > emax:
        raise InvalidOperandError(
            f"{where} is out of the decimal range (exponent > {emax}), got {value!r}",
            name, value, index
            )

    return result


def is_valid_number(value) -> bool:
    """Check whether value is accepted as an arithmetic operand."""
    try:
        to_decimal(value)
    except InvalidOperandError:
        return False
    return True


def _check_digits(digits) -> int:
    if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
        raise InvalidArgumentError(f"digits must be a non-negative integer, got {digits!r}", "digits", digits)
    return digits


def _to_fixed(value: Decimal, digits: int) -> str:
    """Format value with exactly `digits` fractional digits, rounding half-up."""
    # Scratch context wide enough for every integer digit plus the requested ones,
    # so quantize() never fails on large values
    scratch = Context(prec=max(value.adjusted(), 0) + digits + 2, rounding=ROUND_HALF_UP)
    quantized = value.quantize(Decimal((0, (1,), -digits)), context=scratch)
    if quantized.is_zero():
        quantized = quantized.copy_abs()
    return f"{quantized:f}"


def _calculate(operation: str, left: Decimal, right: Decimal) -> Decimal:
    context = get_decimal_context()
    try:
        return getattr(context, operation)(left, right)
    except decimal.Overflow:
        raise ResultOverflowError(
            f"Result of {operation} exceeds the decimal range (exponent > {context.Emax})"
            ) from None


def _format_result(value: Decimal, digits: Optional[int]) -> MathResult:
    if digits is None:
        return float(value)
    return _to_fixed(value, digits)


def _operands(a: MathValue, b: MathValue, digits: Optional[int]) -> tuple[Decimal, Decimal]:
    left = to_decimal(a, "a")
    right = to_decimal(b, "b")
    if digits is not None:
        _check_digits(digits)
    return left, right


def _check_sequence(values: Sequence[MathValue], digits: Optional[int]) -> list[Decimal]:
    # Strings are sequences too, only real lists/tuples are accepted
    if not isinstance(values, (list, tuple)):
        raise InvalidOperandError(
            f"values must be a list or tuple, got {type(values).__name__}", "values", values
            )
    if digits is not None:
        _check_digits(digits)
    # Validate everything before accumulating
    return [to_decimal(item, "values", index) for index, item in enumerate(values)]


# ============================================================================
# BINARY OPERATIONS
# ============================================================================

def add(a: MathValue, b: MathValue, digits: Optional[int] = None) -> MathResult:
    """
    Exact addition.

    Examples:
        >>> add(0.1, 0.2)
        0.3
        >>> add(0.1, 0.2, 2)
        '0.30'
    """
    left, right = _operands(a, b, digits)
    return _format_result(_calculate("add", left, right), digits)


def subtract(a: MathValue, b: MathValue, digits: Optional[int] = None) -> MathResult:
    """
    Exact subtraction.

    Examples:
        >>> subtract(0.3, 0.1)
        0.2
        >>> subtract(5, 3, 2)
        '2.00'
    """
    left, right = _operands(a, b, digits)
    return _format_result(_calculate("subtract", left, right), digits)


def multiply(a: MathValue, b: MathValue, digits: Optional[int] = None) -> MathResult:
    """
    Exact multiplication.

    Examples:
        >>> multiply(0.1, 0.2)
        0.02
        >>> multiply(1.23, 4.56, 3)
        '5.609'
    """
    left, right = _operands(a, b, digits)
    return _format_result(_calculate("multiply", left, right), digits)


def divide(a: MathValue, b: MathValue, digits: Optional[int] = None) -> MathResult:
    """
    Decimal division, rounded to the context precision.

    Raises:
        DivisionByZeroError: If b is exactly zero

    Examples:
        >>> divide(10, 2)
        5.0
        >>> divide(1, 3, 2)
        '0.33'
    """
    left, right = _operands(a, b, digits)
    if right.is_zero():
        raise DivisionByZeroError(f"Division by zero: {a!r} / {b!r}")
    return _format_result(_calculate("divide", left, right), digits)


# ============================================================================
# SEQUENCE OPERATIONS
# ============================================================================

def sum(values: Sequence[MathValue], digits: Optional[int] = None) -> MathResult:
    """
    Exact sum of a list of numbers; sum([]) is 0.

    Raises:
        InvalidOperandError: If values is not a list/tuple, or an element is invalid
                             (error.index holds the first failing position)

    Examples:
        >>> sum([0.1, 0.2, 0.3])
        0.6
        >>> sum([], 2)
        '0.00'
    """
    total = Decimal(0)
    for item in _check_sequence(values, digits):
        total = _calculate("add", total, item)
    return _format_result(total, digits)


def product(values: Sequence[MathValue], digits: Optional[int] = None) -> MathResult:
    """
    Exact product of a list of numbers; product([]) is 1.

    Examples:
        >>> product([2, 3, 4])
        24.0
        >>> product([1.5, 2, 3], 2)
        '9.00'
    """
    total = Decimal(1)
    for item in _check_sequence(values, digits):
        total = _calculate("multiply", total, item)
    return _format_result(total, digits)


# ============================================================================
# ROUNDING AND COMPARISON
# ============================================================================

def round(value: MathValue, digits: int) -> str:
    """
    Round to a fixed number of fractional digits (half-up).

    Args:
        value: Number to round
        digits: Non-negative integer number of fractional digits

    Returns:
        Fixed-point string

    Raises:
        InvalidOperandError: If value is not a valid number
        InvalidArgumentError: If digits is negative, fractional or not an int

    Examples:
        >>> round(1.2345, 2)
        '1.23'
        >>> round(1.2355, 2)
        '1.24'
        >>> round(10, 2)
        '10.00'
    """
    number = to_decimal(value, "value")
    return _to_fixed(number, _check_digits(digits))


def compare(a: MathValue, b: MathValue) -> CompareResult:
    """
    Three-way comparison on the exact decimal values.

    Returns:
        -1 if a < b, 0 if a == b, 1 if a > b

    Examples:
        >>> compare(1, 2)
        -1
        >>> compare(add(0.1, 0.2), 0.3)
        0
    """
    left, right = _operands(a, b, None)
    return int(get_decimal_context().compare(left, right))


# Built once at import; logging is usually not configured yet, so no event here
_context = _new_context(None, None)
