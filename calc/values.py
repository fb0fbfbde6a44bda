import dataclasses as dc
import math

from .reporter import TypeMismatch, ArithmeticFault

### VALUES ###

# closed set of runtime values: Null, Boolean, Integer, Float
# Integer is a signed 64-bit machine integer, results wrap around
# Float is an IEEE-754 double
# pprint() -> str for display

INT_BITS    = 64
INT_MIN     = -(1 << (INT_BITS - 1))
INT_MAX     = (1 << (INT_BITS - 1)) - 1

def wrap(n):
    """
    two's complement wrap of a python int into the 64-bit range
    """
    return ((n - INT_MIN) % (1 << INT_BITS)) + INT_MIN

@dc.dataclass(frozen = True)
class Null:
    def pprint(self):
        return "null"

@dc.dataclass(frozen = True)
class Boolean:
    value       : bool

    def pprint(self):
        return "true" if self.value else "false"

@dc.dataclass(frozen = True)
class Integer:
    value       : int

    def pprint(self):
        return str(self.value)

@dc.dataclass(frozen = True)
class Float:
    value       : float

    def pprint(self):
        return repr(self.value)

NULL    = Null()
TRUE    = Boolean(True)
FALSE   = Boolean(False)

Number  = Integer | Float
Value   = Null | Boolean | Integer | Float

def boolean(b):
    return TRUE if b else FALSE

### COERCION ###

def to_float(x):
    match x:
        case Integer(value) | Float(value):
            return float(value)
    raise TypeMismatch("expected a number", this = x.pprint())

def to_long(f):
    """
    saturating conversion of a double to a 64-bit integer, nan goes to 0
    """
    if math.isnan(f):
        return 0
    if f >= INT_MAX:
        return INT_MAX
    if f <= INT_MIN:
        return INT_MIN
    return int(f)

def numbers(a, b, operator):
    if not isinstance(a, Number):
        raise TypeMismatch("left operand is not a number",
                           this = a.pprint(), context = operator)
    if not isinstance(b, Number):
        raise TypeMismatch("right operand is not a number",
                           this = b.pprint(), context = operator)
    return a, b

def integers(a, b, operator):
    match a, b:
        case Integer(), Integer():
            return a, b
    raise TypeMismatch("operands must both be integers",
                       this = f"{a.pprint()} {operator} {b.pprint()}")

### ARITHMETIC ###

def negate(x):
    match x:
        case Integer(value):
            return Integer(wrap(-value))
        case Float(value):
            return Float(-value)
    raise TypeMismatch("cannot negate a non-number", this = x.pprint())

def identity(x):
    match x:
        case Integer() | Float():
            return x
    raise TypeMismatch("unary plus on a non-number", this = x.pprint())

def add(a, b):
    match numbers(a, b, "+"):
        case Integer(x), Integer(y):
            return Integer(wrap(x + y))
    return Float(to_float(a) + to_float(b))

def subtract(a, b):
    match numbers(a, b, "-"):
        case Integer(x), Integer(y):
            return Integer(wrap(x - y))
    return Float(to_float(a) - to_float(b))

def multiply(a, b):
    match numbers(a, b, "*"):
        case Integer(x), Integer(y):
            return Integer(wrap(x * y))
    return Float(to_float(a) * to_float(b))

def divide(a, b):
    match numbers(a, b, "/"):
        case Integer(x), Integer(0):
            raise ArithmeticFault("integer division by zero",
                                  this = f"{x} / 0")
        case Integer(x), Integer(y):
            # truncate toward zero, python's // floors
            q = abs(x) // abs(y)
            return Integer(wrap(q if (x < 0) == (y < 0) else -q))
    return Float(float_divide(to_float(a), to_float(b)))

def float_divide(x, y):
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)

def float_power(x, y):
    odd = y.is_integer() and y % 2 == 1
    try:
        return math.pow(x, y)
    except OverflowError:
        return -math.inf if (x < 0 and odd) else math.inf
    except ValueError:
        # zero to a negative power, or a negative base to a fractional one
        if x == 0:
            return math.copysign(math.inf, x) if odd else math.inf
        return math.nan

def power(a, b):
    result = float_power(*map(to_float, numbers(a, b, "**")))
    match a, b:
        case Integer(), Integer():
            return Integer(to_long(result))
    return Float(result)

def bitwise_and(a, b):
    a, b = integers(a, b, "&")
    return Integer(a.value & b.value)

def bitwise_or(a, b):
    a, b = integers(a, b, "|")
    return Integer(a.value | b.value)

def bitwise_xor(a, b):
    a, b = integers(a, b, "^")
    return Integer(a.value ^ b.value)

### COMPARISON ###

def order(a, b):
    """
    -1, 0 or 1 for two numbers, None when a nan is involved
    """
    match a, b:
        case Integer(x), Integer(y):
            pass
        case _:
            x, y = to_float(a), to_float(b)
            if math.isnan(x) or math.isnan(y):
                return None
    return (x > y) - (x < y)

def equal(a, b):
    """
    same kind and same value: an integer never equals a float
    """
    return type(a) is type(b) and a.value == b.value

### BOOLEAN ###

def truth(x, operator):
    match x:
        case Boolean(value):
            return value
    raise TypeMismatch("expected a boolean", this = x.pprint(), context = operator)
