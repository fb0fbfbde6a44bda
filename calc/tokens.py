import dataclasses as dc
import enum

from . import values
from .values   import Value, boolean, FALSE
from .reporter import TypeMismatch

### TOKENS ###

# closed set of token kinds shared by lexer, shunting yard and evaluator
# structural markers, operands (identifier, literal) and operator families
# every operator has a precedence and evaluates resolved values
# pprint() -> str for traces and error messages

class Structural(enum.Enum):
    NEWLINE     = enum.auto()
    LEFT_PAREN  = enum.auto()
    RIGHT_PAREN = enum.auto()
    COMMA       = enum.auto()

    def pprint(self):
        match self:
            case Structural.NEWLINE:
                return "\\n"
            case Structural.LEFT_PAREN:
                return "("
            case Structural.RIGHT_PAREN:
                return ")"
            case Structural.COMMA:
                return ","

### OPERANDS ###

class Operand:
    pass

@dc.dataclass(frozen = True)
class Identifier(Operand):
    name        : str

    def pprint(self):
        return self.name

@dc.dataclass(frozen = True)
class Literal(Operand):
    value       : Value

    def pprint(self):
        return self.value.pprint()

### OPERATORS ###

class Operator:
    """
    mixin for the operator enums below
    """
    @property
    def precedence(self):
        raise NotImplementedError

    def binds_tighter_than(self, other):
        return self.precedence > other.precedence

    def pprint(self):
        return symbols[self]

class UnaryArithmetic(Operator, enum.Enum):
    PLUS        = enum.auto()
    NEGATE      = enum.auto()

    @property
    def precedence(self):
        return 6

    def evaluate(self, x):
        match self:
            case UnaryArithmetic.PLUS:
                return values.identity(x)
            case UnaryArithmetic.NEGATE:
                return values.negate(x)

class UnaryBoolean(Operator, enum.Enum):
    NOT         = enum.auto()

    @property
    def precedence(self):
        return -4

    def evaluate(self, x):
        return boolean(not values.truth(x, self.pprint()))

class BinaryArithmetic(Operator, enum.Enum):
    PLUS        = enum.auto()
    MINUS       = enum.auto()
    TIMES       = enum.auto()
    DIVIDE      = enum.auto()
    POWER       = enum.auto()

    @property
    def precedence(self):
        match self:
            case BinaryArithmetic.PLUS | BinaryArithmetic.MINUS:
                return 0
            case BinaryArithmetic.TIMES:
                return 1
            case BinaryArithmetic.DIVIDE:
                return 2
            case BinaryArithmetic.POWER:
                return 3

    def evaluate(self, a, b):
        match self:
            case BinaryArithmetic.PLUS:
                return values.add(a, b)
            case BinaryArithmetic.MINUS:
                return values.subtract(a, b)
            case BinaryArithmetic.TIMES:
                return values.multiply(a, b)
            case BinaryArithmetic.DIVIDE:
                return values.divide(a, b)
            case BinaryArithmetic.POWER:
                return values.power(a, b)

class Bitwise(Operator, enum.Enum):
    AND         = enum.auto()
    OR          = enum.auto()
    XOR         = enum.auto()

    @property
    def precedence(self):
        return 4

    def evaluate(self, a, b):
        match self:
            case Bitwise.AND:
                return values.bitwise_and(a, b)
            case Bitwise.OR:
                return values.bitwise_or(a, b)
            case Bitwise.XOR:
                return values.bitwise_xor(a, b)

class Comparison(Operator, enum.Enum):
    EQUALS      = enum.auto()
    NOT_EQUAL   = enum.auto()
    LT          = enum.auto()
    LE          = enum.auto()
    GT          = enum.auto()
    GE          = enum.auto()

    @property
    def precedence(self):
        return -2

    def evaluate(self, a, b):
        match a, b:
            case (values.Integer() | values.Float(), values.Integer() | values.Float()):
                pass
            case (values.Boolean(), values.Boolean()):
                # booleans are only equal or not, they have no order
                match self:
                    case Comparison.EQUALS:
                        return boolean(values.equal(a, b))
                    case Comparison.NOT_EQUAL:
                        return boolean(not values.equal(a, b))
                return FALSE
            case _:
                return FALSE

        match self:
            case Comparison.EQUALS:
                return boolean(values.equal(a, b))
            case Comparison.NOT_EQUAL:
                return boolean(not values.equal(a, b))

        sign = values.order(a, b)
        if sign is None:
            return FALSE

        match self:
            case Comparison.LT:
                return boolean(sign < 0)
            case Comparison.LE:
                return boolean(sign <= 0)
            case Comparison.GT:
                return boolean(sign > 0)
            case Comparison.GE:
                return boolean(sign >= 0)

class BinaryBoolean(Operator, enum.Enum):
    AND         = enum.auto()
    OR          = enum.auto()

    @property
    def precedence(self):
        return -3

    def evaluate(self, a, b):
        x = values.truth(a, self.pprint())
        y = values.truth(b, self.pprint())
        match self:
            case BinaryBoolean.AND:
                return boolean(x and y)
            case BinaryBoolean.OR:
                return boolean(x or y)

class Assignment(Operator, enum.Enum):
    ASSIGNMENT  = enum.auto()
    ON_THE_FLY  = enum.auto()
    PLUS        = enum.auto()
    MINUS       = enum.auto()
    TIMES       = enum.auto()
    DIVIDE      = enum.auto()
    POWER       = enum.auto()
    BITWISE_AND = enum.auto()
    BITWISE_OR  = enum.auto()
    BITWISE_XOR = enum.auto()

    @property
    def precedence(self):
        match self:
            case Assignment.ON_THE_FLY:
                return 5
            case _:
                return -1

    def evaluate(self, environment, name, value):
        """
        store into the variable called name and return what was stored
        """
        match self:
            case Assignment.ASSIGNMENT | Assignment.ON_THE_FLY:
                return environment.assign(name, value)

        old = environment.lookup(name)
        if not isinstance(old, values.Number):
            raise TypeMismatch(f"{{{name}}} does not hold a number",
                               this = old.pprint(), context = self.pprint())
        if not isinstance(value, values.Number):
            raise TypeMismatch("right hand side is not a number",
                               this = value.pprint(), context = self.pprint())

        return environment.assign(name, compound[self](old, value))

compound = {
        Assignment.PLUS         :   values.add,
        Assignment.MINUS        :   values.subtract,
        Assignment.TIMES        :   values.multiply,
        Assignment.DIVIDE       :   values.divide,
        Assignment.POWER        :   values.power,
        Assignment.BITWISE_AND  :   values.bitwise_and,
        Assignment.BITWISE_OR   :   values.bitwise_or,
        Assignment.BITWISE_XOR  :   values.bitwise_xor,
        }

symbols = {
        UnaryArithmetic.PLUS        :   'pos',
        UnaryArithmetic.NEGATE      :   'neg',
        UnaryBoolean.NOT            :   '!',
        BinaryArithmetic.PLUS       :   '+',
        BinaryArithmetic.MINUS      :   '-',
        BinaryArithmetic.TIMES      :   '*',
        BinaryArithmetic.DIVIDE     :   '/',
        BinaryArithmetic.POWER      :   '**',
        Bitwise.AND                 :   '&',
        Bitwise.OR                  :   '|',
        Bitwise.XOR                 :   '^',
        Comparison.EQUALS           :   '==',
        Comparison.NOT_EQUAL        :   '!=',
        Comparison.LT               :   '<',
        Comparison.LE               :   '<=',
        Comparison.GT               :   '>',
        Comparison.GE               :   '>=',
        BinaryBoolean.AND           :   '&&',
        BinaryBoolean.OR            :   '||',
        Assignment.ASSIGNMENT       :   '=',
        Assignment.ON_THE_FLY       :   '(=)',
        Assignment.PLUS             :   '+=',
        Assignment.MINUS            :   '-=',
        Assignment.TIMES            :   '*=',
        Assignment.DIVIDE           :   '/=',
        Assignment.POWER            :   '**=',
        Assignment.BITWISE_AND      :   '&=',
        Assignment.BITWISE_OR       :   '|=',
        Assignment.BITWISE_XOR      :   '^=',
        }

def pprint_tokens(tokens):
    return " ".join(token.pprint() for token in tokens)
