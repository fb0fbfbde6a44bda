import dataclasses as dc

from .environment import Environment
from .reporter    import TypeMismatch, MalformedExpression
from .tokens      import (
    Identifier, Literal,
    UnaryArithmetic, UnaryBoolean, BinaryArithmetic, Bitwise,
    Comparison, BinaryBoolean, Assignment, pprint_tokens,
)

### EVALUATOR ###

# walks a postfix token list with one operand stack
# operands stay unresolved tokens on the stack: an assignment needs the
# identifier itself, not its value
# results are pushed back wrapped in a Literal

@dc.dataclass
class Evaluator:
    environment : Environment

    def resolve(self, operand):
        match operand:
            case Identifier(name):
                return self.environment.lookup(name)
            case Literal(value):
                return value

    def pop(self, stack, operator):
        if not stack:
            raise MalformedExpression("missing operand", context = operator.pprint())
        return stack.pop()

    def evaluate(self, postfix):
        stack = []

        for token in postfix:
            match token:
                case Identifier() | Literal():
                    stack.append(token)

                case UnaryArithmetic() | UnaryBoolean():
                    x = self.resolve(self.pop(stack, token))
                    stack.append(Literal(token.evaluate(x)))

                case BinaryArithmetic() | Bitwise() | Comparison() | BinaryBoolean():
                    # right operand is on top, order matters for '-', '/', '**', '<'...
                    b = self.resolve(self.pop(stack, token))
                    a = self.resolve(self.pop(stack, token))
                    stack.append(Literal(token.evaluate(a, b)))

                case Assignment():
                    value  = self.resolve(self.pop(stack, token))
                    target = self.pop(stack, token)
                    match target:
                        case Identifier(name):
                            stack.append(Literal(token.evaluate(self.environment, name, value)))
                        case _:
                            raise TypeMismatch("can only assign to a variable",
                                               this = target.pprint(), context = token.pprint())

                case _:
                    raise MalformedExpression("unexpected token in postfix",
                                              this = token.pprint())

        match stack:
            case [operand]:
                return self.resolve(operand)
            case []:
                raise MalformedExpression("empty expression")
            case _:
                raise MalformedExpression(f"{len(stack)} operands left without operator",
                                          this = pprint_tokens(stack))
