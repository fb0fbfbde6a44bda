from .reporter  import MalformedExpression
from .tokens    import Structural, Operand, Operator, pprint_tokens

### SHUNTING YARD ###

# reorders infix tokens into postfix order
# an operator only pops operators that bind strictly tighter than itself,
# so chains of equal precedence end up grouped from the right:
# 10 - 3 - 2 -> 10 3 2 - -

def to_postfix(infix):
    stack   = []
    postfix = []

    for token in infix:
        match token:
            case Operand():
                postfix.append(token)

            case Operator():
                while (stack and stack[-1] is not Structural.LEFT_PAREN
                       and stack[-1].binds_tighter_than(token)):
                    postfix.append(stack.pop())
                stack.append(token)

            case Structural.LEFT_PAREN:
                stack.append(token)

            case Structural.RIGHT_PAREN:
                while True:
                    if not stack:
                        raise MalformedExpression("unmatched ')'",
                                                  context = pprint_tokens(infix))
                    top = stack.pop()
                    if top is Structural.LEFT_PAREN:
                        break
                    postfix.append(top)

            case Structural.NEWLINE | Structural.COMMA:
                pass

    while stack:
        top = stack.pop()
        if top is Structural.LEFT_PAREN:
            raise MalformedExpression("unmatched '('",
                                      context = pprint_tokens(infix))
        postfix.append(top)

    return postfix
