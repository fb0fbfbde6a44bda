from typing import Optional as Opt

from .environment import Environment
from .evaluator   import Evaluator
from .lexer       import Lexer
from .reporter    import Reporter, CalcError
from .shunting    import to_postfix
from .tokens      import pprint_tokens
from .values      import Value

### SESSION ###

# one environment shared by every line of a session
# evaluate() -> Value, raises CalcError
# run()      -> Value | None, logs the error instead and keeps the session alive

class Session:
    def __init__(self, reporter: Reporter, trace = False):
        self.reporter    = reporter
        self.trace       = trace
        self.lexer       = Lexer(reporter)
        self.environment = Environment()
        self.evaluator   = Evaluator(self.environment)

    def evaluate(self, line) -> Value:
        infix   = self.lexer.lex(line)
        postfix = to_postfix(infix)

        if self.trace:
            self.reporter.note(f"tokens  : {pprint_tokens(infix)}")
            self.reporter.note(f"postfix : {pprint_tokens(postfix)}")

        return self.evaluator.evaluate(postfix)

    def run(self, line) -> Opt[Value]:
        try:
            return self.evaluate(line)
        except CalcError as e:
            self.reporter.log(e)
            return None
