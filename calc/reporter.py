import sys

class Reporter():
    """
    report errors of a session, line by line
    """
    def __init__(self, stream = None):
        self.errors  = []
        self.failed  = 0
        self.section = None
        self.stream  = stream or sys.stderr

    def crash(self, errstr):
        self.flush()

        errstr = f"{{{self.section}}} \t| " + errstr if self.section else errstr
        print(f"[ Fatal Error ] | {errstr}", file=self.stream)

        sys.exit(1)

    def log(self, error):
        match error:
            case CalcError():
                self.failed += 1
        prefix = f"{{{self.section}}} \t| " if self.section else ""
        self.errors.append(prefix + str(error))

    def note(self, message):
        print(f"[ Trace ] | {message}", file=self.stream)

    def flush(self):
        for err in self.errors:
            print(f"[ Error ] {err}", file=self.stream)
        self.errors = []

    def checkpoint(self, section = None):
        self.flush()
        self.section = section

### ERRORS ###

# every error aborts the current line only
# errstr  : what went wrong
# this    : rendering of the offending token or value
# context : where it went wrong (column, operator)

class CalcError(Exception):
    def __init__(self, errstr, this = None, context = None):
        super().__init__(errstr)
        self.errstr     = errstr
        self.this       = this
        self.context    = context

    def __str__(self):
        to_log  = f"{type(self).__name__}: {self.errstr}"
        to_log += f" in {{{self.this}}}"              if self.this     else ""
        to_log += f" in context {{{self.context}}}"   if self.context  else ""
        return to_log

class LexError(CalcError):
    pass

class EvalError(CalcError):
    pass

class TypeMismatch(EvalError):
    pass

class MalformedExpression(EvalError):
    pass

class ArithmeticFault(EvalError):
    pass
