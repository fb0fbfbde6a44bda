import ply.lex
import re

from .reporter  import Reporter, LexError
from .tokens    import (
    Structural, Operand, Identifier, Literal, Operator,
    UnaryArithmetic, UnaryBoolean, BinaryArithmetic, Bitwise,
    Comparison, BinaryBoolean, Assignment,
)
from .values    import Integer, Float, TRUE, FALSE, NULL, INT_MAX

### LEXER ###

# two stages:
# ply scans the raw text into NUMBER, IDENT, keyword, paren and operator tokens
# classify() turns each raw token into a Token, looking at what was emitted
# before it to tell unary from binary '+'/'-' and where '=' assigns

class Lexer:
    keywords = {
        x: x.upper() for x in (
            'true'     ,
            'false'    ,
            'null'     ,
        )
    }

    operators = {
        '='     :   'EQ'            ,
        '=='    :   'BOOL_EQ'       ,
        '!'     :   'BOOL_NOT'      ,
        '!='    :   'BOOL_NEQ'      ,
        '<'     :   'BOOL_LT'       ,
        '<='    :   'BOOL_LEQ'      ,
        '>'     :   'BOOL_GT'       ,
        '>='    :   'BOOL_GEQ'      ,
        '&&'    :   'BOOL_AND'      ,
        '||'    :   'BOOL_OR'       ,
        '+'     :   'PLUS'          ,
        '+='    :   'PLUS_EQ'       ,
        '-'     :   'DASH'          ,
        '-='    :   'DASH_EQ'       ,
        '*'     :   'STAR'          ,
        '*='    :   'STAR_EQ'       ,
        '**'    :   'STARSTAR'      ,
        '**='   :   'STARSTAR_EQ'   ,
        '/'     :   'SLASH'         ,
        '/='    :   'SLASH_EQ'      ,
        '&'     :   'AMP'           ,
        '&='    :   'AMP_EQ'        ,
        '|'     :   'PIPE'          ,
        '|='    :   'PIPE_EQ'       ,
        '^'     :   'HAT'           ,
        '^='    :   'HAT_EQ'        ,
    }

    tokens = (
        'IDENT'     ,               # : str
        'NUMBER'    ,               # : Integer | Float
        'OPERATOR'  ,               # : str, retyped from operators

        # Punctuation
        'NEWLINE'   ,
        'LPAREN'    ,
        'RPAREN'    ,
    ) + tuple(keywords.values()) + tuple(operators.values())

    # operators that mean the same thing wherever they appear
    fixed = {
        'BOOL_EQ'       :   Comparison.EQUALS,
        'BOOL_NEQ'      :   Comparison.NOT_EQUAL,
        'BOOL_LT'       :   Comparison.LT,
        'BOOL_LEQ'      :   Comparison.LE,
        'BOOL_GT'       :   Comparison.GT,
        'BOOL_GEQ'      :   Comparison.GE,
        'BOOL_NOT'      :   UnaryBoolean.NOT,
        'BOOL_AND'      :   BinaryBoolean.AND,
        'BOOL_OR'       :   BinaryBoolean.OR,
        'STAR'          :   BinaryArithmetic.TIMES,
        'STARSTAR'      :   BinaryArithmetic.POWER,
        'SLASH'         :   BinaryArithmetic.DIVIDE,
        'AMP'           :   Bitwise.AND,
        'PIPE'          :   Bitwise.OR,
        'HAT'           :   Bitwise.XOR,
        'PLUS_EQ'       :   Assignment.PLUS,
        'DASH_EQ'       :   Assignment.MINUS,
        'STAR_EQ'       :   Assignment.TIMES,
        'STARSTAR_EQ'   :   Assignment.POWER,
        'SLASH_EQ'      :   Assignment.DIVIDE,
        'AMP_EQ'        :   Assignment.BITWISE_AND,
        'PIPE_EQ'       :   Assignment.BITWISE_OR,
        'HAT_EQ'        :   Assignment.BITWISE_XOR,
        'LPAREN'        :   Structural.LEFT_PAREN,
        'RPAREN'        :   Structural.RIGHT_PAREN,
        'NEWLINE'       :   Structural.NEWLINE,
        'TRUE'          :   Literal(TRUE),
        'FALSE'         :   Literal(FALSE),
        'NULL'          :   Literal(NULL),
    }

    t_LPAREN    = re.escape('(')
    t_RPAREN    = re.escape(')')

    t_ignore = ' \t\r\f\v'      # Ignore all whitespaces but newlines

    def __init__(self, reporter: Reporter):
        self.lexer    = ply.lex.lex(module = self)
        self.reporter = reporter

    def lex(self, text):
        """
        return the infix token list of text, raise LexError on the first problem
        """
        self.lexer.input(text)
        self.lexer.lineno = 1

        emitted = []
        for t in self.lexer:
            token = self.classify(t, emitted)
            if token is not None:
                emitted.append(token)
        return emitted

    def classify(self, t, emitted):
        previous = emitted[-1] if emitted else None

        match t.type:
            case 'NUMBER':
                return Literal(t.value)

            case 'IDENT':
                return Identifier(t.value)

            case 'PLUS':
                match previous:
                    case Operand():
                        return BinaryArithmetic.PLUS
                return UnaryArithmetic.PLUS

            case 'DASH':
                match previous:
                    case Operand() | Structural.RIGHT_PAREN:
                        return BinaryArithmetic.MINUS
                    case None | Operator() | Structural.LEFT_PAREN:
                        return UnaryArithmetic.NEGATE
                raise LexError("unexpected token before '-'",
                               this = previous.pprint(), context = f"column {t.lexpos}")

            case 'EQ':
                return self.assignment(emitted)

            case _:
                return self.fixed[t.type]

    def assignment(self, emitted):
        """
        a single '=' only assigns right after a leading identifier, or
        on the fly right after '(' and an identifier; elsewhere it is dropped
        """
        match emitted:
            case [Identifier()]:
                return Assignment.ASSIGNMENT
            case [*_, Structural.LEFT_PAREN, Identifier()]:
                return Assignment.ON_THE_FLY
        return None

    def t_NEWLINE(self, t):
        r'\n'
        t.lexer.lineno += 1
        return t

    def t_NUMBER(self, t):
        r'\d[\d.]*'
        match t.value.count('.'):
            case 0:
                if int(t.value) > INT_MAX:
                    raise LexError("integer literal out of range",
                                   this = t.value, context = f"column {t.lexpos}")
                t.value = Integer(int(t.value))
            case 1:
                t.value = Float(float(t.value))
            case _:
                raise LexError("too many decimal points",
                               this = t.value, context = f"column {t.lexpos}")
        return t

    def t_IDENT(self, t):
        r'[a-zA-Z_][a-zA-Z0-9_]*'
        if t.value in self.keywords:
            t.type  = self.keywords[t.value]
        return t

    def t_OPERATOR(self, t):
        r'\*\*=|\*\*|&&|\|\||[-+*/&|^=!<>]=|[-+*/&|^=!<>]'
        if t.lexpos + 1 >= len(t.lexer.lexdata):
            raise LexError("incomplete operator",
                           this = t.value, context = f"column {t.lexpos}")
        t.type = self.operators[t.value]
        return t

    def t_error(self, t):
        self.reporter.log(f"lexer: illegal character '{t.value[0]}' -- skipping")
        t.lexer.skip(1)
