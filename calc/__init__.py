"""
calc: lexer, shunting yard and postfix evaluator for one-line expressions
"""
