"""
Interpreter: evaluate sentences of a small language.

Text is turned into a sequence of lexical tokens, the tokens are parsed
into an expression tree, and the tree is evaluated against a context.
"""

import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, NamedTuple, Optional

logger = logging.getLogger('GoFPatterns.Interpreter')


class Context:
    def __init__(self, variables: Optional[Dict[str, int]] = None):
        self.variables: Dict[str, int] = dict(variables or {})

    def set_variable(self, name: str, value: int) -> None:
        self.variables[name] = value

    def get_variable(self, name: str) -> int:
        return self.variables.get(name, 0)


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: Context) -> int:
        pass


class NumberExpression(Expression):
    """A variable reference resolved through the context."""

    def __init__(self, name: str):
        self.name = name

    def interpret(self, context: Context) -> int:
        return context.get_variable(self.name)


class LiteralExpression(Expression):
    def __init__(self, value: int):
        self.value = value

    def interpret(self, context: Context) -> int:
        return self.value


class AddExpression(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> int:
        return self.left.interpret(context) + self.right.interpret(context)


class SubtractExpression(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> int:
        return self.left.interpret(context) - self.right.interpret(context)


# -- Lexing and parsing

class TokenType(Enum):
    INTEGER = 'INTEGER'
    VARIABLE = 'VARIABLE'
    PLUS = 'PLUS'
    MINUS = 'MINUS'


class Token(NamedTuple):
    type: TokenType
    text: str


class ParseError(ValueError):
    """Raised for text outside the expression language."""


_TOKEN_PATTERN = re.compile(r'\s*(?:(?P<INTEGER>\d+)|(?P<VARIABLE>[A-Za-z]+)|(?P<PLUS>\+)|(?P<MINUS>-))')


def lex(text: str) -> List[Token]:
    tokens = []
    position = 0
    text = text.rstrip()
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if not match:
            raise ParseError(f"unexpected character {text[position]!r} at {position}")
        tokens.append(Token(TokenType(match.lastgroup), match.group(match.lastgroup)))
        position = match.end()
    return tokens


def parse(tokens: List[Token]) -> Expression:
    """Left-associative chain: operand ((PLUS | MINUS) operand)*."""

    def operand(token: Token) -> Expression:
        if token.type is TokenType.INTEGER:
            return LiteralExpression(int(token.text))
        if token.type is TokenType.VARIABLE:
            if len(token.text) != 1:
                raise ParseError(f"variable names are single letters, got {token.text!r}")
            return NumberExpression(token.text)
        raise ParseError(f"expected a number or variable, got {token.text!r}")

    if not tokens:
        raise ParseError("empty expression")

    expression = operand(tokens[0])
    rest = tokens[1:]
    if len(rest) % 2:
        raise ParseError("expression ends with an operator")

    for op, right in zip(rest[::2], rest[1::2]):
        if op.type is TokenType.PLUS:
            expression = AddExpression(expression, operand(right))
        elif op.type is TokenType.MINUS:
            expression = SubtractExpression(expression, operand(right))
        else:
            raise ParseError(f"expected an operator, got {op.text!r}")
    return expression


class ExpressionProcessor:
    """Evaluates expressions such as ``1+2+x``; any failure yields 0."""

    def __init__(self, variables: Optional[Dict[str, int]] = None):
        self.context = Context(variables)

    def calculate(self, text: str) -> int:
        try:
            tokens = lex(text)
            expression = parse(tokens)
        except ParseError as e:
            logger.debug("Cannot evaluate %r: %s", text, e)
            return 0

        unknown = {t.text for t in tokens if t.type is TokenType.VARIABLE} - set(self.context.variables)
        if unknown:
            logger.debug("Cannot evaluate %r: unknown variables %s", text, sorted(unknown))
            return 0
        return expression.interpret(self.context)


def run():
    print("\nInterpreter\n")

    context = Context()
    context.set_variable("x", 2)
    context.set_variable("y", 4)
    context.set_variable("z", 8)

    expression = SubtractExpression(
        AddExpression(NumberExpression("y"), NumberExpression("z")),
        NumberExpression("x"),
    )
    print(f"Expression result: {expression.interpret(context)}")

    processor = ExpressionProcessor({"x": 3})
    for text in ("1+2+3", "10-2-x", "1+2+xy"):
        print(f"{text} = {processor.calculate(text)}")
