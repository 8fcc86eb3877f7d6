"""Infix-to-postfix conversion and bracket-sequence checking."""

from __future__ import annotations

_OPENING = "({["
_MATCHING_OPEN = {")": "(", "}": "{", "]": "["}
_ADDITIVE = frozenset("+-")
_LOW = 0
_HIGH = 1


def precedence(operator: str) -> int:
    """Return the binding strength of ``operator``: additive binds looser."""
    if operator in _ADDITIVE:
        return _LOW
    return _HIGH


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of lowercase operands to postfix form.

    Every character that is not a lowercase letter is treated as a
    left-associative operator; ``+`` and ``-`` bind looser than the rest.
    """
    output: list[str] = []
    operators: list[str] = []
    for char in expression:
        if "a" <= char <= "z":
            output.append(char)
            continue
        while operators and precedence(operators[-1]) >= precedence(char):
            output.append(operators.pop())
        operators.append(char)
    output.extend(reversed(operators))
    return "".join(output)


def is_balanced(text: str) -> bool:
    """Return whether ``text`` is a regular sequence of (), {} and [] pairs.

    Any character that does not open a bracket must close the most recently
    opened one, so characters other than brackets make the text unbalanced.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif stack and stack[-1] == _MATCHING_OPEN.get(char):
            stack.pop()
        else:
            return False
    return not stack