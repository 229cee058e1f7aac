import re

from drape.spec import ContextProtocol, EvaluationError

_VARIABLE = re.compile(r"\$\{\s*([A-Za-z_][\w.]*)\s*\}")


class SimpleExpressionEvaluator:
    """
    Minimal evaluator covering the expressions title attributes usually hold:

    - ``'Some text'``: a text literal, ``\\'`` escapes a quote
    - ``${name}``: a context variable
    - ``|Hello ${name}|``: a literal with variables substituted
    """

    def evaluate(self, expression: str, context: ContextProtocol) -> str:
        expr = expression.strip()

        if len(expr) >= 2 and expr[0] == expr[-1] == "'":
            return expr[1:-1].replace("\\'", "'")

        if len(expr) >= 2 and expr[0] == expr[-1] == "|":
            return _VARIABLE.sub(
                lambda m: self._lookup(expression, m.group(1), context), expr[1:-1]
            )

        match = _VARIABLE.fullmatch(expr)
        if match:
            return self._lookup(expression, match.group(1), context)

        raise EvaluationError(expression, "unsupported expression syntax")

    def _lookup(self, expression: str, name: str, context: ContextProtocol) -> str:
        value = context.get_string(name)
        if value is None:
            raise EvaluationError(expression, f"unknown variable '{name}'")
        return value
