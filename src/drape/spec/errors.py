class DrapeError(Exception):
    pass


class PreconditionViolation(DrapeError):
    pass


class WrongHostElementError(PreconditionViolation):
    def __init__(self, element_name: str, attribute_name: str):
        self.element_name = element_name
        self.attribute_name = attribute_name
        super().__init__(
            f"{attribute_name} processor should only appear in a <title> element, "
            f"found on <{element_name}>"
        )


class EvaluationError(DrapeError):
    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"Cannot evaluate expression {expression!r}: {reason}")
