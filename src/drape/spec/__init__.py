from .models import (
    DecorationPassState,
    Element,
    Fragment,
    Node,
    Text,
    TitleSource,
    text_of,
)
from .errors import (
    DrapeError,
    EvaluationError,
    PreconditionViolation,
    WrongHostElementError,
)
from .protocols import (
    ContextProtocol,
    ExpressionEvaluatorProtocol,
    StructuralMergerProtocol,
)

__all__ = [
    "DecorationPassState",
    "Element",
    "Fragment",
    "Node",
    "Text",
    "TitleSource",
    "text_of",
    # Errors
    "DrapeError",
    "EvaluationError",
    "PreconditionViolation",
    "WrongHostElementError",
    # Protocols
    "ContextProtocol",
    "ExpressionEvaluatorProtocol",
    "StructuralMergerProtocol",
]
