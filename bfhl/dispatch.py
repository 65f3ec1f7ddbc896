"""
Classify a /bfhl request body into exactly one operation, validate it and run it.

The body must be a JSON object with a single key. The key selects the
operation and its value is the operand:

    {"fibonacci": 7}            -> [0, 1, 1, 2, 3, 5, 8]
    {"prime": [2, 4, 7]}        -> [2, 7]
    {"lcm": [4, 6]}             -> 12
    {"hcf": [12, 18]}           -> 6
    {"AI": "Capital of France"} -> "Paris"
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Union

from bfhl.ask_ai import ask_ai
from bfhl.numeric import fibonacci, filter_primes, hcf_of, lcm_of
from bfhl.utils.config import Settings
from bfhl.utils.validation import (
    ValidationResult,
    validate_fibonacci,
    validate_positive_integers,
    validate_prime,
    validate_question,
)

logger = logging.getLogger(__name__)

AskFn = Callable[[str, Settings], str]


# ===== Errors =====

class RequestError(Exception):
    """A client error that maps to a 4xx envelope."""

    kind = "RequestError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidShapeError(RequestError):
    kind = "InvalidShape"


class UnknownOperationError(RequestError):
    kind = "UnknownOperation"


class InvalidOperandError(RequestError):
    kind = "InvalidOperand"


# ===== Operations =====

class Operation(str, Enum):
    FIBONACCI = "fibonacci"
    PRIME = "prime"
    LCM = "lcm"
    HCF = "hcf"
    AI = "AI"


@dataclass(frozen=True)
class FibonacciRequest:
    n: int


@dataclass(frozen=True)
class PrimeRequest:
    values: List[Any]


@dataclass(frozen=True)
class LcmRequest:
    values: List[int]


@dataclass(frozen=True)
class HcfRequest:
    values: List[int]


@dataclass(frozen=True)
class AIRequest:
    question: str


OperationRequest = Union[FibonacciRequest, PrimeRequest, LcmRequest, HcfRequest, AIRequest]


def _check(result: ValidationResult) -> None:
    if not result:
        raise InvalidOperandError(result.errors[0])


def _parse_fibonacci(value: Any, settings: Settings) -> OperationRequest:
    _check(validate_fibonacci(value, settings.fibonacci_max))
    return FibonacciRequest(n=int(value))


def _parse_prime(value: Any, settings: Settings) -> OperationRequest:
    _check(validate_prime(value))
    return PrimeRequest(values=list(value))


def _parse_lcm(value: Any, settings: Settings) -> OperationRequest:
    _check(validate_positive_integers(value, Operation.LCM.value))
    return LcmRequest(values=[int(v) for v in value])


def _parse_hcf(value: Any, settings: Settings) -> OperationRequest:
    _check(validate_positive_integers(value, Operation.HCF.value))
    return HcfRequest(values=[int(v) for v in value])


def _parse_ai(value: Any, settings: Settings) -> OperationRequest:
    _check(validate_question(value))
    return AIRequest(question=value)


_PARSERS: Dict[Operation, Callable[[Any, Settings], OperationRequest]] = {
    Operation.FIBONACCI: _parse_fibonacci,
    Operation.PRIME: _parse_prime,
    Operation.LCM: _parse_lcm,
    Operation.HCF: _parse_hcf,
    Operation.AI: _parse_ai,
}


def parse_request(body: Any, settings: Settings) -> OperationRequest:
    """
    Turn a decoded request body into a validated operation request.

    Args:
        body: Decoded JSON body
        settings: Service settings (for the fibonacci bound)

    Returns:
        One of the *Request dataclasses

    Raises:
        InvalidShapeError: If body is not an object with exactly one key
        UnknownOperationError: If the key is not a known selector
        InvalidOperandError: If the operand fails validation
    """
    if not isinstance(body, dict) or len(body) != 1:
        raise InvalidShapeError("Request must contain exactly one key")

    (key, value), = body.items()

    try:
        operation = Operation(key)
    except ValueError:
        raise UnknownOperationError("Invalid key") from None

    return _PARSERS[operation](value, settings)


def execute(request: OperationRequest, settings: Settings, ask_fn: AskFn = ask_ai) -> Any:
    """
    Run a validated operation request.

    Args:
        request: Parsed operation request
        settings: Service settings
        ask_fn: AI delegate (injectable for tests)

    Returns:
        Operation result, ready to be placed in the response envelope
    """
    if isinstance(request, FibonacciRequest):
        return fibonacci(request.n)
    if isinstance(request, PrimeRequest):
        return filter_primes(request.values)
    if isinstance(request, LcmRequest):
        return lcm_of(request.values)
    if isinstance(request, HcfRequest):
        return hcf_of(request.values)
    if isinstance(request, AIRequest):
        return ask_fn(request.question, settings)
    raise TypeError(f"Unsupported operation request: {type(request).__name__}")


def dispatch_request(body: Any, settings: Settings, ask_fn: AskFn = ask_ai) -> Any:
    """
    Parse, validate and execute a /bfhl request body.

    Raises:
        RequestError: On any client error (see parse_request)
    """
    request = parse_request(body, settings)
    logger.debug(f"Dispatching {type(request).__name__}")
    return execute(request, settings, ask_fn)
