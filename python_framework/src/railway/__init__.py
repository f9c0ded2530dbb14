"""
Railway-Oriented Programming (ROP) Framework for Python.

Explicit, composable, functional error handling — no exceptions in business logic.

    from dataclasses import dataclass
    from railway import Result

    @dataclass(frozen=True)
    class NegativeAge:
        age: int

    def validate_age(age: int) -> Result[int, NegativeAge]:
        if age < 0:
            return Result.failure(NegativeAge(age))
        return Result.success(age)

    result = (
        Result.success({"name": "Alice", "age": 30})
        .flat_map(lambda d: validate_age(d["age"]))
        .map(lambda age: f"Valid user, age {age}")
    )
"""

from railway.result import Result, Success, Failure
from railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ResultAssertions",
]

__version__ = "0.1.0"
