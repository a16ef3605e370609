"""Planning error types.

Empty results are never errors: they are reported as warnings on the
PlanOutput. These errors signal a generated plan that breaks its own
guarantees, which is a bug in the engine rather than a bad request.

Standard error codes:
- TIME_BUDGET_EXCEEDED: total_minutes is greater than available_minutes
- TOTAL_MISMATCH: total_minutes differs from the sum of visit and travel minutes
- VISIT_OUT_OF_RANGE: a stop's visit_minutes is outside the place's range
- UNKNOWN_PLACE: a stop references a place that is not a candidate
- DUPLICATE_STOP: a place appears more than once
"""


class PlanningInvariantError(RuntimeError):
    """Raised when a planning invariant is violated.

    Attributes:
        code: Error code (e.g., "TIME_BUDGET_EXCEEDED", "VISIT_OUT_OF_RANGE")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")
