"""Exception types for inflow boundary setup."""


class ValidationError(ValueError):
    """Raised when a boundary's option set is malformed or dimensionally inconsistent."""


class ConvergenceError(RuntimeError):
    """Raised when the stagnation enthalpy iteration exhausts its iteration cap.

    Fatal: there is no usable inflow state to hand to the flow solver.
    """

    def __init__(self, message: str, iterations: int, residual: float):
        super().__init__(message)
        self.iterations = iterations
        self.residual = residual
