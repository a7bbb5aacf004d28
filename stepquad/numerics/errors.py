"""Exceptions raised by the integrators."""


class InvalidStepError(ValueError):
    """A step size that is not a positive number was supplied.

    Attributes:
        step: The rejected step size.
    """

    def __init__(self, step: float, name: str = "step"):
        self.step = step
        super().__init__(f"{name} must be greater than 0, got {step!r}")
