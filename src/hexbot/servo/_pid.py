"""
PID controller used to smooth each servo's approach to its goal.
"""

from typing import Optional

import numpy as np


class PidController:
    """
    Stateful error-to-output mapper, one instance per servo.

    ``step`` is called once per settling tick with ``goal - current`` and
    returns the position change to apply. The controller remembers the
    accumulated error (I term) and the previous error (D term), so its output
    for a given error depends on every earlier call.

    The tick period is treated as the unit of time; gains are per tick.
    """

    def __init__(
        self,
        kp: float,
        ki: float = 0.0,
        kd: float = 0.0,
        integral_limit: Optional[float] = None,
        output_limit: Optional[float] = None,
    ):
        """
        Args:
            kp: Proportional gain.
            ki: Integral gain.
            kd: Derivative gain.
            integral_limit: Anti-windup clamp on the accumulated error. None disables it.
            output_limit: Clamp on the returned delta (max change per tick). None disables it.
        """
        self.kp = kp
        self.ki = ki
        self.kd = kd
        self.integral_limit = integral_limit
        self.output_limit = output_limit

        self.integral = 0.0
        self.last_error: Optional[float] = None

    def step(self, error: float) -> float:
        """Return the correction for ``error`` and update the controller memory."""
        p_term = self.kp * error

        self.integral += error
        if self.integral_limit is not None:
            self.integral = float(np.clip(self.integral, -self.integral_limit, self.integral_limit))
        i_term = self.ki * self.integral

        # No derivative kick on the first call
        previous = error if self.last_error is None else self.last_error
        d_term = self.kd * (error - previous)
        self.last_error = error

        output = p_term + i_term + d_term
        if self.output_limit is not None:
            output = float(np.clip(output, -self.output_limit, self.output_limit))
        return output

    def reset(self) -> None:
        """Clear accumulated integral and error history."""
        self.integral = 0.0
        self.last_error = None

    def __repr__(self) -> str:
        return f"PidController(kp={self.kp}, ki={self.ki}, kd={self.kd})"
