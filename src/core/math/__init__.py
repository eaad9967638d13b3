"""
Core math modules

Числовые представления, проверки float и стратегии квадратного корня.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    is_valid_float,
    is_zero,
    validate_finite,
    validate_non_negative,
)

# Numeric Types
from src.core.math.numeric_types import (
    DEFAULT_NUMERIC_TYPE,
    FLOAT32_MAX,
    FLOAT64_MAX,
    Number,
    NumericType,
    absolute,
    to_float32,
    trunc_div,
    wrap_integral,
)

# Sqrt Strategies
from src.core.math.sqrt_strategies import (
    EXACT_SQRT,
    FAST_INV_SQRT_ITERATIONS,
    FAST_INV_SQRT_MAGIC,
    FAST_SQRT,
    ExactSqrt,
    FastSqrt,
    SqrtMethod,
    SqrtStrategy,
    exact_sqrt,
    fast_inv_sqrt,
    fast_sqrt,
    get_sqrt_strategy,
)

__all__ = [
    # Numerical Safeguards — Functions
    "is_valid_float",
    "is_zero",
    "validate_finite",
    "validate_non_negative",
    # Numeric Types — Constants
    "DEFAULT_NUMERIC_TYPE",
    "FLOAT32_MAX",
    "FLOAT64_MAX",
    # Numeric Types — Types
    "Number",
    "NumericType",
    # Numeric Types — Functions
    "absolute",
    "to_float32",
    "trunc_div",
    "wrap_integral",
    # Sqrt Strategies — Constants
    "FAST_INV_SQRT_ITERATIONS",
    "FAST_INV_SQRT_MAGIC",
    "EXACT_SQRT",
    "FAST_SQRT",
    # Sqrt Strategies — Types
    "ExactSqrt",
    "FastSqrt",
    "SqrtMethod",
    "SqrtStrategy",
    # Sqrt Strategies — Functions
    "exact_sqrt",
    "fast_inv_sqrt",
    "fast_sqrt",
    "get_sqrt_strategy",
]
