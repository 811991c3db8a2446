"""
Custom exception hierarchy for uniformcolors.

## Exception Hierarchy

```
UniformColorsError (base)
├── RegistryError
│   ├── DuplicateKeyError
│   └── KeyNotFoundError
├── CopyError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `UniformColorsError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Looking up an unregistered category

```python
from uniformcolors.exceptions import KeyNotFoundError

try:
    registry.get("science")
except KeyNotFoundError as e:
    print(e.get_full_message())

# No prototype registered for 'science'.
#
# Suggestion: Registered prototypes: red, green, blue
```

See `uniformcolors.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import UniformColorsError
from .cloning import CopyError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .registry import DuplicateKeyError, KeyNotFoundError, RegistryError

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Copy
    "CopyError",
    # Registry
    "DuplicateKeyError",
    "KeyNotFoundError",
    "RegistryError",
    # Base
    "UniformColorsError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
