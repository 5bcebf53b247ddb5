"""
Exceptions raised around the picker core.

```
ChromaPickError (base)
└── ConfigurationError
    ├── ConfigFileInvalidError   (empty, unreadable or not JSON)
    └── ConfigValidationError    (JSON fine, a value is wrong)
```

The color core (codec, spectrum, presets, picker session) has no error
path at all: malformed input is absorbed there. These exceptions cover the
config file, which the CLI and the TUI host read and write.

```python
from chromapick.exceptions import ConfigurationError

try:
    config = PickerConfig.load_or_default(path)
except ConfigurationError as e:
    print(e.get_full_message())
```
"""

from .base import ChromaPickError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    "ChromaPickError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "format_error_for_display",
    "wrap_pydantic_error",
]
