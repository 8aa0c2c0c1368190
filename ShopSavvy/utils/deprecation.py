"""
Deprecation helpers for field names kept from the first API revision.
"""

import warnings


def warn_deprecated(old_name: str, new_name: str) -> None:
    """Emit a DeprecationWarning pointing the caller at the renamed field"""
    warnings.warn(
        f"'{old_name}' is deprecated, use '{new_name}' instead",
        DeprecationWarning,
        stacklevel=3,
    )
