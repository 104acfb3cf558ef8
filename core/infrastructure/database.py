"""
Database utilities and transaction management.
"""

import contextlib
from typing import Iterator

from django.db import transaction


@contextlib.contextmanager
def atomic_operation() -> Iterator[None]:
    """
    Context manager wrapping one handler call in a database transaction.

    Usage:
        with atomic_operation():
            # Database operations
            pass
    """
    with transaction.atomic():
        yield
