"""Record adapters - Plain mapping <-> domain Account translation."""

from .models import AccountRecord, dump_account, load_account

__all__ = ["AccountRecord", "dump_account", "load_account"]
