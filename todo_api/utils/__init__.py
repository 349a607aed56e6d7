from .datetime_utils import utc_now

__all__ = ["utc_now"]
