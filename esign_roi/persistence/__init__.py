from .client import create_supabase_client
from .sessions import SavedCalculation, SessionStore
from .tracking import CalculationTracker, RequestMetadata, TrackingOutcome, get_client_ip

__all__ = [
    "CalculationTracker",
    "RequestMetadata",
    "SavedCalculation",
    "SessionStore",
    "TrackingOutcome",
    "create_supabase_client",
    "get_client_ip",
]
