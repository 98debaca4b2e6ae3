"""
Help requests module.

Handles help requests, urgency ranking and help offers.

Public API:
- IHelpRequestService: Interface for help request operations
- HelpRequest: Stored request with requester snapshot
- CreateHelpRequestRequest: Request to ask for help
- urgency_rank: Prefix-based urgency ordering
"""

from .interfaces import IHelpRequestService
from .models import (
    HelpRequest,
    CreateHelpRequestRequest,
    URGENCY_RANKS,
    UNRANKED_URGENCY,
    urgency_rank,
)
from .exceptions import HelpRequestNotFoundError

__all__ = [
    # Interface
    "IHelpRequestService",
    # Models
    "HelpRequest",
    "CreateHelpRequestRequest",
    "URGENCY_RANKS",
    "UNRANKED_URGENCY",
    "urgency_rank",
    # Exceptions
    "HelpRequestNotFoundError",
]
