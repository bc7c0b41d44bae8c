"""UI module for the Streamlit recommendation form."""

from src.ui.api_client import APIClient
from src.ui.controller import SubmissionController
from src.ui.errors import DecodingError, RecommendationError, ServiceError, TransportError
from src.ui.state import (
    Failure,
    Idle,
    OutcomeStatus,
    Pending,
    SubmissionOutcome,
    Success,
)
from src.ui.utils import format_price, split_into_columns

__all__ = [
    "APIClient",
    "DecodingError",
    "Failure",
    "Idle",
    "OutcomeStatus",
    "Pending",
    "RecommendationError",
    "ServiceError",
    "SubmissionController",
    "SubmissionOutcome",
    "Success",
    "TransportError",
    "format_price",
    "split_into_columns",
]
