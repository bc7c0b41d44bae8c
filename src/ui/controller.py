"""Submission lifecycle controller for the recommendation form.

``submit`` validates synchronously, emits ``Pending`` and schedules exactly one
request. Every submission takes a new sequence number and a response is only
applied while its number is still the latest one issued, so a slow earlier
request can never overwrite the outcome of a newer submission.

All failures end up as a ``Failure`` outcome; nothing raised by the client
reaches the caller.
"""

import asyncio
import logging
from collections.abc import Callable

from src.api.models import RecommendRequest
from src.form.state import FormState
from src.form.validator import validate
from src.ui.api_client import APIClient
from src.ui.errors import TRANSPORT_ERROR_MESSAGE, RecommendationError, TransportError
from src.ui.state import Failure, Idle, Pending, SubmissionOutcome, Success

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[SubmissionOutcome], None]


class SubmissionController:
    """Owns the outcome of the latest recommendation submission."""

    def __init__(self, client: APIClient | None = None):
        self._client = client or APIClient()
        self._sequence = 0
        self._outcome: SubmissionOutcome = Idle()
        self._subscribers: list[OutcomeCallback] = []

    @property
    def outcome(self) -> SubmissionOutcome:
        return self._outcome

    @property
    def sequence(self) -> int:
        """Number of the latest submission issued."""
        return self._sequence

    def subscribe(self, callback: OutcomeCallback) -> Callable[[], None]:
        """Register a callback invoked with every new outcome.

        Returns:
            A function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def submit(self, form: FormState) -> asyncio.Task | None:
        """Submit the form from inside a running event loop.

        Args:
            form: Snapshot of the current selections.

        Returns:
            The task carrying the request, or None if validation failed.

        Raises:
            RuntimeError: If called without a running event loop.
        """
        loop = asyncio.get_running_loop()
        started = self._begin(form)
        if started is None:
            return None
        sequence, payload = started
        return loop.create_task(self._request(sequence, payload))

    async def submit_and_wait(self, form: FormState) -> SubmissionOutcome:
        """Submit the form and wait for the request to settle.

        Returns:
            The current outcome once this submission has finished. If a newer
            submission started meanwhile, that submission's outcome is returned.
        """
        started = self._begin(form)
        if started is not None:
            await self._request(*started)
        return self._outcome

    def reset(self) -> None:
        """Return to Idle and ignore any request still in flight."""
        self._sequence += 1
        self._emit(Idle())

    def _begin(self, form: FormState) -> tuple[int, RecommendRequest] | None:
        self._sequence += 1
        sequence = self._sequence

        result = validate(form)
        if not result.ok:
            logger.info(f"Submission {sequence} rejected: {result.failure.value}")
            self._emit(Failure(sequence=sequence, reason=result.reason, error_kind="validation"))
            return None

        payload = form.to_payload()
        self._emit(Pending(sequence=sequence))
        return sequence, payload

    async def _request(self, sequence: int, payload: RecommendRequest) -> None:
        try:
            text = await self._client.recommend(payload)
        except RecommendationError as e:
            logger.error(f"Recommendation request {sequence} failed: {e}")
            outcome: SubmissionOutcome = Failure(
                sequence=sequence, reason=e.user_message, error_kind=e.kind
            )
        except asyncio.CancelledError:
            logger.warning(f"Recommendation request {sequence} was cancelled")
            self._apply(
                sequence,
                Failure(
                    sequence=sequence,
                    reason=TRANSPORT_ERROR_MESSAGE,
                    error_kind=TransportError.kind,
                ),
            )
            raise
        except Exception:
            logger.exception(f"Unexpected error in recommendation request {sequence}")
            outcome = Failure(
                sequence=sequence,
                reason=TRANSPORT_ERROR_MESSAGE,
                error_kind=TransportError.kind,
            )
        else:
            outcome = Success(sequence=sequence, text=text)

        self._apply(sequence, outcome)

    def _apply(self, sequence: int, outcome: SubmissionOutcome) -> bool:
        if sequence != self._sequence:
            logger.debug(
                f"Discarding stale result of submission {sequence} (latest is {self._sequence})"
            )
            return False
        self._emit(outcome)
        return True

    def _emit(self, outcome: SubmissionOutcome) -> None:
        self._outcome = outcome
        for callback in list(self._subscribers):
            try:
                callback(outcome)
            except Exception:
                logger.exception("Outcome subscriber failed")
