import asyncio
import uuid
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone

from casebrief.config.settings import Settings
from casebrief.exceptions import AnalysisError
from casebrief.extraction.base import BaseAnalysisClient
from casebrief.extraction.exceptions import TransportFailure
from casebrief.extraction.factory import AnalysisClientFactory
from casebrief.extraction.models import ExtractionResult
from casebrief.extraction.schema import ExtractionSchema
from casebrief.flow.progress import (
    PROGRESS_CAP,
    PROGRESS_INTERVAL_SECONDS,
    PROGRESS_STEP,
    ProgressTicker,
)
from casebrief.flow.session import AnalysisSession, AnalysisStatus
from casebrief.logging.logger import Log
from casebrief.report.models import Report
from casebrief.report.projection import project
from casebrief.upload.encoder import DocumentEncoder
from casebrief.upload.models import UploadCandidate
from casebrief.upload.validation import MAX_UPLOAD_BYTES, validate_candidate

SessionListener = Callable[[AnalysisSession], None]

COMPLETE_PROGRESS = 100


class AnalysisFlowController:
    """State machine for one analysis session.

    Flow: idle -> analyzing -> complete | error, with reset back to idle.
    At most one analysis runs at a time. Each run carries a generation
    token; results from a run whose token is no longer current are dropped.
    """

    def __init__(
        self,
        *,
        analysis_client: BaseAnalysisClient,
        encoder: DocumentEncoder | None = None,
        schema: ExtractionSchema | None = None,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
        progress_interval_seconds: float = PROGRESS_INTERVAL_SECONDS,
        progress_step: int = PROGRESS_STEP,
        progress_cap: int = PROGRESS_CAP,
        deadline_seconds: float | None = None,
        default_jurisdiction: str | None = None,
    ) -> None:
        self._analysis_client = analysis_client
        self._encoder = encoder if encoder is not None else DocumentEncoder()
        self._schema = schema
        self._max_upload_bytes = max_upload_bytes
        self._progress_interval_seconds = progress_interval_seconds
        self._progress_step = progress_step
        self._progress_cap = progress_cap
        self._deadline_seconds = deadline_seconds
        self._default_jurisdiction = default_jurisdiction

        self._session = AnalysisSession()
        self._listeners: list[SessionListener] = []
        self._generation = 0
        self._task: asyncio.Task[None] | None = None
        self._ticker: ProgressTicker | None = None

    @property
    def session(self) -> AnalysisSession:
        return self._session

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a listener called with every new session.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def submit(
        self,
        candidate: UploadCandidate | None,
        *,
        jurisdiction: str | None = None,
    ) -> asyncio.Task[None] | None:
        """Start analysing a candidate file.

        Must be called from a running event loop. The session moves to
        analyzing before this returns; any previous result is discarded.

        Returns:
            The task running the analysis, or None if the submit was
            rejected (no file, or an analysis already in flight).
        """
        if candidate is None:
            Log.warning("Submit ignored: no file selected")
            return None
        if self._session.is_analyzing:
            Log.warning(
                f"Submit ignored: analysis of {self._session.document_name} in flight"
            )
            return None
        loop = asyncio.get_running_loop()

        self._generation += 1
        token = self._generation
        Log.info(f"Analysis {token} started for {candidate.original_name}")

        # Ticker and run exist before listeners see the analyzing session,
        # so a reset from a listener cancels both.
        self._ticker = ProgressTicker(
            lambda value: self._advance_progress(token, value),
            interval_seconds=self._progress_interval_seconds,
            step=self._progress_step,
            cap=self._progress_cap,
        )
        self._ticker.start()
        task = loop.create_task(
            self._run(token, candidate, jurisdiction or self._default_jurisdiction)
        )
        self._task = task
        self._publish(
            AnalysisSession(
                status=AnalysisStatus.ANALYZING,
                progress=0,
                document_name=candidate.original_name,
                analysis_id=str(uuid.uuid4()),
            )
        )
        return task

    def reset(self) -> AnalysisSession:
        """Return to idle from any state, cancelling an in-flight analysis."""
        if self._session.is_analyzing:
            Log.info(f"Analysis {self._generation} cancelled by reset")
        self._generation += 1
        self._stop_ticker()
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        if self._session != AnalysisSession():
            self._publish(AnalysisSession())
        return self._session

    async def wait(self) -> AnalysisSession:
        """Wait for the current analysis, if any, and return the session."""
        task = self._task
        if task is not None:
            await asyncio.wait({task})
        return self._session

    async def _run(
        self,
        token: int,
        candidate: UploadCandidate,
        jurisdiction: str | None,
    ) -> None:
        try:
            result, report = await self._execute(candidate, jurisdiction)
        except asyncio.CancelledError:
            if self._is_current(token):
                self._fail(token, "Cancelled", "The analysis was cancelled.")
            raise
        except AnalysisError as exc:
            self._fail(token, exc.kind, exc.user_message)
        except Exception as exc:
            Log.exception(f"Analysis {token} failed unexpectedly: {exc!r}")
            self._fail(token, "UnexpectedError", AnalysisError.default_message)
        else:
            self._complete(token, result, report)

    async def _execute(
        self,
        candidate: UploadCandidate,
        jurisdiction: str | None,
    ) -> tuple[ExtractionResult, Report]:
        validate_candidate(candidate, self._max_upload_bytes)
        payload = self._encoder.encode(candidate)
        call = self._analysis_client.analyze(
            payload, self._schema, jurisdiction=jurisdiction
        )
        if self._deadline_seconds is None:
            result = await call
        else:
            try:
                result = await asyncio.wait_for(call, self._deadline_seconds)
            except TimeoutError as exc:
                raise TransportFailure(
                    f"Analysis timed out after {self._deadline_seconds:g} seconds"
                ) from exc
        return result, project(result)

    def _complete(self, token: int, result: ExtractionResult, report: Report) -> None:
        if not self._is_current(token):
            Log.debug(f"Dropping stale result of analysis {token}")
            return
        if not self._finish_progress(token):
            Log.debug(f"Analysis {token} superseded before completion")
            return
        self._publish(
            replace(
                self._session,
                status=AnalysisStatus.COMPLETE,
                result=result,
                report=report,
                completed_at=datetime.now(timezone.utc),
            )
        )
        Log.info(f"Analysis {token} complete")

    def _fail(self, token: int, kind: str, reason: str) -> None:
        if not self._is_current(token):
            Log.debug(f"Dropping stale failure of analysis {token}: {kind}")
            return
        if not self._finish_progress(token):
            Log.debug(f"Analysis {token} superseded before failure: {kind}")
            return
        self._publish(
            replace(
                self._session,
                status=AnalysisStatus.ERROR,
                result=None,
                report=None,
                error_kind=kind,
                error_reason=reason,
            )
        )
        Log.error(f"Analysis {token} failed ({kind}): {reason}")

    def _advance_progress(self, token: int, value: int) -> None:
        if not self._is_current(token):
            return
        if value <= self._session.progress:
            return
        self._publish(replace(self._session, progress=value))

    def _finish_progress(self, token: int) -> bool:
        """Publish progress 100; False if a listener reset or resubmitted meanwhile."""
        self._stop_ticker()
        self._publish(replace(self._session, progress=COMPLETE_PROGRESS))
        return self._is_current(token)

    def _is_current(self, token: int) -> bool:
        return token == self._generation and self._session.is_analyzing

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

    def _publish(self, session: AnalysisSession) -> None:
        self._session = session
        for listener in list(self._listeners):
            try:
                listener(session)
            except Exception as exc:
                # Listener errors are logged; the flow and other listeners carry on
                Log.exception(f"Session listener {listener!r} failed: {exc!r}")


def build_controller(settings: Settings) -> AnalysisFlowController:
    """Build an AnalysisFlowController with all required adapters."""
    return AnalysisFlowController(
        analysis_client=AnalysisClientFactory.create(settings),
        encoder=DocumentEncoder(),
        max_upload_bytes=settings.max_upload_bytes,
        progress_interval_seconds=settings.progress_interval_seconds,
        progress_step=settings.progress_step,
        progress_cap=settings.progress_cap,
        deadline_seconds=settings.analysis_deadline_seconds,
        default_jurisdiction=settings.default_jurisdiction,
    )
