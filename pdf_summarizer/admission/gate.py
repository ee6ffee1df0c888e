from pdf_summarizer.config.settings import Settings
from pdf_summarizer.database.repositories.usage_quota_repository import UsageQuotaRepository
from pdf_summarizer.logging.logger import Log


class AdmissionGate:
    """Caps how many pipeline runs an identity may start per quota window.

    The counter lives in the database and is checked and incremented in one
    statement. Any failure to reach it denies the run.
    """

    def __init__(
        self,
        quota_repo: UsageQuotaRepository,
        max_runs: int,
        window_seconds: int,
    ) -> None:
        self._quota_repo = quota_repo
        self._max_runs = max_runs
        self._window_seconds = window_seconds

    async def check_admission(self, identity: str) -> bool:
        """Return True and count one run if the identity is under quota."""
        if not identity:
            Log.warning("Admission denied: empty identity")
            return False
        if self._max_runs <= 0:
            Log.warning(f"Admission denied for {identity}: quota ceiling is {self._max_runs}")
            return False
        if self._window_seconds <= 0:
            Log.warning(f"Admission denied for {identity}: quota window is {self._window_seconds}s")
            return False

        try:
            run_count = await self._quota_repo.try_consume(
                identity,
                max_runs=self._max_runs,
                window_seconds=self._window_seconds,
            )
        except Exception as exc:
            Log.error(f"Admission denied for {identity}: quota store unavailable: {exc}")
            return False

        if run_count is None:
            Log.warning(
                f"Admission denied for {identity}: "
                f"{self._max_runs} runs per {self._window_seconds}s reached"
            )
            return False

        Log.info(f"Admission granted for {identity} ({run_count}/{self._max_runs})")
        return True


def build_admission_gate(settings: Settings) -> AdmissionGate:
    return AdmissionGate(
        quota_repo=UsageQuotaRepository(),
        max_runs=settings.quota_max_runs,
        window_seconds=settings.quota_window_seconds,
    )
