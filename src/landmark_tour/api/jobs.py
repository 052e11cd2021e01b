"""In-memory job queue for tour solves."""

from __future__ import annotations

import threading
import time
import uuid
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


@dataclass
class Job:
    id: str
    kind: str
    status: str
    created_at: float
    updated_at: float
    result: Optional[dict] = None
    error: Optional[str] = None
    cancel_event: threading.Event = field(default_factory=threading.Event)
    future: Optional[Future] = None

    def to_dict(self, *, include_result: bool = False) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "kind": self.kind,
            "status": self.status,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "error": self.error,
        }
        if include_result:
            payload["result"] = self.result
        return payload


class JobQueue:
    """Runs each job on a worker thread.

    A solve cannot be interrupted once started. Cancelling a queued job skips
    it; cancelling a running job discards its result.
    """

    def __init__(self, *, max_workers: int = 2) -> None:
        self._lock = threading.Lock()
        self._jobs: Dict[str, Job] = {}
        self._executor = ThreadPoolExecutor(max_workers=max_workers)

    def submit(self, kind: str, target: Callable[..., dict], *args: Any, **kwargs: Any) -> Job:
        now = time.time()
        job = Job(id=uuid.uuid4().hex, kind=kind, status="queued", created_at=now, updated_at=now)
        with self._lock:
            self._jobs[job.id] = job
        job.future = self._executor.submit(self._run_job, job.id, target, *args, **kwargs)
        return job

    def _run_job(self, job_id: str, target: Callable[..., dict], *args: Any, **kwargs: Any) -> None:
        job = self.get(job_id)
        if not job:
            return
        if job.cancel_event.is_set():
            self.update(job_id, status="cancelled")
            return
        self.update(job_id, status="running")
        try:
            result = target(*args, **kwargs)
        except Exception as exc:
            self.update(job_id, status="failed", error=str(exc))
            return
        if job.cancel_event.is_set():
            self.update(job_id, status="cancelled")
        else:
            job.result = result
            self.update(job_id, status="completed")

    def update(self, job_id: str, *, status: Optional[str] = None, error: Optional[str] = None) -> None:
        with self._lock:
            job = self._jobs.get(job_id)
            if not job:
                return
            if status:
                job.status = status
            if error:
                job.error = error
            job.updated_at = time.time()

    def cancel(self, job_id: str) -> Optional[Job]:
        with self._lock:
            job = self._jobs.get(job_id)
            if not job:
                return None
            job.cancel_event.set()
        return job

    def get(self, job_id: str) -> Optional[Job]:
        with self._lock:
            return self._jobs.get(job_id)

    def list(self) -> List[Job]:
        with self._lock:
            return sorted(self._jobs.values(), key=lambda item: item.created_at, reverse=True)

    def wait(self, job_id: str, timeout: Optional[float] = None) -> Optional[Job]:
        job = self.get(job_id)
        if job and job.future is not None:
            job.future.result(timeout=timeout)
        return job
