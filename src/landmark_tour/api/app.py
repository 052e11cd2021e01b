"""FastAPI entrypoint for the Landmark Tour planner."""

from __future__ import annotations

import logging
from typing import Dict, List

from fastapi import FastAPI, HTTPException

from landmark_tour.adapters.io.exports import serialize_tour_plan
from landmark_tour.api.jobs import JobQueue
from landmark_tour.api.schemas import TourPayload
from landmark_tour.core.config import load_solver_settings
from landmark_tour.core.errors import MissingIntermediateEdgeError, ValidationError
from landmark_tour.core.models import TourInputs, TourPlan
from landmark_tour.core.normalization import build_meta
from landmark_tour.modules.attractiveness.scoring import coerce_edge, coerce_factor_map
from landmark_tour.pipeline.steps import check_landmark_count, run_graph, run_legs, run_solve

LOG = logging.getLogger(__name__)

app = FastAPI(title="Landmark Tour API")

JOB_QUEUE = JobQueue()


def plan_tour(payload: TourPayload) -> Dict[str, object]:
    settings = load_solver_settings()
    inputs = TourInputs(
        edges=[coerce_edge(edge.to_record()) for edge in payload.edges],
        interest=coerce_factor_map(payload.interest, name="interest"),
        load=coerce_factor_map(payload.load, name="load"),
    )
    graph = run_graph(inputs)
    check_landmark_count(payload.expected_landmarks, graph)
    result = run_solve(
        graph,
        start=payload.start,
        strategy=payload.strategy,
        max_landmarks=settings.max_landmarks,
    )
    plan = TourPlan(
        landmarks=list(graph.landmarks()),
        result=result,
        legs=run_legs(graph, result),
        strategy=payload.strategy,
    )
    return serialize_tour_plan(plan, meta=build_meta(payload.start))


@app.get("/api/health")
def health() -> Dict[str, object]:
    return {"status": "ok", "meta": build_meta(load_solver_settings().start)}


@app.post("/api/tour")
def solve_tour(payload: TourPayload) -> Dict[str, object]:
    try:
        return plan_tour(payload)
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except MissingIntermediateEdgeError as exc:
        raise HTTPException(
            status_code=422,
            detail={"message": str(exc), "from": exc.source, "to": exc.target},
        ) from exc
    except Exception as exc:
        LOG.exception("tour solve failed")
        raise HTTPException(status_code=500, detail=f"tour solve failed: {exc}") from exc


@app.post("/api/jobs/tour")
def create_tour_job(payload: TourPayload) -> Dict[str, object]:
    job = JOB_QUEUE.submit("tour", plan_tour, payload)
    return job.to_dict()


@app.get("/api/jobs")
def list_jobs() -> Dict[str, List[Dict[str, object]]]:
    return {"items": [job.to_dict() for job in JOB_QUEUE.list()]}


@app.get("/api/jobs/{job_id}")
def get_job(job_id: str) -> Dict[str, object]:
    job = JOB_QUEUE.get(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job.to_dict(include_result=True)


@app.post("/api/jobs/{job_id}/cancel")
def cancel_job(job_id: str) -> Dict[str, object]:
    job = JOB_QUEUE.cancel(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job.to_dict(include_result=True)
