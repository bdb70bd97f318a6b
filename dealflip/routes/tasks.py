"""Background task status route."""

from fastapi import APIRouter

from dealflip.tasks.celery_app import celery_app

router = APIRouter(tags=["tasks"])


@router.get("/tasks/{task_id}")
def task_status(task_id: str):
    """Poll a celery task state (used by the frontend to show scan completion)."""
    res = celery_app.AsyncResult(task_id)
    payload = {"taskId": task_id, "state": res.state, "ready": res.ready()}
    if res.ready():
        if res.successful():
            payload["result"] = res.result
        else:
            payload["error"] = str(res.result)
    return payload
