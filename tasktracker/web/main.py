"""
HTTP interface for the task tracker
"""

from typing import Optional
from fastapi import FastAPI, Request, Header
from fastapi.responses import JSONResponse
from tasktracker.services.analytics_service import AnalyticsService
from tasktracker.services.task_manager import TaskManager
from tasktracker.services.task_query_service import TaskQueryService
from tasktracker.store.base_store import TaskStore
from tasktracker.store.factory import create_store
from tasktracker.utils.date_utils import get_current_datetime
from tasktracker.utils.error_handler import handle_error, TaskTrackerError, ValidationError
from tasktracker.utils.logger import logger


class TaskTracker:
    """Services sharing one task store"""

    def __init__(self, store: Optional[TaskStore] = None):
        self.store = store if store is not None else create_store()
        self.query_service = TaskQueryService(self.store)
        self.task_manager = TaskManager(self.store)
        self.analytics_service = AnalyticsService(self.store)
        self.logger = logger


class AuthenticationRequired(Exception):
    """Request carries no user identity"""


def _require_user(user_id: Optional[str]) -> str:
    if not user_id or not user_id.strip():
        raise AuthenticationRequired()
    return user_id.strip()


async def _json_body(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        raise ValidationError("body", "Request body must be valid JSON")
    if not isinstance(body, dict):
        raise ValidationError("body", "Request body must be a JSON object")
    return body


def create_app(tracker: Optional[TaskTracker] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        tracker: Services to expose (optional, built from settings by default)
    """
    tracker = tracker or TaskTracker()
    app = FastAPI(title="Task Tracker")
    app.state.tracker = tracker

    @app.exception_handler(AuthenticationRequired)
    async def authentication_required(request: Request, exc: AuthenticationRequired):
        return JSONResponse(
            status_code=401,
            content={"status": False, "msg": "Authentication required"},
        )

    @app.exception_handler(TaskTrackerError)
    async def task_tracker_error(request: Request, exc: TaskTrackerError):
        error_response = handle_error(exc)
        return JSONResponse(status_code=error_response.status_code, content=error_response.to_json())

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": True,
            "msg": "Server is running",
            "timestamp": get_current_datetime().isoformat(),
        }

    @app.get("/api/tasks")
    async def get_tasks(request: Request, x_user_id: Optional[str] = Header(None)):
        """List tasks with filtering, search and pagination"""
        owner_id = _require_user(x_user_id)
        page = await tracker.query_service.search_tasks(owner_id, dict(request.query_params))
        return {"status": True, "msg": "Tasks retrieved successfully", "data": page.to_json()}

    @app.get("/api/tasks/stats")
    async def get_task_stats(x_user_id: Optional[str] = Header(None)):
        """Task statistics for the caller"""
        owner_id = _require_user(x_user_id)
        stats = await tracker.analytics_service.get_task_stats(owner_id)
        return {
            "status": True,
            "msg": "Task statistics retrieved successfully",
            "stats": stats.model_dump(by_alias=True),
        }

    @app.get("/api/tasks/{task_id}")
    async def get_task(task_id: str, x_user_id: Optional[str] = Header(None)):
        owner_id = _require_user(x_user_id)
        task = await tracker.query_service.get_task(owner_id, task_id)
        return {"status": True, "msg": "Task retrieved successfully", "task": task.to_json()}

    @app.post("/api/tasks", status_code=201)
    async def post_task(request: Request, x_user_id: Optional[str] = Header(None)):
        owner_id = _require_user(x_user_id)
        body = await _json_body(request)
        task = await tracker.task_manager.create_task(owner_id, body)
        return {"status": True, "msg": "Task created successfully", "task": task.to_json()}

    @app.put("/api/tasks/{task_id}")
    async def put_task(task_id: str, request: Request, x_user_id: Optional[str] = Header(None)):
        owner_id = _require_user(x_user_id)
        body = await _json_body(request)
        task = await tracker.task_manager.update_task(owner_id, task_id, body)
        return {"status": True, "msg": "Task updated successfully", "task": task.to_json()}

    @app.delete("/api/tasks/{task_id}")
    async def delete_task(task_id: str, x_user_id: Optional[str] = Header(None)):
        owner_id = _require_user(x_user_id)
        await tracker.task_manager.delete_task(owner_id, task_id)
        return {"status": True, "msg": "Task deleted successfully"}

    return app


# Global application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    from tasktracker.config.settings import settings
    uvicorn.run(app, host=settings.WEB_HOST, port=settings.WEB_PORT)
