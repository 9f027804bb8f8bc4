"""HTTP entrypoint the game server talks to."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from arena.snapshot import SnapshotError
from game_runner import TurnRunner
from infra.logger import ensure_logging, get_logger
from infra.settings import Settings

from .schemas import ArenaUpdate

READY_MESSAGE = "Let the battle begin!"

log = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI app.

    ``GET /`` is a readiness probe; ``POST /`` takes an arena update and
    answers with the action code as plain text.
    """
    settings = settings or Settings.from_env()
    ensure_logging(level=settings.log_level, json=settings.log_json)
    app = FastAPI(title="arena-bot")
    app.state.settings = settings
    app.state.runner = TurnRunner.from_settings(settings)

    @app.exception_handler(RequestValidationError)
    async def reject_malformed(request: Request, exc: RequestValidationError):
        log.warning("failed to decode ArenaUpdate in request body: %s", exc.errors())
        return PlainTextResponse("", status_code=500)

    @app.exception_handler(SnapshotError)
    async def reject_snapshot(request: Request, exc: SnapshotError):
        log.warning("unusable arena snapshot: %s", exc)
        return PlainTextResponse("", status_code=500)

    @app.get("/", response_class=PlainTextResponse)
    def ready():
        return READY_MESSAGE

    @app.post("/", response_class=PlainTextResponse)
    def play(update: ArenaUpdate, request: Request):
        log.info("IN: %s", update.model_dump(by_alias=True))
        runner: TurnRunner = request.app.state.runner
        return runner.play(update.to_snapshot(), update.self_id)

    return app


app = create_app()
