## Main application entry point
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from career_quest.settings import get_settings
from career_quest.content.routes import router as content_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _missing_fields(exc: RequestValidationError) -> list[str]:
    fields: list[str] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if loc and loc[0] not in fields:
            fields.append(loc[0])
    return fields


configure_logging(get_settings().log_level)

app = FastAPI(title="Career Quest")

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    if any(err.get("type") == "json_invalid" for err in exc.errors()):
        message = "Invalid JSON body"
    else:
        fields = _missing_fields(exc)
        message = f"Missing required fields: {', '.join(fields)}" if fields else "Missing request body"

    logger.info("Rejected %s: %s", request.url.path, message)
    return JSONResponse({"error": message}, status_code=400)

app.include_router(content_router)
