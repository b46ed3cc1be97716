"""HTTP surface for hosting a skill.

Provides a FastAPI endpoint that accepts the platform's JSON request, runs
it through the skill's router and returns the JSON response, plus two
read-only endpoints serving the interaction model exports.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from skillrouter import config
from skillrouter.exceptions import InvalidApplication, NoMatchingIntent, UnsupportedRequestType
from skillrouter.models import SkillRequest, SkillResponse
from skillrouter.router import Skill

log = logging.getLogger(__name__)


def create_app(skill: Skill) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info("Serving skill with %d intents", len(skill.intents))
        if not skill.application_id:
            log.warning("No application id configured, accepting requests from any application")
        yield

    app = FastAPI(title="Skill Router", lifespan=lifespan)
    app.state.skill = skill

    @app.post("/skill")
    async def handle_request(body: SkillRequest) -> Any:
        """Dispatch one platform request and return the skill's response."""
        try:
            result = skill.execute(body)
        except InvalidApplication as exc:
            raise HTTPException(status_code=403, detail=exc.message)
        except (UnsupportedRequestType, NoMatchingIntent) as exc:
            raise HTTPException(status_code=400, detail=exc.message)
        log.info("Handled %s (intent=%s)", body.request_type, body.intent_name)
        content = result.to_wire() if isinstance(result, SkillResponse) else result
        return JSONResponse(content=content)

    @app.get("/schema")
    async def get_schema():
        return Response(content=skill.export_schema(), media_type="application/json")

    @app.get("/utterances")
    async def get_utterances():
        return PlainTextResponse(skill.export_utterances())

    return app


# Module-level skill configured from the environment; register intents on it
skill = Skill(application_id=config.SKILL_APPLICATION_ID)
app = create_app(skill)

# If running directly, start the server (use uvicorn)
if __name__ == "__main__":
    import uvicorn
    config.configure_logging()
    uvicorn.run(app, host=config.HOST, port=config.PORT)
