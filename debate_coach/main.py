import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import models, prompts, services
from .config import get_settings
from .exceptions import HandlerError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One gateway for the whole process, handed to routes via get_gateway.
    app.state.gateway = services.CompletionGateway.from_settings(get_settings())
    yield


app = FastAPI(title="Debate Coach API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


ERROR_MESSAGES = {
    "/api/debate": "Something went wrong with the AI response",
    "/api/topic-knowledge": "Failed to generate topic knowledge",
    "/api/prep-materials": "Failed to generate prep materials",
    "/api/generate-speech": "Failed to generate speech",
    "/api/judge-speech": "Failed to judge speech",
    "/api/final-rfd": "Failed to generate RFD",
}


@app.exception_handler(HandlerError)
async def handler_error(request: Request, exc: HandlerError):
    return JSONResponse(status_code=500, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error(request: Request, exc: RequestValidationError):
    # Malformed bodies fail like any other request; details stay in the log.
    logger.error("Invalid request body for %s: %s", request.url.path, exc.errors())
    message = ERROR_MESSAGES.get(request.url.path, "Invalid request")
    return JSONResponse(status_code=500, content={"error": message})


def get_gateway(request: Request) -> services.CompletionGateway:
    return request.app.state.gateway


# Root route
@app.get("/")
def read_root():
    return {"message": "Welcome to the Debate Coach API"}


# ---- DEBATE TURN ----
@app.post("/api/debate", response_model=models.DebateReply)
def debate(payload: models.DebateRequest, gateway=Depends(get_gateway)):
    """Reply as the AI opponent, continuing the caller's conversation if any."""
    try:
        request = prompts.build_debate_request(
            motion=payload.motion,
            role=payload.role,
            messages=payload.messages,
            system_prompt=payload.systemPrompt,
            max_tokens=payload.maxTokens,
            temperature=payload.temperature,
        )
        result = gateway.complete(request)
        return models.DebateReply(reply=result.text)
    except Exception:
        logger.exception("Debate completion failed")
        raise HandlerError(ERROR_MESSAGES["/api/debate"])


# ---- TOPIC KNOWLEDGE ----
@app.post("/api/topic-knowledge", response_model=models.TopicKnowledge)
def topic_knowledge(payload: models.TopicKnowledgeRequest, gateway=Depends(get_gateway)):
    try:
        result = gateway.complete(prompts.build_topic_knowledge_request(payload.motion))
        return models.TopicKnowledge(knowledge=result.text)
    except Exception:
        logger.exception("Topic knowledge error")
        raise HandlerError(ERROR_MESSAGES["/api/topic-knowledge"])


# ---- PREP MATERIALS ----
@app.post("/api/prep-materials", response_model=models.PrepMaterials)
def prep_materials(payload: models.PrepMaterialsRequest, gateway=Depends(get_gateway)):
    try:
        request = prompts.build_prep_materials_request(
            motion=payload.motion,
            user_team=payload.userTeam,
            format=payload.format,
        )
        result = gateway.complete(request)
        return models.PrepMaterials(materials=result.text)
    except Exception:
        logger.exception("Prep materials error")
        raise HandlerError(ERROR_MESSAGES["/api/prep-materials"])


# ---- SPEECH GENERATION ----
@app.post("/api/generate-speech", response_model=models.GeneratedSpeech)
def generate_speech(payload: models.SpeechRequest, gateway=Depends(get_gateway)):
    try:
        request = prompts.build_speech_request(
            motion=payload.motion,
            speaker_role=payload.speakerRole,
            speech_type=payload.speechType,
            team_side=payload.teamSide,
            format=payload.format,
            debate_history=payload.debateHistory,
            difficulty=payload.difficulty,
        )
        result = gateway.complete(request)
        return models.GeneratedSpeech(speech=result.text)
    except Exception:
        logger.exception("Speech generation error")
        raise HandlerError(ERROR_MESSAGES["/api/generate-speech"])


# ---- SPEECH JUDGING ----
@app.post("/api/judge-speech", response_model=models.JudgeScore)
def judge_speech(payload: models.JudgeSpeechRequest, gateway=Depends(get_gateway)):
    """Score a single speech; the parsed score is returned unwrapped."""
    try:
        request = prompts.build_judge_request(
            speaker=payload.speaker,
            speech_type=payload.speechType,
            content=payload.content,
        )
        result = gateway.complete(request)
        return services.parse_judge_score(result.text)
    except Exception:
        logger.exception("Judging error")
        raise HandlerError(ERROR_MESSAGES["/api/judge-speech"])


# ---- FINAL RFD ----
@app.post("/api/final-rfd", response_model=models.FinalRfd)
def final_rfd(payload: models.FinalRfdRequest, gateway=Depends(get_gateway)):
    try:
        request = prompts.build_final_rfd_request(
            motion=payload.motion,
            format=payload.format,
            all_speeches=payload.allSpeeches,
        )
        result = gateway.complete(request)
        return models.FinalRfd(rfd=result.text)
    except Exception:
        logger.exception("RFD generation error")
        raise HandlerError(ERROR_MESSAGES["/api/final-rfd"])


# ---- HEALTH CHECK ----
@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Debate Coach API"}


def run():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Backend running on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
