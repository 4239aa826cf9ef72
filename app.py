# app.py
# DEPENDENCIES
import sys
import time
import signal
import uvicorn
from typing import Any
from typing import Dict
from typing import List
from pathlib import Path
from pydantic import Field
from fastapi import FastAPI
from fastapi import Request
from typing import Optional
from datetime import datetime
from pydantic import BaseModel
from fastapi import HTTPException
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from utils.logger import log_info
from utils.logger import log_error
from config.settings import settings
from utils.logger import LegalLensLogger
from utils.validators import TextValidator
from utils.validators import InputTooShortError
from services.flow_visualizer import FlowVisualizer
from services.document_analyzer import DocumentAnalyzer
from services.summary_generator import SummaryGenerator
from services.question_answering import QuestionAnswerer
from services.question_answering import SUGGESTED_QUESTIONS


# PYDANTIC SCHEMAS
class TextRequest(BaseModel):
    text : Optional[str] = Field(default = None, description = "Plain document text")


class ChatRequest(BaseModel):
    question : Optional[str] = Field(default = None, description = "Free-text question")
    context  : Optional[str] = Field(default = None, description = "Document text the question is asked against")


class HealthResponse(BaseModel):
    status          : str
    version         : str
    timestamp       : str
    services_loaded : int


class ErrorResponse(BaseModel):
    error     : str
    detail    : str
    timestamp : str


class ValidationResponse(BaseModel):
    valid           : bool
    validation_type : str
    message         : str
    report          : Optional[Dict[str, Any]] = None


class SuggestionsResponse(BaseModel):
    questions : List[str]


# SERVICES
class LegalLensService:
    """
    Holds one instance of every engine component for the lifetime of the process
    """
    def __init__(self):
        self.services = {"analyzer"   : DocumentAnalyzer(),
                         "summarizer" : SummaryGenerator(),
                         "answerer"   : QuestionAnswerer(),
                         "visualizer" : FlowVisualizer(),
                        }


    def get_service_status(self) -> Dict[str, Any]:
        return {"services"              : sorted(self.services),
                "total_services_loaded" : len(self.services),
               }


    def analyze(self, text: str) -> Dict[str, Any]:
        return self.services["analyzer"].analyze(text).to_dict()


    def summarize(self, text: str) -> Dict[str, Any]:
        return self.services["summarizer"].summarize(text).to_dict()


    def answer(self, question: str, context: str) -> Dict[str, Any]:
        return self.services["answerer"].answer(question, context).to_dict()


    def visualize(self, text: str) -> Dict[str, Any]:
        return self.services["visualizer"].generate(text).to_dict()


# Initialize logging
LegalLensLogger.setup(log_dir  = settings.LOG_DIR,
                      app_name = settings.APP_LOG_NAME,
                     )

engine_service : Optional[LegalLensService] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global engine_service
    log_info(f"{settings.APP_NAME} v{settings.APP_VERSION} starting up")

    try:
        engine_service = LegalLensService()
        log_info("All services initialized", services = engine_service.get_service_status()["services"])

    except Exception as e:
        log_error(e, context = {"stage" : "startup"})
        raise

    log_info(f"Server: {settings.HOST}:{settings.PORT}")

    try:
        yield

    finally:
        engine_service = None
        log_info("Server shutdown complete")


# Define the application
app = FastAPI(title       = settings.APP_NAME,
              version     = settings.APP_VERSION,
              description = "Rule-based legal document risk analysis",
              docs_url    = "/api/docs",
              redoc_url   = "/api/redoc",
              lifespan    = lifespan,
             )

# CORS middleware
app.add_middleware(CORSMiddleware,
                   allow_origins     = settings.CORS_ORIGINS,
                   allow_credentials = settings.CORS_ALLOW_CREDENTIALS,
                   allow_methods     = settings.CORS_ALLOW_METHODS,
                   allow_headers     = settings.CORS_ALLOW_HEADERS,
                  )


# HELPER FUNCTIONS
def get_service() -> LegalLensService:
    if not engine_service:
        raise HTTPException(status_code = 503,
                            detail      = "Service not initialized",
                           )

    return engine_service


def require_document_text(text: Optional[str], min_length: Optional[int] = None, max_length: Optional[int] = None) -> str:
    """
    Return the document text or raise a 400 describing why it was rejected
    """
    is_valid, validation_type, message = TextValidator.validate_text(text,
                                                                     min_length = min_length,
                                                                     max_length = max_length,
                                                                    )

    if not is_valid:
        raise HTTPException(status_code = 400,
                            detail      = message,
                           )

    return text


# API ROUTES
@app.get(f"{settings.API_PREFIX}/health", response_model = HealthResponse)
async def health_check():
    service_status = get_service().get_service_status()

    return HealthResponse(status          = "healthy",
                          version         = settings.APP_VERSION,
                          timestamp       = datetime.now().isoformat(),
                          services_loaded = service_status["total_services_loaded"],
                         )


@app.post(f"{settings.API_PREFIX}/analyze")
async def analyze_document(request: TextRequest):
    service = get_service()

    try:
        text   = require_document_text(request.text)
        result = service.analyze(text)

        log_info("Text analysis completed",
                 clauses    = len(result["clauses"]),
                 risk_score = result["risk_score"],
                )

        return result

    except HTTPException:
        raise

    except InputTooShortError as e:
        raise HTTPException(status_code = 400,
                            detail      = str(e),
                           )

    except Exception as e:
        log_error(e, context = {"endpoint" : "analyze"})

        raise HTTPException(status_code = 500,
                            detail      = f"Analysis failed: {repr(e)}",
                           )


@app.post(f"{settings.API_PREFIX}/summarize")
async def summarize_document(request: TextRequest):
    service = get_service()

    try:
        text = require_document_text(request.text)

        return service.summarize(text)

    except HTTPException:
        raise

    except InputTooShortError as e:
        raise HTTPException(status_code = 400,
                            detail      = str(e),
                           )

    except Exception as e:
        log_error(e, context = {"endpoint" : "summarize"})

        raise HTTPException(status_code = 500,
                            detail      = f"Summarization failed: {repr(e)}",
                           )


@app.post(f"{settings.API_PREFIX}/chat")
async def chat_with_document(request: ChatRequest):
    service  = get_service()
    question = TextValidator.sanitize_text(request.question)

    if not question:
        raise HTTPException(status_code = 400,
                            detail      = "No question provided",
                           )

    if not request.context or not request.context.strip():
        raise HTTPException(status_code = 400,
                            detail      = "No document context provided",
                           )

    try:
        return service.answer(question, request.context)

    except Exception as e:
        log_error(e, context = {"endpoint" : "chat"})

        raise HTTPException(status_code = 500,
                            detail      = f"Failed to process chat request: {repr(e)}",
                           )


@app.get(f"{settings.API_PREFIX}/chat/suggestions", response_model = SuggestionsResponse)
async def get_suggested_questions():
    return SuggestionsResponse(questions = list(SUGGESTED_QUESTIONS))


@app.post(f"{settings.API_PREFIX}/visualize")
async def visualize_document(request: TextRequest):
    service = get_service()
    # Any non-empty text can be visualized; relationships are pairwise, so the cap is tighter
    text    = require_document_text(request.text,
                                    min_length = 1,
                                    max_length = settings.MAX_FLOW_TEXT_LENGTH,
                                   )

    try:
        return service.visualize(text)

    except Exception as e:
        log_error(e, context = {"endpoint" : "visualize"})

        raise HTTPException(status_code = 500,
                            detail      = f"Failed to generate visualization data: {repr(e)}",
                           )


@app.post(f"{settings.API_PREFIX}/validate/text", response_model = ValidationResponse)
async def validate_text_endpoint(request: TextRequest):
    is_valid, validation_type, message = TextValidator.validate_text(request.text)

    return ValidationResponse(valid           = is_valid,
                              validation_type = validation_type,
                              message         = message,
                              report          = TextValidator.get_validation_report(request.text) if is_valid else None,
                             )


# ERROR HANDLERS AND MIDDLEWARE
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(status_code = exc.status_code,
                        content     = ErrorResponse(error     = str(exc.detail),
                                                    detail    = str(exc.detail),
                                                    timestamp = datetime.now().isoformat(),
                                                   ).model_dump()
                       )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    log_error(exc, context = {"path" : request.url.path})

    return JSONResponse(status_code = 500,
                        content     = ErrorResponse(error     = "Internal server error",
                                                    detail    = str(exc),
                                                    timestamp = datetime.now().isoformat(),
                                                   ).model_dump()
                       )


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time   = time.time()
    response     = await call_next(request)
    process_time = time.time() - start_time

    log_info(f"API Request: {request.method} {request.url.path} - Status: {response.status_code} - Duration: {process_time:.3f}s")

    return response


def main():
    def signal_handler(sig, frame):
        print("\nReceived Ctrl+C, shutting down gracefully...")
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    try:
        uvicorn.run("app:app",
                    host      = settings.HOST,
                    port      = settings.PORT,
                    reload    = settings.RELOAD,
                    workers   = settings.WORKERS,
                    log_level = settings.LOG_LEVEL.lower(),
                   )

    except KeyboardInterrupt:
        print("\nServer stopped by user")

    except Exception as e:
        log_error(e, context = {"stage" : "server"})

        sys.exit(1)


# MAIN
if __name__ == "__main__":
    main()
