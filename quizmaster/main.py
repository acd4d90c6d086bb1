# quizmaster/main.py - FastAPI application
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizmaster import __version__
from quizmaster.config import settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="QuizMaster API",
    description="🧠 Adaptive quizzes, progress tracking and an AI learning tutor",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Create database tables on startup
@app.on_event("startup")
async def startup():
    try:
        logger.info("🚀 Starting QuizMaster API...")
        from quizmaster import models  # noqa: F401 - registers tables
        from quizmaster.database import engine, Base
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database tables created/verified")
        settings.configured_tutor_providers()
    except Exception as e:
        logger.error(f"❌ Startup error: {str(e)}")


@app.get("/")
async def root():
    """API status endpoint"""
    return {
        "message": f"🚀 QuizMaster API v{__version__} is running!",
        "version": __version__,
        "docs": "/docs",
        "status": "healthy",
        "features": [
            "🔐 Authentication with roles",
            "🧠 Adaptive quiz sessions",
            "📊 Progress tracking and leaderboard",
            "🤖 AI learning tutor",
            "🛠️ Admin question management"
        ]
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": "quizmaster-api",
        "version": __version__
    }


# Include routers
from quizmaster.api import admin, auth, chat, progress, questions, quiz  # noqa: E402

app.include_router(auth.router, prefix="/auth", tags=["🔐 Authentication & Profile"])
app.include_router(questions.router, prefix="/questions", tags=["📚 Questions"])
app.include_router(quiz.router, prefix="/quiz", tags=["🧠 Quiz System"])
app.include_router(progress.router, prefix="/progress", tags=["📊 Progress"])
app.include_router(chat.router, prefix="/chat", tags=["🤖 AI Tutor"])
app.include_router(admin.router, prefix="/admin", tags=["🛠️ Admin"])
logger.info("✅ All routers included successfully")


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"❌ Global error on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content={
            "status_code": 500,
            "is_success": False,
            "details": str(exc) if settings.debug else "Internal server error",
            "data": None
        }
    )
