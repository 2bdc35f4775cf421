import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.database import init_db
from app.core.deps import ContentResolved
from app.core.logger import setup_logging
from app.i18n import messages as i18n
from app.routers import blogs


logger = logging.getLogger("app.main")

# Create database tables
init_db()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    i18n.load()
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} started, environment: {settings.ENVIRONMENT}")
    yield


app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_NAME,
    description="多用户博客前台",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc"
)


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_request(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = (time.time() - start_time) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({process_time:.1f}ms)")
    return response


@app.exception_handler(ContentResolved)
async def content_resolved_handler(request: Request, exc: ContentResolved):
    """文章已在 resolve_blog 中渲染完成"""
    return exc.response


@app.get("/health")
def health_check():
    return {"status": "healthy"}


# 博客路由包含 /{username} 通配, 必须最后注册
app.include_router(blogs.router)
